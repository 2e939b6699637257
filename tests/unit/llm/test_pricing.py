"""
Tests for cost calculator.
"""

from decimal import Decimal

import pytest

from aimlrelay.llm.pricing import (
    PRICE_TABLE,
    PRICING_DESCRIPTION,
    ZERO_PRICE,
    CostCalculator,
    PriceEntry,
)
from aimlrelay.models.llm import UsageResult


class TestCostCalculator:
    """Test cost calculator functionality."""

    @pytest.fixture
    def calculator(self) -> CostCalculator:
        """Create cost calculator instance."""
        return CostCalculator()

    def test_calculate_gpt4o_cost(self, calculator: CostCalculator) -> None:
        """Test calculating cost for openai/gpt-4o."""
        cost = calculator.calculate(1000, 1000, "openai/gpt-4o")

        # Input: 1000/1K * $0.005, Output: 1000/1K * $0.015
        assert cost == Decimal("0.020")

    def test_calculate_deepseek_cost(self, calculator: CostCalculator) -> None:
        """Test calculating cost for deepseek-chat."""
        cost = calculator.calculate(3, 2, "deepseek-chat")

        # 3/1K * 0.0006 + 2/1K * 0.0012
        assert cost == Decimal("0.0000042")

    @pytest.mark.parametrize("model", sorted(PRICE_TABLE))
    def test_cost_matches_per_thousand_formula(self, calculator, model) -> None:
        """Test every table entry prices prompt and response separately."""
        entry = PRICE_TABLE[model]
        expected = Decimal(1234) / 1000 * entry.input_price + (
            Decimal(567) / 1000 * entry.output_price
        )

        assert calculator.calculate(1234, 567, model) == expected

    def test_calculate_zero_tokens(self, calculator: CostCalculator) -> None:
        """Test calculating cost with zero tokens."""
        assert calculator.calculate(0, 0, "gpt-3.5-turbo") == 0

    def test_calculate_unknown_model(self, calculator: CostCalculator) -> None:
        """Test unknown models cost nothing."""
        assert calculator.calculate(1000, 1000, "unknown-model") == 0

    def test_lookup_is_exact(self, calculator: CostCalculator) -> None:
        """Test model identifiers are matched exactly."""
        assert calculator.get_entry("gpt-3.5-turbo-0125") is ZERO_PRICE

    def test_get_price(self) -> None:
        """Test per-thousand pricing of a single component."""
        assert CostCalculator.get_price(500, Decimal("0.002")) == Decimal("0.001")

    def test_add_prices(self) -> None:
        """Test summing component prices."""
        total = CostCalculator.add_prices(Decimal("0.1"), Decimal("0.2"))

        assert total == Decimal("0.3")

    def test_custom_price_table(self) -> None:
        """Test the table can be extended without touching logic."""
        calculator = CostCalculator({"my-model": PriceEntry.of("1", "2")})

        assert calculator.calculate(1000, 1000, "my-model") == Decimal("3")
        assert calculator.calculate(1000, 1000, "openai/gpt-4o") == 0

    def test_apply_prices_usage(self, calculator: CostCalculator) -> None:
        """Test pricing a usage record."""
        usage = UsageResult.from_counts(1000, 2000)

        priced = calculator.apply(usage, "gpt-3.5-turbo")

        assert priced.total_price == Decimal("0.005")
        assert priced.currency == "USD"
        assert priced.total_token_count == 3000
        assert usage.total_price == 0

    def test_apply_is_idempotent(self, calculator: CostCalculator) -> None:
        """Test identical inputs give identical records."""
        usage = UsageResult.from_counts(321, 123)

        first = calculator.apply(usage, "claude-3-haiku-20240307")
        second = calculator.apply(usage, "claude-3-haiku-20240307")

        assert first == second
        assert first.model_dump_json() == second.model_dump_json()

    def test_price_table_is_read_only(self) -> None:
        """Test the shared price table cannot be mutated."""
        with pytest.raises(TypeError):
            PRICE_TABLE["gpt-4o-mini"] = ZERO_PRICE  # type: ignore[index]

    def test_pricing_description_names_source(self) -> None:
        """Test the pricing notes point at the official page."""
        assert "https://aimlapi.com/pricing" in PRICING_DESCRIPTION
