"""
Token cost calculator for AI/ML API models.

Sandi Metz Principles:
- Single Responsibility: Calculate API costs
- Small methods: Each method < 10 lines
- Open/Closed: Extend the price table without touching logic

Prices are per thousand tokens in USD. The table is a best-effort example
and is incomplete: a model missing from it costs nothing, which callers must
not read as "matched a free entry".
"""

from dataclasses import dataclass
from decimal import Decimal
from types import MappingProxyType
from typing import Mapping

from aimlrelay.models.llm import DEFAULT_CURRENCY, UsageResult
from aimlrelay.utils.logger import get_logger

logger = get_logger(__name__)

PRICING_DESCRIPTION = """URL:
https://aimlapi.com/pricing

Notes:
- Pricing varies per model (OpenAI, Anthropic, Google, Meta, etc.)
- Always use the official page as the source of truth
"""

_THOUSAND = Decimal(1000)


@dataclass(frozen=True)
class PriceEntry:
    """Input and output price per thousand tokens."""

    input_price: Decimal
    output_price: Decimal

    @classmethod
    def of(cls, input_price: str, output_price: str) -> "PriceEntry":
        """Build an entry from decimal strings."""
        return cls(Decimal(input_price), Decimal(output_price))


ZERO_PRICE = PriceEntry(Decimal("0"), Decimal("0"))

PRICE_TABLE: Mapping[str, PriceEntry] = MappingProxyType(
    {
        # OpenAI
        "openai/gpt-4o": PriceEntry.of("0.005", "0.015"),
        "gpt-4o-2024-05-13": PriceEntry.of("0.005", "0.015"),
        "gpt-4o-mini": PriceEntry.of("0.003", "0.006"),
        "gpt-3.5-turbo": PriceEntry.of("0.001", "0.002"),
        # Anthropic
        "claude-3-5-sonnet-20240620": PriceEntry.of("0.003", "0.015"),
        "claude-3-haiku-20240307": PriceEntry.of("0.0008", "0.0024"),
        # Google
        "google/gemini-2.5-pro": PriceEntry.of("0.0025", "0.0075"),
        "google/gemma-3-4b-it": PriceEntry.of("0.0004", "0.0008"),
        # Meta
        "meta-llama/Meta-Llama-3.1-8B-Instruct-Turbo": PriceEntry.of(
            "0.0002", "0.0006"
        ),
        "meta-llama/Llama-3-8b-chat-hf": PriceEntry.of("0.0002", "0.0006"),
        # DeepSeek
        "deepseek-chat": PriceEntry.of("0.0006", "0.0012"),
        "deepseek-reasoner": PriceEntry.of("0.0015", "0.0030"),
    }
)


class CostCalculator:
    """
    Calculate costs for AI/ML API usage.

    Uses Decimal arithmetic so totals do not depend on float rounding.
    """

    def __init__(self, price_table: Mapping[str, PriceEntry] | None = None):
        """
        Initialize cost calculator.

        Args:
            price_table: Model to price mapping (uses PRICE_TABLE if None)
        """
        self._prices = PRICE_TABLE if price_table is None else price_table

    def get_entry(self, model: str) -> PriceEntry:
        """
        Get pricing for model.

        Args:
            model: Model name

        Returns:
            Price entry, or a zero entry for unknown models
        """
        entry = self._prices.get(model)
        if entry is None:
            logger.debug("No pricing for model, using zero cost", model=model)
            return ZERO_PRICE
        return entry

    @staticmethod
    def get_price(tokens: int, price_per_thousand: Decimal) -> Decimal:
        """Price a token count at a per-thousand-token rate."""
        return Decimal(tokens) / _THOUSAND * price_per_thousand

    @staticmethod
    def add_prices(*prices: Decimal) -> Decimal:
        """Sum component prices."""
        return sum(prices, Decimal("0"))

    def calculate(self, prompt_tokens: int, response_tokens: int, model: str) -> Decimal:
        """
        Calculate cost for an exchange.

        Args:
            prompt_tokens: Number of input tokens
            response_tokens: Number of output tokens
            model: Model name

        Returns:
            Cost in USD
        """
        entry = self.get_entry(model)
        input_price = self.get_price(prompt_tokens, entry.input_price)
        output_price = self.get_price(response_tokens, entry.output_price)
        return self.add_prices(input_price, output_price)

    def apply(self, usage: UsageResult, model: str) -> UsageResult:
        """
        Price a usage record.

        Args:
            usage: Unpriced usage record
            model: Model name used for the exchange

        Returns:
            New usage record carrying total price and currency
        """
        total = self.calculate(
            usage.prompt_token_count, usage.response_token_count, model
        )
        return usage.model_copy(
            update={"total_price": total, "currency": DEFAULT_CURRENCY}
        )
