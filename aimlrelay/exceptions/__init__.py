"""
Custom exceptions for the application.
"""


class AppError(Exception):
    """Base exception for application errors."""

    pass


class TokenCountError(AppError):
    """Raised when text cannot be tokenized for a model."""

    def __init__(self, model: str, reason: str = ""):
        self.model = model
        message = f"Cannot count tokens for model [{model}]"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class ExceedsContextError(AppError):
    """Raised when a prompt does not fit the model's context window."""

    def __init__(self, model: str, prompt_token_count: int, context_length: int):
        self.model = model
        self.prompt_token_count = prompt_token_count
        self.context_length = context_length
        super().__init__(
            f"Token count [{prompt_token_count}] exceeds model [{model}] "
            f"max context [{context_length}]"
        )


class UnsupportedSinkError(AppError):
    """Raised when an output sink cannot push and flush events."""

    pass


class StreamError(AppError):
    """Raised when the response stream fails or times out."""

    pass


class WriteError(AppError):
    """Raised when a fragment cannot be delivered to the sink."""

    pass


class ConfigurationError(AppError):
    """Raised when configuration is invalid."""

    pass
