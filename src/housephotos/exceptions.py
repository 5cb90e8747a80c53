"""
Exception types for the house photo pipeline.

Provides:
- PipelineError base class carrying a cause and debugging context
- Fatal page errors raised on the producer path
- ChannelClosed for sends on a closed handoff channel
"""
from typing import Optional


class PipelineError(Exception):
    """
    Base exception for all pipeline errors.

    Attributes:
        message: Human-readable error description
        cause: Original exception if wrapping
        context: Additional context dict for debugging
    """

    def __init__(
        self,
        message: str,
        cause: Optional[Exception] = None,
        context: Optional[dict] = None,
    ):
        self.message = message
        self.cause = cause
        self.context = context or {}
        super().__init__(message)

    def __str__(self) -> str:
        parts = [self.message]
        if self.cause:
            parts.append(f"Caused by: {self.cause}")
        return " | ".join(parts)


class PageFetchError(PipelineError):
    """A page request failed at the transport level."""


class RetryExhaustedError(PageFetchError):
    """A page endpoint kept answering with a non-200 status."""


class PageDecodeError(PipelineError):
    """A page body could not be decoded into houses."""


class ChannelClosed(PipelineError):
    """Raised when sending on a closed handoff channel."""
