"""Errors raised by the trail suggestion pipeline.

Faults from the generative service itself are not wrapped; they reach the
caller as the SDK raised them.
"""


class TrailSuggestionError(Exception):
    """Base class for errors raised by this package."""


class ConfigurationError(TrailSuggestionError):
    """The service is not configured well enough to attempt a search."""


class MissingApiKeyError(ConfigurationError):
    def __init__(self, message: str = "GEMINI_API_KEY is not configured.") -> None:
        super().__init__(message)
