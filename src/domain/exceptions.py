"""Domain exceptions for problink."""


class ProbLinkError(Exception):
    """Base exception for all problink errors."""

    pass


class UpstreamFetchError(ProbLinkError):
    """Upstream judge API could not be reached or returned an unusable body."""

    pass


class CacheError(ProbLinkError):
    """Contest cache store could not be read or written."""

    pass


class TelegramAPIError(ProbLinkError):
    """Telegram Bot API call failed."""

    def __init__(self, method: str, description: str):
        self.method = method
        self.description = description
        super().__init__(f"Telegram API {method} failed: {description}")


class ConfigurationError(ProbLinkError):
    """Required setting is missing."""

    pass


class PreloadSourceError(ProbLinkError):
    """Bulk preload source has an unsupported shape."""

    pass
