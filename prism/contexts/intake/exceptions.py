"""Custom exceptions for the intake context."""

from typing import Optional


class ProfileFetchError(Exception):
    """
    Exception raised when the upstream provider cannot deliver a profile.

    Attributes:
        message: Error description
        url: Profile URL that was requested
        reason: Underlying cause reported by the provider, if any
    """

    def __init__(self, message: str, url: Optional[str] = None, reason: Optional[str] = None):
        self.message = message
        self.url = url
        self.reason = reason

        parts = [message]
        if url:
            parts.append(f"URL: {url}")
        if reason:
            parts.append(f"Reason: {reason}")

        super().__init__("\n".join(parts))


class EmptyProfileError(ProfileFetchError):
    """
    Exception raised when the provider returns no content for a profile.

    The parsing core accepts any string, so this check belongs to the caller
    before parsing starts.
    """

    pass


class InvalidProfileURLError(ValueError):
    """Exception raised when a URL is not a LinkedIn profile URL."""

    pass
