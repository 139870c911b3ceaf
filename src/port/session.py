"""Session port: injected access to the signed-in reader's credentials."""

from typing import Protocol


class SessionProvider(Protocol):
    """Supplies credentials to client components that call the API.

    Implementations return None when there is no active session, which
    callers surface as a missing-credential condition.
    """

    def get_access_token(self) -> str | None:
        """Bearer token for the LinguFlow API."""
        ...
