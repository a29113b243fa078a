"""Abstract bearer-token storage (port)."""

from abc import ABC, abstractmethod


class TokenStore(ABC):
    """Port for the single ``access_token`` slot."""

    @abstractmethod
    def get_token(self) -> str | None:
        """Return the stored token, or None when logged out."""
        ...

    @abstractmethod
    def store_token(self, token: str) -> None:
        ...

    @abstractmethod
    def remove_token(self) -> None:
        ...
