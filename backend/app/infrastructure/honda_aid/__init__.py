"""Honda Aid REST API infrastructure package."""

from .api_client import HondaAidApiClient

__all__ = ["HondaAidApiClient"]
