"""Domain value object for an image forwarded to the Honda Aid API."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ImageUpload:
    """Raw image bytes plus the metadata needed for a multipart part."""

    filename: str
    content: bytes
    content_type: str = "application/octet-stream"

    @property
    def is_empty(self) -> bool:
        return not self.content

    def as_multipart(self) -> tuple[str, bytes, str]:
        """Tuple form accepted by httpx ``files=``."""
        return (self.filename, self.content, self.content_type)
