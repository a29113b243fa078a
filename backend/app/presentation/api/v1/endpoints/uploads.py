"""Conversion of multipart uploads into domain ImageUpload values."""

from fastapi import UploadFile

from app.domain.entities import ImageUpload


async def read_image(file: UploadFile | None) -> ImageUpload | None:
    """Read an uploaded image; None when the form carried no file part."""
    if file is None:
        return None
    content = await file.read()
    return ImageUpload(
        filename=file.filename or "image",
        content=content,
        content_type=file.content_type or "application/octet-stream",
    )
