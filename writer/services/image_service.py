import base64
import logging
from typing import Optional

import cloudinary
import cloudinary.uploader

from writer.errors import InputValidationError
from writer.schemas.blog import ImageAsset
from writer.settings import Settings, settings

logger = logging.getLogger(__name__)

DEFAULT_IMAGE_TYPE = "image/jpeg"


class ImagePublisher:
    """
    Uploads cover images to Cloudinary through the official SDK.
    """

    def __init__(self, settings_obj: Settings = settings):
        self.settings = settings_obj
        cloudinary.config(
            cloud_name=settings_obj.CLOUDINARY_CLOUD_NAME,
            api_key=settings_obj.CLOUDINARY_API_KEY,
            api_secret=settings_obj.CLOUDINARY_API_SECRET,
            secure=True,
        )

    def publish(
        self,
        image_data: bytes | str,
        folder: str,
        asset_id: str,
        content_type: Optional[str] = None,
    ) -> ImageAsset:
        """
        Upload an image and return its public HTTPS URL.
        Failures are reported on the returned ImageAsset, never raised.
        """
        try:
            if not (
                self.settings.CLOUDINARY_CLOUD_NAME
                and self.settings.CLOUDINARY_API_KEY
                and self.settings.CLOUDINARY_API_SECRET
            ):
                raise InputValidationError("Cloudinary credentials are not configured")

            result = cloudinary.uploader.upload(
                encode_image(image_data, content_type),
                folder=folder,
                public_id=asset_id,
                overwrite=True,
                resource_type="image",
            )

            logger.info(f"Uploaded image {result.get('public_id')} to Cloudinary")
            return ImageAsset(
                success=True,
                url=result.get("secure_url"),
                asset_id=result.get("public_id"),
            )
        except Exception as e:
            logger.error(f"Cloudinary upload error: {e}")
            return ImageAsset(success=False, error=str(e) or "Image upload failed")


def encode_image(image_data: bytes | str, content_type: Optional[str] = None) -> str:
    """
    Wrap raw bytes in a base64 data URI. Strings are assumed to be ready
    for transport already (data URI or remote URL) and pass through.
    """
    if isinstance(image_data, str):
        return image_data
    mime = content_type or DEFAULT_IMAGE_TYPE
    encoded = base64.b64encode(image_data).decode("ascii")
    return f"data:{mime};base64,{encoded}"


def get_content_type_from_filename(filename: str) -> str:
    """
    Determine content type from file extension
    """
    filename = filename.lower()
    if filename.endswith((".jpg", ".jpeg")):
        return "image/jpeg"
    elif filename.endswith(".png"):
        return "image/png"
    elif filename.endswith(".gif"):
        return "image/gif"
    elif filename.endswith(".svg"):
        return "image/svg+xml"
    elif filename.endswith(".webp"):
        return "image/webp"
    else:
        return "application/octet-stream"


def resolve_image_type(
    filename: Optional[str], content_type: Optional[str]
) -> Optional[str]:
    """Prefer the upload's declared image type, fall back to the extension."""
    if content_type and content_type.startswith("image/"):
        return content_type
    if filename:
        guessed = get_content_type_from_filename(filename)
        if guessed.startswith("image/"):
            return guessed
    return None
