import logging
from typing import Optional, Tuple

from fastapi import APIRouter, Depends, File, Request, UploadFile
from starlette.concurrency import run_in_threadpool

from writer import dependencies as deps
from writer.schemas.blog import PublishOutcome, Submission
from writer.security import get_access_token
from writer.services.image_service import resolve_image_type
from writer.services.publish_service import PublishService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/publish", response_model=PublishOutcome, response_model_exclude_none=True
)
async def publish_post(
    request: Request,
    markdown: Optional[UploadFile] = File(None, description="Post body (.md)"),
    image: Optional[UploadFile] = File(None, description="Optional cover image"),
    access_token: Optional[str] = Depends(get_access_token),
    service: PublishService = Depends(deps.get_publish_service),
):
    """
    Accept the writer form (multipart) and publish the post to GitHub.
    Always answers with a structured outcome, even when publishing fails.
    """
    # Text fields, including the numbered recommendation/tag slots
    form = await request.form()
    markdown_data, _name, _type = await read_upload(markdown)
    image_data, image_name, image_type = await read_upload(image)

    submission = Submission.from_form(
        form,
        markdown=markdown_data,
        image=image_data,
        image_filename=image_name,
        image_content_type=resolve_image_type(image_name, image_type),
    )
    logger.info(f"Received blog submission '{submission.title}'")
    return await run_in_threadpool(service.publish, submission, access_token)


async def read_upload(
    upload: Optional[UploadFile],
) -> Tuple[Optional[bytes], Optional[str], Optional[str]]:
    """Read an uploaded file; an empty file input counts as no file."""
    if upload is None or not upload.filename:
        return None, None, None
    data = await upload.read()
    if not data:
        return None, None, None
    return data, upload.filename, upload.content_type
