from fastapi import Depends

from writer.security import get_settings
from writer.services.github_service import GitHubContentWriter
from writer.services.image_service import ImagePublisher
from writer.services.publish_service import PublishService
from writer.services.recommendations_service import RecommendationsService


def get_image_publisher(current_settings=Depends(get_settings)):
    return ImagePublisher(settings_obj=current_settings)


def get_content_writer(current_settings=Depends(get_settings)):
    return GitHubContentWriter(settings_obj=current_settings)


def get_publish_service(
    image_publisher=Depends(get_image_publisher),
    content_writer=Depends(get_content_writer),
    current_settings=Depends(get_settings),
):
    return PublishService(
        image_publisher=image_publisher,
        content_writer=content_writer,
        image_folder=current_settings.IMAGE_FOLDER,
    )


def get_recommendations_service(current_settings=Depends(get_settings)):
    return RecommendationsService(settings_obj=current_settings)
