import logging

import frontmatter
import yaml

from writer.schemas.blog import BlogMetadata, PublishOutcome, Recommendation, Submission
from writer.settings import settings
from writer.utils import calculate_reading_time, derive_slug

logger = logging.getLogger(__name__)

NO_FILE_ERROR = "no file selected"
COMMIT_FAILED_ERROR = "failed to commit files to GitHub"
SUCCESS_MESSAGE = "Blog post published successfully"


class PublishService:
    def __init__(self, image_publisher, content_writer, image_folder: str | None = None):
        self.image_publisher = image_publisher
        self.content_writer = content_writer
        self.image_folder = image_folder or settings.IMAGE_FOLDER

    def publish(self, submission: Submission, access_token: str | None) -> PublishOutcome:
        """
        Upload the optional cover image, then commit the markdown and its
        metadata. Stops at the first failing step and always returns an outcome.
        """
        try:
            if not submission.markdown:
                return PublishOutcome(success=False, error=NO_FILE_ERROR)

            slug = derive_slug(submission.title)
            markdown = submission.markdown.decode("utf-8")

            card_image = None
            if submission.image:
                asset = self.image_publisher.publish(
                    submission.image,
                    self.image_folder,
                    f"blog-{slug}",
                    content_type=submission.image_content_type,
                )
                if not asset.success:
                    logger.warning(f"Image upload failed for {slug}: {asset.error}")
                    return PublishOutcome(
                        success=False, error=asset.error or "Image upload failed"
                    )
                card_image = asset.url

            metadata = build_metadata(submission, slug, markdown, card_image)

            result = self.content_writer.write_and_commit(
                access_token,
                markdown,
                metadata.to_json(),
                filename=slug,
                message=f"added blog about {submission.title}",
            )
            if not result.success:
                logger.warning(f"Commit failed for {slug}: {result.error}")
                return PublishOutcome(success=False, error=COMMIT_FAILED_ERROR)

            logger.info(f"Published blog post {slug}")
            return PublishOutcome(success=True, message=SUCCESS_MESSAGE)
        except Exception as e:
            logger.error(f"Unexpected error publishing blog post: {e}", exc_info=True)
            return PublishOutcome(success=False, error=str(e) or "Unexpected error")


def markdown_body(markdown: str) -> str:
    """Markdown without its frontmatter block; unparseable frontmatter is kept."""
    try:
        return frontmatter.loads(markdown).content
    except (yaml.YAMLError, ValueError) as e:
        logger.warning(f"Could not parse frontmatter, counting it as body text: {e}")
        return markdown


def build_metadata(
    submission: Submission,
    slug: str,
    markdown: str,
    card_image: str | None = None,
) -> BlogMetadata:
    readtime = submission.readtime or calculate_reading_time(markdown_body(markdown))
    return BlogMetadata(
        id=slug,
        title=submission.title,
        author=submission.author,
        publishDate=submission.publishDate,
        recommendations=[Recommendation(id=rec) for rec in submission.recommendations],
        readtime=readtime,
        tags=list(submission.tags),
        excerpt=submission.excerpt,
        cardImage=card_image,
    )
