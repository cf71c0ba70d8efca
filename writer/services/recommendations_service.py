import logging

import httpx

from writer.schemas.blog import PublishOutcome, Recommendation
from writer.settings import Settings, settings

logger = logging.getLogger(__name__)

NO_RECOMMENDATIONS_ERROR = "no recommendations found"


class RecommendationsService:
    """Reads the published blog index to offer recommendation choices."""

    def __init__(
        self,
        settings_obj: Settings = settings,
        transport: httpx.BaseTransport | None = None,
    ):
        self.settings = settings_obj
        self.transport = transport

    def list_recommendations(self) -> PublishOutcome:
        url = self.settings.RECOMMENDATIONS_URL
        try:
            with httpx.Client(transport=self.transport) as client:
                response = client.get(url)
                response.raise_for_status()
            payload = response.json()
        except httpx.HTTPError as e:
            logger.error(f"Failed to fetch recommendations from {url}: {e}")
            return PublishOutcome(success=False, error=NO_RECOMMENDATIONS_ERROR)
        except ValueError as e:
            logger.error(f"Recommendations payload at {url} is not JSON: {e}")
            return PublishOutcome(success=False, error=NO_RECOMMENDATIONS_ERROR)

        blogs = payload.get("blogs") if isinstance(payload, dict) else None
        if not blogs or not isinstance(blogs, list):
            logger.warning(f"No blogs listed in recommendations payload at {url}")
            return PublishOutcome(success=False, error=NO_RECOMMENDATIONS_ERROR)

        recommendations = [
            Recommendation(id=str(blog["id"]))
            for blog in blogs
            if isinstance(blog, dict) and blog.get("id")
        ]
        return PublishOutcome(success=True, message=recommendations)
