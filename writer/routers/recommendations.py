import logging

from fastapi import APIRouter, Depends

from writer import dependencies as deps
from writer.schemas.blog import PublishOutcome
from writer.services.recommendations_service import RecommendationsService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/recommendations",
    response_model=PublishOutcome,
    response_model_exclude_none=True,
)
def list_recommendations(
    service: RecommendationsService = Depends(deps.get_recommendations_service),
):
    """Blog ids offered in the form's recommendation selects."""
    return service.list_recommendations()
