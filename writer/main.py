import logging

from fastapi import Depends, FastAPI

from writer.routers import publish, recommendations
from writer.security import get_api_key
from writer.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Writer Backend",
    description="Backend to upload md and json files to the portfolio app",
)

app.include_router(publish.router, dependencies=[Depends(get_api_key)])
app.include_router(recommendations.router, dependencies=[Depends(get_api_key)])


@app.get("/")
async def root():
    return {"message": "Writer Backend is running"}
