"""FastAPI app: POST /process-video, the push endpoint for new raw uploads."""

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.responses import PlainTextResponse

from .config import bootstrap_env, get_settings
from .deps import (
    get_transcoder,
    get_video_storage,
    settings_for_app,
    staging_for_app,
    transcoder_for_app,
    video_storage_for_app,
)
from .errors import MalformedRequestError, StorageError, TranscodeError
from .interfaces import Transcoder
from .logging_config import configure_logging, resolve_log_level
from .models import parse_push_body
from .pipeline import process_video
from .storage import VideoStorage

# Load .env from VIDEO_SERVICE_ENV_FILE if set (local development). Unset in Cloud Run.
bootstrap_env()
configure_logging(get_settings().log_level)
logger = logging.getLogger(__name__)

SUCCESS_BODY = "Video processed successfully"
BAD_REQUEST_BODY = "Bad Request: missing filename."
TRANSCODE_FAILED_BODY = "Error processing video"
STORAGE_FAILED_BODY = "Error accessing video storage"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create staging directories and build collaborators before serving requests."""
    staging_for_app(app).setup_directories()
    video_storage_for_app(app)
    transcoder_for_app(app)
    logger.info("Server running at http://localhost:%s", settings_for_app(app).port)
    yield


app = FastAPI(title="Video Processing Service", version="0.1.0", lifespan=lifespan)


@app.post("/process-video", response_class=PlainTextResponse)
async def process_video_endpoint(
    request: Request,
    video_storage: VideoStorage = Depends(get_video_storage),
    transcoder: Transcoder = Depends(get_transcoder),
) -> PlainTextResponse:
    """Download, transcode and upload the raw video named in the push message."""
    body = await request.body()
    try:
        event = parse_push_body(body)
    except MalformedRequestError as e:
        logger.warning("process-video: bad request: %s", e)
        return PlainTextResponse(BAD_REQUEST_BODY, status_code=400)

    try:
        await asyncio.to_thread(process_video, event.name, video_storage, transcoder)
    except TranscodeError as e:
        logger.error("process-video: name=%s transcode failed: %s", event.name, e)
        return PlainTextResponse(TRANSCODE_FAILED_BODY, status_code=500)
    except StorageError as e:
        logger.error("process-video: name=%s storage failed: %s", event.name, e)
        return PlainTextResponse(STORAGE_FAILED_BODY, status_code=502)
    return PlainTextResponse(SUCCESS_BODY, status_code=200)


def run() -> None:
    """Console entrypoint: serve the app with uvicorn on $PORT."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=settings.port,
        log_level=resolve_log_level(settings.log_level),
    )
