"""Connection details API: hands out room tokens to clients."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from ..config import Settings, get_settings
from ..models.connection import ConnectionDetails
from ..services.connection import create_connection_details
from ..voice.factory import create_token_issuer

router = APIRouter(prefix="/api", tags=["connection"])
logger = logging.getLogger(__name__)


@router.get(
    "/connection-details",
    response_model=ConnectionDetails,
    responses={500: {"description": "Token could not be issued", "content": {"text/plain": {}}}},
)
async def get_connection_details(settings: Settings = Depends(get_settings)) -> Response:
    """
    Mint a participant token for a fresh room.
    The token also tells the media server which agent to dispatch.
    """
    try:
        issuer = create_token_issuer(settings)
        details = create_connection_details(settings, issuer)
    except Exception as e:
        logger.exception(f"Failed to create connection details: {e}")
        return PlainTextResponse(str(e), status_code=500)

    # Tokens are single-use per visit, never cache them
    return JSONResponse(
        content=details.model_dump(by_alias=True),
        headers={"Cache-Control": "no-store"},
    )
