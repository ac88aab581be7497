import logging

from fastapi import APIRouter, Depends, HTTPException, status

from shortener_app.dependencies import get_url_service
from shortener_app.schemas.url import (
    ErrorResponse,
    ResolveUrlResponse,
    ShortenUrlRequest,
    ShortenUrlResponse,
)
from shortener_app.services.url_service import URLService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/url",
    tags=["urls"],
    responses={500: {"model": ErrorResponse}},
)

# Handlers are plain functions: FastAPI runs them on its thread pool,
# so the service is called from many threads at once.


@router.post(
    "/shorten",
    response_model=ShortenUrlResponse,
    responses={400: {"model": ErrorResponse}},
)
def shorten_url(
    url_data: ShortenUrlRequest,
    url_service: URLService = Depends(get_url_service)
):
    """Shorten a URL. Shortening the same URL again returns the same short id."""
    response = url_service.shorten_url(url_data.original_url)
    logger.info("Shortened %s to %s", url_data.original_url, response.short_url)
    return response


@router.get(
    "/{short_id}",
    response_model=ResolveUrlResponse,
    responses={404: {"model": ErrorResponse}},
)
def resolve_url(
    short_id: str,
    url_service: URLService = Depends(get_url_service)
):
    """Resolve a short id back to its original URL"""
    original_url = url_service.resolve_url(short_id)
    if original_url is None:
        logger.warning("Short id not found: %s", short_id)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Shortened URL not found."
        )

    logger.info("Resolved %s to %s", short_id, original_url)
    return ResolveUrlResponse(original_url=original_url)
