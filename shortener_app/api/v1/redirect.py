import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import RedirectResponse

from shortener_app.dependencies import get_url_service
from shortener_app.services.url_service import URLService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["redirect"])


@router.get("/{short_id}", response_class=RedirectResponse, status_code=status.HTTP_302_FOUND)
def redirect_to_original_url(
    short_id: str,
    url_service: URLService = Depends(get_url_service)
):
    """
    Redirect a short URL to the original URL.

    This is the route the ``shortUrl`` returned by the shorten endpoint points
    at. Resolution goes through the same cache-aside path as the API.
    """
    original_url = url_service.resolve_url(short_id)

    if original_url is None:
        logger.warning("Short id not found for redirect: %s", short_id)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Shortened URL not found."
        )

    return RedirectResponse(url=original_url, status_code=status.HTTP_302_FOUND)
