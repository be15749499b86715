"""
Random image search endpoint backed by Wikimedia Commons
"""
import logging
import random
from typing import Optional

import requests
from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse

from image_uploader.models.config import encode_uri_component

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["search"])

WIKIMEDIA_API_URL = "https://commons.wikimedia.org/w/api.php"
WIKIMEDIA_FILE_URL = "https://commons.wikimedia.org/wiki/Special:FilePath/{title}?width=800"
PLACEHOLDER_URL = "https://placehold.co/800x600/6366f1/white?text={text}"

# Only the first few hits are relevant enough to pick from
MAX_CANDIDATES = 5
REQUEST_TIMEOUT = 10


def placeholder_url(text: str) -> str:
    return PLACEHOLDER_URL.format(text=encode_uri_component(text))


def search_wikimedia(query: str) -> list[dict]:
    """
    Search the File namespace of Wikimedia Commons

    Args:
        query: Free-text search term

    Returns:
        Raw search hits, each with at least a ``title`` key

    Raises:
        requests.RequestException: If the request fails
        ValueError: If the response is not JSON
    """
    response = requests.get(
        WIKIMEDIA_API_URL,
        params={
            "action": "query",
            "list": "search",
            "srsearch": query,
            "srnamespace": 6,
            "format": "json",
            "origin": "*",
        },
        timeout=REQUEST_TIMEOUT,
    )
    response.raise_for_status()
    data = response.json()
    return (data.get("query") or {}).get("search") or []


@router.get("/search-image")
def search_image(q: Optional[str] = Query(default=None)):
    """
    Return a random image URL matching the query

    Falls back to a placeholder image showing the query text when the
    search yields nothing or fails.
    """
    if not q:
        return JSONResponse(status_code=400, content={"error": "No query provided"})

    try:
        results = search_wikimedia(q)
        if results:
            pick = results[random.randrange(min(MAX_CANDIDATES, len(results)))]
            title = pick["title"].replace("File:", "", 1)
            return {"imageUrl": WIKIMEDIA_FILE_URL.format(title=encode_uri_component(title))}
    except (requests.RequestException, ValueError, KeyError, TypeError, AttributeError) as e:
        logger.error(f"Image search error: {e}")

    return {"imageUrl": placeholder_url(q)}
