from typing import List, Optional

import structlog
from fastapi import APIRouter, Depends, Query, Response, status

from ...dependencies import get_news_service
from ....schemas.news import NewsRequest, NewsResponse
from ....config import get_settings
from ....services.news_service import NewsService, ENTITY_NAME
from ....utils import header_utils
from ....utils.pagination_utils import generate_pagination_headers

logger = structlog.get_logger(__name__)

router = APIRouter()

NEWS_BASE_URL = "/api/newss"


def _create(news: NewsRequest, response: Response, news_service: NewsService) -> NewsResponse:
    result = news_service.create_news(news)

    response.status_code = status.HTTP_201_CREATED
    response.headers["Location"] = f"{NEWS_BASE_URL}/{result.id}"
    response.headers.update(header_utils.create_entity_creation_alert(ENTITY_NAME, str(result.id)))
    return NewsResponse.model_validate(result)


@router.post("/newss", response_model=NewsResponse, status_code=status.HTTP_201_CREATED)
def create_news(
    news: NewsRequest,
    response: Response,
    news_service: NewsService = Depends(get_news_service)
):
    """Create a news item and e-mail the subscribers of its marketplace."""
    logger.debug("REST request to save News", news=news.model_dump(by_alias=True))

    return _create(news, response, news_service)


@router.put("/newss", response_model=NewsResponse)
def update_news(
    news: NewsRequest,
    response: Response,
    news_service: NewsService = Depends(get_news_service)
):
    """Update a news item, storing it under its id if unknown. Without an id the request is a creation."""
    logger.debug("REST request to update News", news=news.model_dump(by_alias=True))

    if news.id is None:
        return _create(news, response, news_service)

    result = news_service.update_news(news)

    response.headers.update(header_utils.create_entity_update_alert(ENTITY_NAME, str(news.id)))
    return NewsResponse.model_validate(result)


@router.get("/newss", response_model=List[NewsResponse])
def get_all_news(
    response: Response,
    page: int = Query(0, ge=0, description="Zero-based page index"),
    size: Optional[int] = Query(None, ge=1, description="Page size"),
    sort: Optional[str] = Query(None, description="Sort expression, e.g. 'id,desc'"),
    news_service: NewsService = Depends(get_news_service)
):
    logger.debug("REST request to get a page of News", page=page, size=size, sort=sort)

    settings = get_settings()
    page_size = min(size or settings.default_page_size, settings.max_page_size)

    items, total = news_service.get_news_page(page, page_size, sort)

    response.headers.update(generate_pagination_headers(total, page, page_size, NEWS_BASE_URL))
    return [NewsResponse.model_validate(item) for item in items]


@router.get("/newss/{news_id}", response_model=NewsResponse)
def get_news(
    news_id: int,
    news_service: NewsService = Depends(get_news_service)
):
    logger.debug("REST request to get News", news_id=news_id)

    news = news_service.get_news(news_id)
    if news is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    return NewsResponse.model_validate(news)


@router.delete("/newss/{news_id}")
def delete_news(
    news_id: int,
    news_service: NewsService = Depends(get_news_service)
):
    logger.debug("REST request to delete News", news_id=news_id)

    news_service.delete_news(news_id)

    return Response(
        status_code=status.HTTP_200_OK,
        headers=header_utils.create_entity_deletion_alert(ENTITY_NAME, str(news_id))
    )


@router.get("/marketPlaceNews/{market_place_id}", response_model=List[NewsResponse])
def get_market_place_news(
    market_place_id: int,
    news_service: NewsService = Depends(get_news_service)
):
    """All news of one marketplace, unpaginated."""
    logger.debug("REST request to get News of MarketPlace", market_place_id=market_place_id)

    return [
        NewsResponse.model_validate(news)
        for news in news_service.get_market_place_news(market_place_id)
    ]
