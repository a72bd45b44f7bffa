"""
News operations: persistence through the repositories and e-mail
notification of the marketplace's subscribers on creation.
"""

from typing import List, Optional, Tuple

import structlog

from ..schemas.news import NewsRequest
from ..core.performance_timer import time_function, time_stage
from ..exceptions import ValidationError
from ..models.market_place import MarketPlace
from ..models.news import News
from ..repositories.market_place_repository import MarketPlaceRepository
from ..repositories.news_repository import NewsRepository, SORTABLE_FIELDS
from ..repositories.subscription_repository import SubscriptionRepository
from .mail_service import MailService

logger = structlog.get_logger(__name__)

ENTITY_NAME = "news"
NOTIFICATION_SUBJECT_SUFFIX = " vous a envoyé une News !"
# Largest OFFSET a signed 64-bit SQL integer can carry
MAX_OFFSET = 2 ** 63 - 1


def build_notification_subject(market_place_name: str) -> str:
    return f"{market_place_name}{NOTIFICATION_SUBJECT_SUFFIX}"


def build_notification_content(title: str, content: str) -> str:
    return f"{title}\n\n\n{content}"


def parse_sort(sort: Optional[str]) -> Tuple[str, bool]:
    """Parse ``field[,asc|desc]`` into (field, descending)."""
    if not sort:
        return "id", False

    parts = [part.strip() for part in sort.split(",")]
    field = parts[0]
    direction = parts[1].lower() if len(parts) > 1 and parts[1] else "asc"

    if field not in SORTABLE_FIELDS or direction not in ("asc", "desc") or len(parts) > 2:
        raise ValidationError(ENTITY_NAME, "sortnotsupported", f"Unsupported sort expression: {sort}")

    return field, direction == "desc"


class NewsService:

    def __init__(
        self,
        news_repository: NewsRepository,
        subscription_repository: SubscriptionRepository,
        market_place_repository: MarketPlaceRepository,
        mail_service: MailService
    ):
        self.news_repository = news_repository
        self.subscription_repository = subscription_repository
        self.market_place_repository = market_place_repository
        self.mail_service = mail_service

    @time_function("news.create")
    def create_news(self, request: NewsRequest) -> News:
        if request.id is not None:
            raise ValidationError(ENTITY_NAME, "idexists", "A new news cannot already have an ID")

        market_place = self._resolve_market_place(request.market_place.id)
        news = News(
            title=request.title,
            content=request.content,
            market_place_id=market_place.id
        )
        result = self.news_repository.save(news)
        self.notify_subscribers(result)
        return result

    @time_function("news.update")
    def update_news(self, request: NewsRequest) -> News:
        """Persist the request over the stored item, inserting it when the id is unknown."""
        market_place = self._resolve_market_place(request.market_place.id)

        news = self.news_repository.find_one(request.id)
        if news is None:
            news = News(id=request.id)

        news.title = request.title
        news.content = request.content
        news.market_place_id = market_place.id
        news.market_place = market_place
        return self.news_repository.save(news)

    def notify_subscribers(self, news: News) -> int:
        """E-mail every subscriber of the news's marketplace, one message each, in order."""
        market_place_id = news.market_place.id
        subscriptions = [
            subscription for subscription in self.subscription_repository.find_all()
            if subscription.id_market_place == market_place_id
        ]

        subject = build_notification_subject(news.market_place.name)
        content = build_notification_content(news.title, news.content)

        with time_stage("news.notify_subscribers"):
            for subscription in subscriptions:
                self.mail_service.send_email(subscription.user.email, subject, content, False, False)

        logger.info(
            "Subscribers notified",
            news_id=news.id,
            market_place_id=market_place_id,
            recipients=len(subscriptions)
        )
        return len(subscriptions)

    @time_function("news.list")
    def get_news_page(self, page: int, size: int, sort: Optional[str] = None) -> Tuple[List[News], int]:
        field, descending = parse_sort(sort)
        total = self.news_repository.count()

        offset = page * size
        if offset > MAX_OFFSET:
            # Past any row the store can address
            return [], total

        items = self.news_repository.find_page(offset=offset, limit=size, sort_field=field, descending=descending)
        return items, total

    @time_function("news.get")
    def get_news(self, news_id: int) -> Optional[News]:
        return self.news_repository.find_one(news_id)

    @time_function("news.delete")
    def delete_news(self, news_id: int) -> None:
        self.news_repository.delete(news_id)

    @time_function("news.list_by_market_place")
    def get_market_place_news(self, market_place_id: int) -> List[News]:
        return [
            news for news in self.news_repository.find_all()
            if news.market_place_id == market_place_id
        ]

    def _resolve_market_place(self, market_place_id: int) -> MarketPlace:
        market_place = self.market_place_repository.find_one(market_place_id)
        if market_place is None:
            raise ValidationError(
                ENTITY_NAME,
                "marketplacenotfound",
                f"MarketPlace {market_place_id} does not exist"
            )
        return market_place
