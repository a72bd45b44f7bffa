from fastapi import Depends
from sqlalchemy.orm import Session

from ..core.database import get_db
from ..repositories.news_repository import NewsRepository
from ..repositories.subscription_repository import SubscriptionRepository
from ..repositories.market_place_repository import MarketPlaceRepository
from ..services.mail_service import MailService
from ..services.news_service import NewsService
from ..config import get_settings


def get_news_repository(db: Session = Depends(get_db)) -> NewsRepository:
    return NewsRepository(db)


def get_subscription_repository(db: Session = Depends(get_db)) -> SubscriptionRepository:
    return SubscriptionRepository(db)


def get_market_place_repository(db: Session = Depends(get_db)) -> MarketPlaceRepository:
    return MarketPlaceRepository(db)


def get_mail_service() -> MailService:
    return MailService(get_settings())


def get_news_service(
    news_repository: NewsRepository = Depends(get_news_repository),
    subscription_repository: SubscriptionRepository = Depends(get_subscription_repository),
    market_place_repository: MarketPlaceRepository = Depends(get_market_place_repository),
    mail_service: MailService = Depends(get_mail_service)
) -> NewsService:
    return NewsService(news_repository, subscription_repository, market_place_repository, mail_service)
