from .news_repository import NewsRepository
from .subscription_repository import SubscriptionRepository
from .market_place_repository import MarketPlaceRepository

__all__ = ["NewsRepository", "SubscriptionRepository", "MarketPlaceRepository"]
