from .market_place import MarketPlace
from .user import User
from .subscription import Subscription
from .news import News

__all__ = ["MarketPlace", "User", "Subscription", "News"]
