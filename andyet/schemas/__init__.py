from .news import MarketPlaceRef, NewsRequest, NewsResponse

__all__ = ["MarketPlaceRef", "NewsRequest", "NewsResponse"]
