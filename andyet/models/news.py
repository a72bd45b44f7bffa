from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ..core.database import Base


class News(Base):
    __tablename__ = "news"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    market_place_id = Column(Integer, ForeignKey("market_places.id"), nullable=False, index=True)

    created_at = Column(DateTime, default=func.now())
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now())

    market_place = relationship("MarketPlace", lazy="joined")

    def __repr__(self) -> str:
        return f"<News id={self.id} title={self.title!r} market_place_id={self.market_place_id}>"
