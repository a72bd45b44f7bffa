from sqlalchemy import Column, Integer, String

from ..core.database import Base


class MarketPlace(Base):
    __tablename__ = "market_places"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
