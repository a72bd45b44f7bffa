from sqlalchemy import Column, Integer, ForeignKey
from sqlalchemy.orm import relationship

from ..core.database import Base


class Subscription(Base):
    __tablename__ = "subscriptions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    # Plain identifier, subscriptions do not load the marketplace itself
    id_market_place = Column(Integer, nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    user = relationship("User", lazy="joined")
