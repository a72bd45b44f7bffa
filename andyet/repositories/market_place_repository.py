from typing import Optional

from sqlalchemy.orm import Session

from ..models.market_place import MarketPlace


class MarketPlaceRepository:
    def __init__(self, session: Session):
        self.session = session

    def find_one(self, market_place_id: int) -> Optional[MarketPlace]:
        return self.session.get(MarketPlace, market_place_id)
