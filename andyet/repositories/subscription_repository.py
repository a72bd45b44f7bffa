from typing import List

from sqlalchemy.orm import Session

from ..models.subscription import Subscription


class SubscriptionRepository:
    def __init__(self, session: Session):
        self.session = session

    def find_all(self) -> List[Subscription]:
        return self.session.query(Subscription).order_by(Subscription.id).all()
