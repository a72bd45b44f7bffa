from typing import List, Optional

from sqlalchemy import asc, desc
from sqlalchemy.orm import Session

from ..models.news import News

SORTABLE_FIELDS = {
    "id": News.id,
    "title": News.title,
}


class NewsRepository:
    def __init__(self, session: Session):
        self.session = session

    def save(self, news: News) -> News:
        self.session.add(news)
        self.session.commit()
        self.session.refresh(news)
        return news

    def find_one(self, news_id: int) -> Optional[News]:
        return self.session.get(News, news_id)

    def find_all(self) -> List[News]:
        return self.session.query(News).order_by(News.id).all()

    def find_page(self, offset: int, limit: int, sort_field: str = "id", descending: bool = False) -> List[News]:
        column = SORTABLE_FIELDS[sort_field]
        ordering = desc(column) if descending else asc(column)
        return (
            self.session.query(News)
            .order_by(ordering, News.id)
            .offset(offset)
            .limit(limit)
            .all()
        )

    def count(self) -> int:
        return self.session.query(News).count()

    def delete(self, news_id: int) -> None:
        # Deleting a missing row is a no-op
        self.session.query(News).filter(News.id == news_id).delete(synchronize_session=False)
        self.session.commit()
