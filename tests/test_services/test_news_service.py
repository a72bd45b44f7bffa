import pytest
from unittest.mock import MagicMock, call

from andyet.schemas.news import NewsRequest, MarketPlaceRef
from andyet.exceptions import ValidationError
from andyet.models import MarketPlace, News, Subscription, User
from andyet.services.news_service import (
    NewsService,
    build_notification_content,
    build_notification_subject,
    parse_sort,
)


def make_subscription(sub_id, market_place_id, email):
    return Subscription(id=sub_id, id_market_place=market_place_id, user=User(login=email.split("@")[0], email=email))


class TestNewsService:
    @pytest.fixture(autouse=True)
    def setup_service(self):
        self.acme = MarketPlace(id=5, name="Acme")
        self.news_repository = MagicMock()
        self.subscription_repository = MagicMock()
        self.market_place_repository = MagicMock()
        self.mail_service = MagicMock()

        self.market_place_repository.find_one.side_effect = (
            lambda market_place_id: self.acme if market_place_id == 5 else None
        )

        def _save(news):
            if news.id is None:
                news.id = 1
            news.market_place = self.acme
            return news

        self.news_repository.save.side_effect = _save

        self.subscription_repository.find_all.return_value = [
            make_subscription(1, 5, "alice@example.com"),
            make_subscription(2, 5, "bob@example.com"),
            make_subscription(3, 7, "carol@example.com"),
        ]

        self.service = NewsService(
            self.news_repository,
            self.subscription_repository,
            self.market_place_repository,
            self.mail_service,
        )

    def request(self, **overrides):
        values = {
            "title": "Sale",
            "content": "50% off",
            "market_place": MarketPlaceRef(id=5, name="Acme"),
        }
        values.update(overrides)
        return NewsRequest(**values)

    def test_create_news_sends_one_email_per_matching_subscription(self):
        result = self.service.create_news(self.request())

        assert result.id == 1
        self.news_repository.save.assert_called_once()
        assert self.mail_service.send_email.call_args_list == [
            call("alice@example.com", "Acme vous a envoyé une News !", "Sale\n\n\n50% off", False, False),
            call("bob@example.com", "Acme vous a envoyé une News !", "Sale\n\n\n50% off", False, False),
        ]

    def test_create_news_with_id_has_no_side_effects(self):
        with pytest.raises(ValidationError) as exc_info:
            self.service.create_news(self.request(id=3))

        assert exc_info.value.error_key == "idexists"
        assert exc_info.value.entity_name == "news"
        self.news_repository.save.assert_not_called()
        self.subscription_repository.find_all.assert_not_called()
        self.mail_service.send_email.assert_not_called()

    def test_create_news_with_unknown_marketplace(self):
        with pytest.raises(ValidationError) as exc_info:
            self.service.create_news(self.request(market_place=MarketPlaceRef(id=42)))

        assert exc_info.value.error_key == "marketplacenotfound"
        self.news_repository.save.assert_not_called()

    def test_mail_failure_propagates_after_save(self):
        self.mail_service.send_email.side_effect = RuntimeError("smtp down")

        with pytest.raises(RuntimeError):
            self.service.create_news(self.request())

        self.news_repository.save.assert_called_once()
        assert self.mail_service.send_email.call_count == 1

    def test_update_news(self):
        stored = News(id=9, title="Old", content="Old content", market_place_id=5)
        self.news_repository.find_one.return_value = stored

        result = self.service.update_news(self.request(id=9, title="New"))

        assert result is stored
        assert stored.title == "New"
        self.news_repository.save.assert_called_once_with(stored)
        self.mail_service.send_email.assert_not_called()

    def test_update_unknown_news_inserts_it(self):
        self.news_repository.find_one.return_value = None

        result = self.service.update_news(self.request(id=9))

        assert result.id == 9
        assert result.title == "Sale"
        assert result.market_place_id == 5
        self.news_repository.save.assert_called_once_with(result)
        self.mail_service.send_email.assert_not_called()

    def test_get_news_page_translates_page_to_offset(self):
        self.news_repository.find_page.return_value = []
        self.news_repository.count.return_value = 45

        items, total = self.service.get_news_page(page=2, size=20, sort="title,desc")

        assert items == []
        assert total == 45
        self.news_repository.find_page.assert_called_once_with(
            offset=40, limit=20, sort_field="title", descending=True
        )

    def test_get_news_page_past_addressable_offset_is_empty(self):
        self.news_repository.count.return_value = 3

        items, total = self.service.get_news_page(page=10 ** 19, size=20)

        assert items == []
        assert total == 3
        self.news_repository.find_page.assert_not_called()

    def test_get_market_place_news_filters_full_collection(self):
        acme_news = News(id=1, title="a", content="a", market_place_id=5)
        other_news = News(id=2, title="b", content="b", market_place_id=7)
        self.news_repository.find_all.return_value = [acme_news, other_news]

        assert self.service.get_market_place_news(5) == [acme_news]
        assert self.service.get_market_place_news(8) == []

    def test_delete_news_delegates_to_repository(self):
        self.service.delete_news(3)

        self.news_repository.delete.assert_called_once_with(3)


def test_notification_texts():
    assert build_notification_subject("Acme") == "Acme vous a envoyé une News !"
    assert build_notification_content("Sale", "50% off") == "Sale\n\n\n50% off"


@pytest.mark.parametrize("sort, expected", [
    (None, ("id", False)),
    ("", ("id", False)),
    ("title", ("title", False)),
    ("id,desc", ("id", True)),
    ("title,ASC", ("title", False)),
])
def test_parse_sort(sort, expected):
    assert parse_sort(sort) == expected


@pytest.mark.parametrize("sort", ["content", "id,sideways", "id,asc,extra"])
def test_parse_sort_rejects_unsupported_expressions(sort):
    with pytest.raises(ValidationError) as exc_info:
        parse_sort(sort)

    assert exc_info.value.error_key == "sortnotsupported"
