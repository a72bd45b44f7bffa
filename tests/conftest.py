import pytest
from unittest.mock import MagicMock

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool


@pytest.fixture
def test_db():
    from andyet.core.database import Base
    from andyet import models  # noqa: F401  registers the tables

    # Use in-memory SQLite for tests, one shared connection across threads
    SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"
    engine = create_engine(
        SQLALCHEMY_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    Base.metadata.create_all(bind=engine)

    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def mock_mail_service():
    from andyet.services.mail_service import MailService
    return MagicMock(spec=MailService)


@pytest.fixture
def market_places(test_db):
    from andyet.models import MarketPlace
    acme = MarketPlace(id=5, name="Acme")
    globex = MarketPlace(id=7, name="Globex")
    test_db.add_all([acme, globex])
    test_db.commit()
    return {"acme": acme, "globex": globex}


@pytest.fixture
def subscriptions(test_db, market_places):
    from andyet.models import User, Subscription
    alice = User(login="alice", email="alice@example.com")
    bob = User(login="bob", email="bob@example.com")
    carol = User(login="carol", email="carol@example.com")
    test_db.add_all([alice, bob, carol])
    test_db.commit()

    subs = [
        Subscription(id_market_place=5, user_id=alice.id),
        Subscription(id_market_place=5, user_id=bob.id),
        Subscription(id_market_place=7, user_id=carol.id),
    ]
    test_db.add_all(subs)
    test_db.commit()
    return subs


@pytest.fixture
def news_factory(test_db, market_places):
    from andyet.models import News

    def _create(title="Sale", content="50% off", market_place_id=5):
        news = News(title=title, content=content, market_place_id=market_place_id)
        test_db.add(news)
        test_db.commit()
        test_db.refresh(news)
        return news

    return _create


def _override_dependencies(test_db, mail_service):
    from andyet.main import app
    from andyet.core.database import get_db
    from andyet.api.dependencies import get_mail_service

    def override_get_db():
        try:
            yield test_db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_mail_service] = lambda: mail_service
    return app


@pytest.fixture
async def async_client(test_db, mock_mail_service):
    from httpx import AsyncClient, ASGITransport

    app = _override_dependencies(test_db, mock_mail_service)

    # Use ASGITransport for direct app interaction
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def lenient_client(test_db, mock_mail_service):
    """Client that receives the 500 response instead of the raised exception."""
    from httpx import AsyncClient, ASGITransport

    app = _override_dependencies(test_db, mock_mail_service)

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()
