import os
from datetime import timedelta

# Settings are read at import time.
os.environ.setdefault("SECRET_KEY", "test-secret")
os.environ.setdefault("FRONTEND_ORIGIN", "http://localhost:3000")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ["ENVIRONMENT"] = "development"
os.environ["COOKIE_SECURE"] = "false"

import httpx  # noqa: E402
import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from sqlmodel import Session, SQLModel, create_engine  # noqa: E402

from reporter_api import models  # noqa: E402,F401
from reporter_api.app import create_app  # noqa: E402
from reporter_api.core.time import utcnow  # noqa: E402
from reporter_api.models import (  # noqa: E402
    DRAFT_STATE,
    PUBLISHED_STATE,
    REVIEW_STYLE,
    Author,
    Post,
    Topic,
)
from reporter_api.services.search import AlgoliaSearchClient  # noqa: E402
from reporter_api.storage import (  # noqa: E402
    BookmarkStorage,
    NewsStorage,
    SQLModelUserStorage,
    WebPushStorage,
)


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def user_storage(session) -> SQLModelUserStorage:
    return SQLModelUserStorage(session)


@pytest.fixture
def bookmark_storage(session) -> BookmarkStorage:
    return BookmarkStorage(session)


@pytest.fixture
def web_push_storage(session) -> WebPushStorage:
    return WebPushStorage(session)


@pytest.fixture
def news_storage(session) -> NewsStorage:
    return NewsStorage(session)


@pytest.fixture
def news_content(engine) -> dict:
    """Publish one topic, two posts, one draft and two authors."""

    now = utcnow()
    with Session(engine) as session:
        topic = Topic(
            slug="elections", title="Elections", state=PUBLISHED_STATE, published_date=now
        )
        session.add(topic)
        session.flush()
        session.add_all(
            [
                Post(
                    slug="vote",
                    title="How to vote",
                    category="politics_and_economy",
                    is_featured=True,
                    topic_id=topic.id,
                    state=PUBLISHED_STATE,
                    published_date=now - timedelta(hours=1),
                ),
                Post(
                    slug="film-review",
                    title="A film",
                    style=REVIEW_STYLE,
                    category="culture_and_art",
                    state=PUBLISHED_STATE,
                    published_date=now - timedelta(hours=2),
                ),
                Post(slug="unfinished", title="Draft", state=DRAFT_STATE, published_date=now),
                Author(name="Ada", updated_at=now - timedelta(days=1)),
                Author(name="Grace", updated_at=now),
            ]
        )
        session.commit()
        return {"topic_id": topic.id}


class FakeAlgolia:
    """Records search requests and answers with a canned hit list."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code = 200

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.status_code != 200:
            return httpx.Response(self.status_code, json={"message": "boom"})
        return httpx.Response(
            200,
            json={"hits": [{"objectID": "1", "title": "hit"}], "nbHits": 1, "page": 0},
        )


@pytest.fixture
def fake_algolia() -> FakeAlgolia:
    return FakeAlgolia()


@pytest.fixture
def search_client(fake_algolia) -> AlgoliaSearchClient:
    return AlgoliaSearchClient(
        "APPID", "search-key", transport=httpx.MockTransport(fake_algolia)
    )


@pytest.fixture
def client(engine, search_client):
    app = create_app(engine=engine, search_client=search_client)
    with TestClient(app) as test_client:
        yield test_client
