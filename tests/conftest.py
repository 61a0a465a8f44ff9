"""Shared test fixtures for pagewindow tests."""
import pytest
from sqlalchemy import ForeignKey, String, create_engine
from sqlalchemy.orm import (
    DeclarativeBase,
    Mapped,
    mapped_column,
    relationship,
    sessionmaker,
)


class Base(DeclarativeBase):
    pass


class Author(Base):
    __tablename__ = "authors"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(100))

    articles = relationship(
        "Article", back_populates="author", lazy="dynamic", order_by="Article.id"
    )


class Article(Base):
    __tablename__ = "articles"

    id: Mapped[int] = mapped_column(primary_key=True)
    title: Mapped[str] = mapped_column(String(255))
    author_id: Mapped[int] = mapped_column(ForeignKey("authors.id"))

    author = relationship("Author", back_populates="articles")


class FakeQuerySet:
    """Query set with native paging, like an ORM QuerySet."""

    def __init__(self, model, items):
        self.model = model
        self.items = list(items)
        self.paginate_calls = []

    def count(self):
        return len(self.items)

    def paginate(self, page, page_size):
        self.paginate_calls.append((page, page_size))
        start = page_size * max(page - 1, 0)
        return FakeQuerySet(self.model, self.items[start : start + page_size])

    def all(self):
        return list(self.items)


class FakeRelationManager:
    """Has-many manager resolving to a query set."""

    def __init__(self, query_set):
        self.query_set = query_set
        self.unwrap_calls = 0

    def get_query_set(self):
        self.unwrap_calls += 1
        return self.query_set


class Tag:
    pass


@pytest.fixture
def db():
    """In-memory SQLite session with one author and 25 articles."""
    engine = create_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = SessionLocal()

    author = Author(id=1, name="Ada")
    session.add(author)
    session.add_all(
        [Article(id=i, title=f"Article {i}", author_id=1) for i in range(1, 26)]
    )
    session.commit()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def numbers():
    return list(range(1, 26))


@pytest.fixture
def tag_query_set():
    return FakeQuerySet(Tag, [f"tag-{i}" for i in range(1, 26)])
