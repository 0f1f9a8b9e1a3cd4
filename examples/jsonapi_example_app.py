"""Example FastAPI app serving marshaled SQLAlchemy rows.

Run with:
    uvicorn examples.jsonapi_example_app:app --reload
"""
from __future__ import annotations

from typing import Iterator

from fastapi import Depends, FastAPI
from sqlalchemy import Column, ForeignKey, Integer, String, create_engine, select
from sqlalchemy.orm import Session, declarative_base, relationship, selectinload, sessionmaker
from sqlalchemy.pool import StaticPool

from jsonapi_marshal import configure_logging
from jsonapi_marshal.middleware import ErrorHandlerMiddleware
from jsonapi_marshal.responses import JSONAPIResponse

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
SessionLocal = sessionmaker(engine, expire_on_commit=False)

Base = declarative_base()


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    articles = relationship("Article", back_populates="author")
    comments = relationship("Comment", back_populates="author")


class Article(Base):
    __tablename__ = "articles"

    id = Column(Integer, primary_key=True)
    title = Column(String, nullable=False)
    body = Column(String, nullable=False)
    author_id = Column(Integer, ForeignKey("users.id"))
    author = relationship("User", back_populates="articles")
    comments = relationship("Comment", back_populates="article")


class Comment(Base):
    __tablename__ = "comments"

    id = Column(Integer, primary_key=True)
    body = Column(String, nullable=False)
    article_id = Column(Integer, ForeignKey("articles.id"))
    author_id = Column(Integer, ForeignKey("users.id"))
    article = relationship("Article", back_populates="comments")
    author = relationship("User", back_populates="comments")


def get_session() -> Iterator[Session]:
    with SessionLocal() as session:
        yield session


def seed_example_data(session: Session) -> None:
    """Insert example users, articles and comments if empty."""
    if session.execute(select(User.id).limit(1)).first() is not None:
        return

    jane = User(name="Jane Doe", email="jane.doe@example.com")
    john = User(name="John Smith", email="john.smith@example.com")
    first = Article(title="JSON:API with FastAPI", body="Marshaling records.", author=jane)
    second = Article(title="Linked resources", body="Deduplicated includes.", author=john)
    session.add_all([jane, john, first, second])
    session.add_all(
        [
            Comment(body="Great article!", article=first, author=john),
            Comment(body="Helpful examples.", article=first, author=jane),
            Comment(body="Thanks for sharing.", article=second, author=jane),
        ]
    )
    session.commit()


Base.metadata.create_all(engine)
with SessionLocal() as _session:
    seed_example_data(_session)

app = FastAPI(
    title="JSON:API Marshal Example",
    description="Example API serving marshaled SQLAlchemy rows.",
    version="0.1.0",
)
app.add_middleware(ErrorHandlerMiddleware)
configure_logging()


@app.get("/articles", response_class=JSONAPIResponse)
def list_articles(session: Session = Depends(get_session)) -> JSONAPIResponse:
    statement = (
        select(Article)
        .options(selectinload(Article.author), selectinload(Article.comments))
        .order_by(Article.id)
    )
    articles = session.execute(statement).scalars().all()
    return JSONAPIResponse(list(articles), model=Article)


@app.get("/articles/{article_id}", response_class=JSONAPIResponse)
def retrieve_article(article_id: int, session: Session = Depends(get_session)) -> JSONAPIResponse:
    statement = (
        select(Article)
        .where(Article.id == article_id)
        .options(selectinload(Article.author), selectinload(Article.comments))
    )
    return JSONAPIResponse(session.execute(statement).scalars().one())
