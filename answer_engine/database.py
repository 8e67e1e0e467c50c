"""Database engine and session helpers."""
from typing import Iterator

from sqlmodel import Session, SQLModel, create_engine

from answer_engine.config import settings

connect_args = {}
if settings.DATABASE_URL.startswith("sqlite"):
    connect_args["check_same_thread"] = False

engine = create_engine(settings.DATABASE_URL, echo=False, connect_args=connect_args)


def init_db() -> None:
    """Create all tables registered on the SQLModel metadata."""
    # Register table models before create_all
    import answer_engine.models  # noqa: F401

    SQLModel.metadata.create_all(engine)


def get_session() -> Iterator[Session]:
    with Session(engine) as session:
        yield session
