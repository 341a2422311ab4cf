# orderdesk/data/database.py
import uuid
from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from orderdesk.utils.settings import DATABASE_URL
from orderdesk.utils.logging import get_logger

logger = get_logger(__name__)


class Base(DeclarativeBase):
    pass


def new_object_id() -> str:
    """24 znaki hex, ten sam ksztalt co ObjectId w bazie dokumentowej."""
    return uuid.uuid4().hex[:24]


class Database:
    """
    Uchwyt do bazy trzymany przez aplikacje (app.state.database).
    Tworzony jawnie przy starcie, zamykany przy shutdown, bez globalnego engine.
    """

    def __init__(self, url: str | None = None, **engine_kwargs):
        self.url = url or DATABASE_URL
        if self.url.startswith("sqlite"):
            engine_kwargs.setdefault("connect_args", {"check_same_thread": False})
        self.engine = create_engine(self.url, pool_pre_ping=True, **engine_kwargs)
        self.SessionLocal = sessionmaker(
            bind=self.engine,
            autoflush=False,
            expire_on_commit=False,
        )

    def create_all(self) -> None:
        # rejestracja modeli w Base.metadata przed create_all
        import orderdesk.data.models  # noqa: F401

        logger.info(f"Creating tables: {list(Base.metadata.tables.keys())}")
        Base.metadata.create_all(bind=self.engine)

    def session(self) -> Session:
        return self.SessionLocal()

    def dispose(self) -> None:
        logger.info("Disposing database engine")
        self.engine.dispose()


def get_db(request: Request) -> Iterator[Session]:
    db = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()
