from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import QueuePool, StaticPool
from app.core.config import settings

_is_sqlite = settings.DATABASE_URL.startswith("sqlite")

if _is_sqlite and "mode=memory" in settings.DATABASE_URL:
    # Shared-cache in-memory database: one connection per session, so each
    # session has its own transaction. Pooled connections keep the data alive.
    engine = create_engine(
        settings.DATABASE_URL,
        future=True,
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=QueuePool,
    )
elif _is_sqlite and settings.DATABASE_URL in ("sqlite://", "sqlite:///:memory:"):
    # Private in-memory database, only reachable through a single connection
    engine = create_engine(
        settings.DATABASE_URL,
        future=True,
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
elif _is_sqlite:
    engine = create_engine(
        settings.DATABASE_URL,
        future=True,
        echo=False,
        connect_args={"check_same_thread": False},
    )
else:
    engine = create_engine(settings.DATABASE_URL, future=True, echo=False)

@event.listens_for(engine, "connect")
def set_sqlite_pragma(dbapi_connection, connection_record):
    if not _is_sqlite:
        return
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON;")
    cursor.close()

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
