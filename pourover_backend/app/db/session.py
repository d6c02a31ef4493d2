# pourover_backend/app/db/session.py

# [DB Session] Engine + helpers
from sqlmodel import SQLModel, create_engine, Session
from pourover_backend.app.config import DB_URL

# SQLite needs check_same_thread=False for typical FastAPI usage
connect_args = {"check_same_thread": False} if DB_URL.startswith("sqlite") else {}

engine = create_engine(DB_URL, echo=False, connect_args=connect_args, pool_pre_ping=True)

def init_db() -> None:
    # Ensure table definitions are registered before create_all
    from . import models  # noqa: F401
    SQLModel.metadata.create_all(engine)

def get_session():
    with Session(engine) as session:
        yield session
