# pourover_backend/app/services/router_helpers/users_helpers.py
from __future__ import annotations
from typing import Any, Dict, List

from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from pourover_backend.app.db.models import User
from pourover_backend.app.schemas import UserIn, UserOut
from pourover_backend.app.utils.log import get_logger

log = get_logger("pourover.users")


def list_users(session: Session) -> List[UserOut]:
    rows = session.exec(select(User).order_by(User.id)).all()
    return [UserOut.model_validate(u) for u in rows]


def create_user(session: Session, payload: UserIn) -> UserOut:
    user = User(name=payload.name.strip(), email=payload.email.strip())
    try:
        session.add(user)
        session.commit()
        session.refresh(user)
    except SQLAlchemyError as e:
        session.rollback()
        log.exception("create user failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"create user failed: {e}",
        )
    return UserOut.model_validate(user)


# What it does:
# Liveness probe for the database: touch the users table and report, never raise.
def test_database_connection(session: Session) -> Dict[str, Any]:
    try:
        first = session.exec(select(User)).first()
    except SQLAlchemyError as e:
        log.warning("database connection check failed: %s", e)
        return {
            "status": "error",
            "message": "Database connection failed",
            "connected": False,
            "error": str(e),
        }
    return {
        "status": "success",
        "message": "Database connection is working",
        "connected": True,
        "testQuery": "User table accessible" if first is not None else "User table exists but empty",
    }
