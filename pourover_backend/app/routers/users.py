from __future__ import annotations
from typing import Any, Dict, List
from fastapi import APIRouter, Depends
from sqlmodel import Session

from pourover_backend.app.db.session import get_session
from pourover_backend.app.schemas import UserIn, UserOut
from pourover_backend.app.services.router_helpers import users_helpers as H

router = APIRouter(tags=["users"])

@router.get("/users", response_model=List[UserOut])
def get_users(session: Session = Depends(get_session)):
    return H.list_users(session)

@router.post("/users", response_model=UserOut)
def create_user(payload: UserIn, session: Session = Depends(get_session)):
    return H.create_user(session, payload)

@router.get("/test-connection")
def test_connection(session: Session = Depends(get_session)) -> Dict[str, Any]:
    return H.test_database_connection(session)
