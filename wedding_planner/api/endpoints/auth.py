# File: wedding_planner/api/endpoints/auth.py
from typing import Any
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session
from wedding_planner import crud, schemas
from wedding_planner.core import deps, security
from wedding_planner.core.config import settings
from wedding_planner.core.tenancy import Principal
from wedding_planner.db.database import get_db
import logging

logger = logging.getLogger(__name__)
router = APIRouter()


def _issue_session(response: Response, user) -> schemas.Token:
    access_token = security.create_access_token(subject=user.id)
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=access_token,
        httponly=True,
        secure=settings.is_production,
        samesite="strict",
        max_age=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
    )
    return schemas.Token(access_token=access_token, user=schemas.User.model_validate(user))


@router.post("/register", response_model=schemas.Token, status_code=status.HTTP_201_CREATED)
def register(
    *,
    response: Response,
    db: Session = Depends(get_db),
    user_in: schemas.RegisterRequest,
) -> Any:
    """Create an account; the wedding profile comes later, at onboarding"""
    if crud.user.get_by_username(db, username=user_in.username):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Username already exists"
        )

    user = crud.user.create(db, obj_in=user_in)
    logger.info(f"Registered user {user.id} ({user.username})")
    return _issue_session(response, user)


@router.post("/login", response_model=schemas.Token)
def login(
    *,
    response: Response,
    db: Session = Depends(get_db),
    login_in: schemas.LoginRequest,
) -> Any:
    """Username/password login; returns a bearer token and sets the session cookie"""
    user = crud.user.authenticate(db, username=login_in.username, password=login_in.password)
    if not user:
        logger.info(f"Login failed for username {login_in.username}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials"
        )

    logger.info(f"Login successful for user {user.id}")
    return _issue_session(response, user)


@router.post("/logout")
def logout(response: Response) -> Any:
    response.delete_cookie(settings.SESSION_COOKIE_NAME)
    return {"message": "Logged out successfully"}


@router.get("/me", response_model=schemas.User)
def read_me(
    db: Session = Depends(get_db),
    principal: Principal = Depends(deps.get_current_principal),
) -> Any:
    return crud.user.get(db, id=principal.id)
