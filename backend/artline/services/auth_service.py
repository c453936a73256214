"""Admin authentication: password check, JWT issuing and bootstrap admin."""

import logging
from datetime import datetime, timedelta

from fastapi import HTTPException, status
from jose import jwt
from sqlalchemy.orm import Session
from werkzeug.security import check_password_hash, generate_password_hash

from artline.config import settings
from artline.models.user import User

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"


def create_access_token(user_id: int) -> str:
    expire = datetime.utcnow() + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    payload = {"sub": str(user_id), "exp": expire}
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=ALGORITHM)


def authenticate(db: Session, username: str, password: str) -> User:
    user = db.query(User).filter(User.username == username, User.is_active == True).first()  # noqa: E712
    if not user or not check_password_hash(user.password_hash, password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password",
        )
    return user


def create_user(db: Session, username: str, password: str, name: str = None, is_admin: bool = False) -> User:
    user = User(
        username=username,
        password_hash=generate_password_hash(password),
        name=name,
        is_admin=is_admin,
        is_active=True,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def ensure_default_admin(db: Session) -> User:
    user = db.query(User).filter(User.username == settings.DEFAULT_ADMIN_USERNAME).first()
    if user:
        return user
    user = create_user(
        db,
        settings.DEFAULT_ADMIN_USERNAME,
        settings.DEFAULT_ADMIN_PASSWORD,
        name="Administrator",
        is_admin=True,
    )
    logger.info("Default admin user created with id %s", user.user_id)
    return user
