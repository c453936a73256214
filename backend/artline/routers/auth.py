"""Admin login API router."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from artline.database import get_db
from artline.schemas.user import LoginRequest, TokenResponse, UserOut
from artline.services.auth_service import authenticate, create_access_token
from artline.middleware.auth_middleware import get_current_user
from artline.models.user import User

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login", response_model=TokenResponse)
def login(request: LoginRequest, db: Session = Depends(get_db)):
    user = authenticate(db, request.username, request.password)
    token = create_access_token(user.user_id)
    return TokenResponse(access_token=token, user=UserOut.model_validate(user))


@router.post("/logout")
def logout(current_user: User = Depends(get_current_user)):
    return {"message": "Logged out"}


@router.get("/me", response_model=UserOut)
def me(current_user: User = Depends(get_current_user)):
    return UserOut.model_validate(current_user)
