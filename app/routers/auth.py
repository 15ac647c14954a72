"""
Authentication routes.
"""
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app import auth
from app.config import get_settings
from app.database import get_db
from app.models.user import User
from app.schemas.user import LoginRequest, Token, User as UserSchema, UserCreate

router = APIRouter(prefix="/auth", tags=["auth"])

settings = get_settings()


@router.post("/register", response_model=UserSchema, status_code=status.HTTP_201_CREATED)
async def register(user: UserCreate, db: AsyncSession = Depends(get_db)):
    """
    Create a user account.
    """
    return await auth.register_user(db, user)


@router.post("/login", response_model=Token)
async def login(credentials: LoginRequest, db: AsyncSession = Depends(get_db)):
    """
    Exchange email and password for a bearer token.
    """
    user = await auth.authenticate_user(db, credentials.email, credentials.password)
    return Token(
        access_token=auth.create_access_token(user.id),
        expires_in=settings.access_token_expire_minutes * 60,
    )


@router.get("/me", response_model=UserSchema)
async def read_current_user(current_user: User = Depends(auth.get_current_active_user)):
    """
    Get the signed-in user.
    """
    return current_user


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(
    payload: dict = Depends(auth.get_token_payload),
    db: AsyncSession = Depends(get_db),
):
    """
    Sign out by revoking the presented token.
    """
    expires_at = datetime.fromtimestamp(payload["exp"], tz=timezone.utc)
    await auth.revoke_token(db, payload["jti"], expires_at)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
