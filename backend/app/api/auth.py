"""Authentication API endpoints."""
from datetime import datetime, timedelta

import bcrypt
from fastapi import APIRouter, Depends, HTTPException, status
from jose import jwt

from app.api.deps import get_app_settings, get_current_user, get_storage, storage_errors
from app.config import Settings
from app.schemas.auth import Token, UserLogin, UserRegister, UserResponse
from app.storage import Record, Storage

router = APIRouter(prefix="/auth", tags=["auth"])


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return bcrypt.checkpw(
        plain_password.encode("utf-8"),
        hashed_password.encode("utf-8"),
    )


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return bcrypt.hashpw(
        password.encode("utf-8"),
        bcrypt.gensalt(),
    ).decode("utf-8")


def create_access_token(data: dict, settings: Settings, expires_delta: timedelta | None = None) -> str:
    """Create a JWT access token."""
    to_encode = data.copy()
    expire = datetime.utcnow() + (expires_delta or timedelta(minutes=settings.access_token_expire_minutes))
    to_encode.update({"exp": expire, "type": "access"})
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register(user_data: UserRegister, storage: Storage = Depends(get_storage)):
    """Register a new user."""
    with storage_errors("registering user"):
        # Check username
        if await storage.users.get_by_username(user_data.username):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Username already registered",
            )

        # Check email
        if await storage.users.get_by_email(user_data.email):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Email already registered",
            )

        user = await storage.users.create({
            "username": user_data.username,
            "email": user_data.email,
            "password_hash": get_password_hash(user_data.password),
        })

    return user


@router.post("/login", response_model=Token)
async def login(
    user_data: UserLogin,
    storage: Storage = Depends(get_storage),
    settings: Settings = Depends(get_app_settings),
):
    """Login and get an access token."""
    # Find user by username or email
    with storage_errors("logging in"):
        user = await storage.users.get_by_username(user_data.username)
        if user is None:
            user = await storage.users.get_by_email(user_data.username)

    if not user or not verify_password(user_data.password, user["password_hash"]):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect username or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    access_token = create_access_token({"sub": str(user["id"])}, settings)
    return Token(access_token=access_token)


@router.get("/me", response_model=UserResponse)
async def me(current_user: Record = Depends(get_current_user)):
    """Return the authenticated user."""
    return current_user
