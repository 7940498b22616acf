# blog_api/api/v1/routers/auth.py
import logging

from fastapi import APIRouter, Depends, status

from blog_api.api.v1.deps import get_current_identity
from blog_api.api.v1.serializers import user_to_dict
from blog_api.core.errors import InvalidCredentialsError, NotFoundError
from blog_api.core.policy import Identity
from blog_api.core.security import create_access_token, hash_password, verify_password
from blog_api.models.user import User
from blog_api.schemas.auth import LoginIn, RegisterIn
from blog_api.services import identity as identity_store

router = APIRouter(prefix="/auth", tags=["auth"])
logger = logging.getLogger("uvicorn.error")


def _issue_token(user: User) -> str:
    return create_access_token(str(user.id), user.email, user.role)


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(body: RegisterIn):
    """
    Register a new user account.

    Creates a regular (role="user") account. The password is hashed before
    storage and the response carries a ready-to-use access token.

    Args:
        body: Request body containing:
            - name: str (1-50 characters)
            - email: str (valid address, unique, stored lowercase)
            - password: str (at least 6 characters)

    Returns:
        dict: message, token and the created user (never the password hash)

    Raises:
        ValidationError (400): Field constraints not met
        DuplicateEmailError (400): Email already registered
    """
    user = await identity_store.create_user(
        name=body.name,
        email=body.email,
        password_hash=hash_password(body.password),
    )
    return {
        "message": "User registered successfully",
        "token": _issue_token(user),
        "user": user_to_dict(user),
    }


@router.post("/login")
async def login(payload: LoginIn):
    """
    Authenticate user and create access token.

    Unknown email and wrong password produce the same 401 so the endpoint
    cannot be used to discover which addresses are registered.

    Returns:
        dict: message, token and user information

    Raises:
        InvalidCredentialsError (401): If credentials are invalid
    """
    user = await identity_store.find_by_email(payload.email)
    if not user or not verify_password(payload.password, user.password_hash):
        logger.info("[auth] Failed login attempt")
        raise InvalidCredentialsError()
    return {
        "message": "Login successful",
        "token": _issue_token(user),
        "user": user_to_dict(user),
    }


@router.get("/me")
async def me(current: Identity = Depends(get_current_identity)):
    """
    Get current authenticated user information.

    Raises:
        MissingTokenError / InvalidTokenError (401): If not authenticated
        NotFoundError (404): If the account no longer exists
    """
    user = await identity_store.find_by_id(current.user_id)
    if not user:
        raise NotFoundError("User not found", code="USER_NOT_FOUND")
    return {"user": user_to_dict(user)}
