# blog_api/services/identity.py
"""
Identity store: persistence of user accounts.

Passwords arrive here already hashed by core.security; this module never
hashes. Email uniqueness is enforced by the unique index on users.email, so a
concurrent registration that slips past the pre-check still surfaces as
DuplicateEmailError. Field constraints are checked before the insert so that
callers other than the HTTP layer (bootstrap, scripts) get the same
ValidationError the API returns.
"""
import logging
import uuid

from pydantic import EmailStr, TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from tortoise.exceptions import IntegrityError
from tortoise.exceptions import ValidationError as OrmValidationError

from blog_api.core.errors import DuplicateEmailError, ValidationError
from blog_api.core.policy import ROLES, USER_ROLE
from blog_api.models.post import Post
from blog_api.models.user import User

logger = logging.getLogger("uvicorn.error")

NAME_MAX_LENGTH = 50

_email_adapter = TypeAdapter(EmailStr)


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


def validate_user_fields(name: str, email: str, role: str) -> list[dict]:
    """Return per-field errors as [{"field", "message"}]; empty when valid."""
    errors = []
    if not name:
        errors.append({"field": "name", "message": "Name is required"})
    elif len(name) > NAME_MAX_LENGTH:
        errors.append({"field": "name", "message": f"Name must be at most {NAME_MAX_LENGTH} characters"})
    try:
        _email_adapter.validate_python(email)
    except PydanticValidationError:
        errors.append({"field": "email", "message": "Please enter a valid email"})
    if role not in ROLES:
        errors.append({"field": "role", "message": f"Role must be one of: {', '.join(ROLES)}"})
    return errors


async def create_user(name: str, email: str, password_hash: str, role: str = USER_ROLE) -> User:
    """
    Persist a new user.

    Raises:
        ValidationError: If name, email or role violates its constraint
        DuplicateEmailError: If the email is already registered
    """
    name = (name or "").strip()
    email = normalize_email(email)
    errors = validate_user_fields(name, email, role)
    if errors:
        raise ValidationError(errors)
    if await User.filter(email=email).exists():
        raise DuplicateEmailError()
    try:
        user = await User.create(
            name=name,
            email=email,
            password_hash=password_hash,
            role=role,
        )
    except IntegrityError:
        raise DuplicateEmailError()
    except OrmValidationError as exc:
        # Tortoise formats these as "<field>: <message>"
        field, _, message = str(exc).partition(":")
        raise ValidationError([{"field": field.strip(), "message": message.strip() or str(exc)}])
    logger.info("[auth] Created user id=%s role=%s", user.id, user.role)
    return user


async def find_by_email(email: str) -> User | None:
    return await User.get_or_none(email=normalize_email(email))


async def find_by_id(user_id: str | uuid.UUID) -> User | None:
    return await User.get_or_none(id=user_id)


async def count_posts(user_id: str | uuid.UUID) -> int:
    return await Post.filter(author_id=user_id).count()
