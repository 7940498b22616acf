# blog_api/core/bootstrap.py
"""
Bootstrap module for application initialization.
Creates the default admin account on first startup and refuses to start
without a token signing secret.
"""
import logging
from blog_api.config import Settings, settings as default_settings
from blog_api.core.policy import ADMIN_ROLE
from blog_api.core.security import hash_password
from blog_api.models.user import User
from blog_api.services import identity

logger = logging.getLogger("uvicorn.error")

def ensure_jwt_secret(settings: Settings = default_settings) -> None:
    """
    Fail startup when JWT_SECRET is missing.

    Raises:
        MissingSecretError: If the secret is not configured
    """
    settings.require_jwt_secret()
    logger.info("[bootstrap] JWT signing secret configured")

async def ensure_default_admin(settings: Settings = default_settings) -> None:
    """
    If no admin exists in the database, create a default admin based on environment variables.
    Only takes effect under the following conditions:
      - Currently no user with role="admin"
      - And ADMIN_PASSWORD is set (to avoid using default weak password)
      - And ADMIN_EMAIL is not already registered by a regular account
    Environment variables:
      ADMIN_NAME     (default: "Administrator")
      ADMIN_EMAIL    (default: "admin@example.com")
      ADMIN_PASSWORD (required, otherwise won't create)
    """
    has_admin = await User.filter(role=ADMIN_ROLE).exists()
    if has_admin:
        return

    if not settings.admin_password:
        logger.warning("[bootstrap] No admin present, but ADMIN_PASSWORD not set -> skip creating default admin.")
        return

    if await identity.find_by_email(settings.admin_email):
        # Never silently promote an existing account
        logger.warning("[bootstrap] ADMIN_EMAIL=%s already belongs to a regular user -> skip creating default admin.",
                       settings.admin_email)
        return

    u = await identity.create_user(
        name=settings.admin_name,
        email=settings.admin_email,
        password_hash=hash_password(settings.admin_password),
        role=ADMIN_ROLE,
    )
    logger.warning("[bootstrap] Created default admin -> name=%s email=%s id=%s",
                   u.name, u.email, u.id)
