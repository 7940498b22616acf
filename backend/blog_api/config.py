# blog_api/config.py
import os
from pydantic import BaseModel
from dotenv import load_dotenv

load_dotenv()  # Load environment variables from .env file


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


def _env_list(name: str, default: str) -> list[str]:
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]


class MissingSecretError(RuntimeError):
    """Raised when JWT_SECRET is not configured."""


class Settings(BaseModel):
    # General app settings
    APP_NAME: str = os.getenv("APP_NAME", "Blog Platform API")
    env: str = os.getenv("ENV", "development")

    # Host & Port settings
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "5000"))

    # CORS origins for the React client
    CORS_ORIGINS: list[str] = _env_list(
        "CORS_ORIGINS",
        "http://localhost:3000,http://127.0.0.1:3000",
    )

    # Token signing. There is no fallback secret: startup refuses to run without one.
    jwt_secret: str | None = os.getenv("JWT_SECRET") or None
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(7 * 24 * 60)))

    # Create tables on startup instead of running aerich migrations (dev only)
    db_generate_schemas: bool = _env_bool("DB_GENERATE_SCHEMAS")

    # Default admin account created on first run (see core/bootstrap.py)
    admin_name: str = os.getenv("ADMIN_NAME", "Administrator")
    admin_email: str = os.getenv("ADMIN_EMAIL", "admin@example.com")
    admin_password: str | None = os.getenv("ADMIN_PASSWORD") or None

    def require_jwt_secret(self) -> str:
        """Return the signing secret or raise MissingSecretError."""
        if not self.jwt_secret:
            raise MissingSecretError("JWT_SECRET is not configured; refusing to sign or verify tokens")
        return self.jwt_secret


settings = Settings()  # Instantiate configuration
