# blog_api/api/v1/deps.py
from fastapi import Header

from blog_api.core.errors import MissingTokenError
from blog_api.core.policy import Identity
from blog_api.core.security import claims_to_identity, decode_access_token

async def get_current_identity(
    authorization: str | None = Header(default=None),
) -> Identity:
    """
    FastAPI dependency establishing the caller's identity from a bearer token.

    Only the token is consulted: a request without a valid token is rejected
    before any database access. Routes that need the stored account load it
    themselves.

    Args:
        authorization: Authorization header value ("Bearer <token>")

    Returns:
        Identity: user id, email and role from the verified token claims

    Raises:
        MissingTokenError (401 AUTH_REQUIRED): No bearer token supplied
        InvalidTokenError (401 AUTH_INVALID_TOKEN): Token expired, tampered or malformed

    Usage:
        @router.post("/posts")
        async def create_post(body: PostCreateIn, identity: Identity = Depends(get_current_identity)):
            ...
    """
    token = None
    if authorization and authorization.lower().startswith("bearer "):
        token = authorization.split(" ", 1)[1].strip()

    if not token:
        raise MissingTokenError()

    claims = decode_access_token(token)
    return claims_to_identity(claims)
