# blog_api/main.py
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from blog_api.config import settings
from blog_api.core.db import init_db, close_db
from blog_api.core.bootstrap import ensure_default_admin, ensure_jwt_secret
from blog_api.core.errors import BlogAPIError, ValidationError

from blog_api.api.v1.routers import auth, posts, comments, users, health

logger = logging.getLogger("uvicorn.error")

app = FastAPI(title=settings.APP_NAME)

# CORS for the React client
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ===== Error handling =====
@app.exception_handler(BlogAPIError)
async def blog_api_error_handler(request: Request, exc: BlogAPIError):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.to_detail()})

@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Report malformed request bodies/params as 400 with per-field messages."""
    errors = [
        {
            "field": ".".join(str(part) for part in err.get("loc", ()) if part != "body"),
            "message": err.get("msg", "Invalid value"),
        }
        for err in exc.errors()
    ]
    return await blog_api_error_handler(request, ValidationError(errors))

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        detail = {"code": "ROUTE_NOT_FOUND", "message": "Route not found"}
    else:
        detail = exc.detail
    return JSONResponse(status_code=exc.status_code, content={"detail": detail}, headers=exc.headers)

@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    # Full traceback stays in the server log; the caller gets a generic message
    logger.error("[errors] Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": BlogAPIError().to_detail()},
    )

@app.on_event("startup")
async def on_startup():
    # No token secret, no server
    ensure_jwt_secret()
    await init_db()
    # Ensure there's a default admin account on first run
    await ensure_default_admin()

@app.on_event("shutdown")
async def on_shutdown():
    await close_db()

# REST
app.include_router(auth.router, prefix="/api")
app.include_router(posts.router, prefix="/api")
app.include_router(comments.router, prefix="/api")
app.include_router(users.router, prefix="/api")
app.include_router(health.router, prefix="/api")
