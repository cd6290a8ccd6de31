import logging
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded

from eventflow.config import settings
from eventflow.config.roles_config import HOME_PATH, LOGIN_PATH
from eventflow.core.dependencies import LoginRequired
from eventflow.modules.home.schemas import NotFoundPage
from eventflow.modules.home import routes as home_routes
from eventflow.modules.auth import routes as auth_routes
from eventflow.modules.admin import routes as admin_routes
from eventflow.modules.organizer import routes as organizer_routes
from eventflow.modules.participant import routes as participant_routes

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address, default_limits=[settings.rate_limit])
app = FastAPI(
    title=settings.app_name,
    debug=settings.debug,
    redirect_slashes=False,
)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(LoginRequired)
async def login_required_handler(request: Request, exc: LoginRequired):
    logger.info("Redirecting %s to login: %s", request.url.path, exc.reason)
    response = RedirectResponse(url=LOGIN_PATH, status_code=303)
    if exc.clear_session:
        response.delete_cookie(settings.session_cookie_name)
    return response


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception: %s", exc)
    if settings.is_production:
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})
    return JSONResponse(status_code=500, content={"detail": str(exc)})


class SecurityHeadersMiddleware:
    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        async def send_with_headers(message):
            if message["type"] == "http.response.start":
                message.setdefault("headers", [])
                message["headers"].extend([
                    (b"X-Content-Type-Options", b"nosniff"),
                    (b"X-Frame-Options", b"DENY"),
                    (b"X-XSS-Protection", b"1; mode=block"),
                ])
            await send(message)

        await self.app(scope, receive, send_with_headers)


app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins_list(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
async def startup_event():
    logger.info("Application startup")


@app.on_event("shutdown")
async def shutdown_event():
    logger.info("Application shutdown")


@app.get("/health")
@limiter.exempt
async def health():
    return {"status": "healthy"}


@app.get("/ready")
@limiter.exempt
async def ready():
    """Readiness probe: extend here with a Supabase ping if needed."""
    return {"status": "ready"}


# Page routes
app.include_router(home_routes.router)
app.include_router(auth_routes.router)
app.include_router(admin_routes.router)
app.include_router(organizer_routes.router)
app.include_router(participant_routes.router)


# Must stay last: catches every path no router matched
@app.api_route("/{path:path}", methods=["GET", "POST", "PUT", "DELETE"], include_in_schema=False)
async def not_found(path: str):
    logger.warning("404 Error: User attempted to access non-existent route: /%s", path)
    page = NotFoundPage(path=f"/{path}", message="Oops! Página não encontrada", home_path=HOME_PATH)
    return JSONResponse(status_code=404, content=page.model_dump())
