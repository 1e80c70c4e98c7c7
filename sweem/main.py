"""FastAPI application factory.

create_app() only wires things together: settings, lifespan, error handlers,
middleware and the v1 router. Settings are read inside the factory, so an
invalid environment (e.g. no JWT_KEY) raises ConfigurationException before
the server binds a port, and tests can adjust env and call
get_settings.cache_clear() before building an app.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sweem.api.v1 import api_router
from sweem.core.config import Settings, get_settings
from sweem.core.exception_handlers import register_exception_handlers
from sweem.core.lifespan import create_lifespan
from sweem.middleware import (
    RequestIDMiddleware,
    SecurityHeadersMiddleware,
    TimeoutMiddleware,
)


def _install_middleware(app: FastAPI, settings: Settings) -> None:
    # Each add_middleware wraps the previous stack, so TimeoutMiddleware
    # (added last) is outermost and CORS sits next to the router.
    origins = [o.strip() for o in settings.allowed_origins.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestIDMiddleware, header_name=settings.request_id_header)
    app.add_middleware(TimeoutMiddleware, timeout_seconds=settings.request_timeout_seconds)


def create_app() -> FastAPI:
    """Build the SWEeM API application."""
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )
    register_exception_handlers(app)
    _install_middleware(app, settings)
    app.include_router(api_router, prefix=settings.api_prefix)
    return app


app = create_app()
