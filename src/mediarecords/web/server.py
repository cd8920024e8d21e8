from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from mediarecords.app import App
from mediarecords.config import Config
from mediarecords.errors import UpstreamError, UserError
from mediarecords.web.error_handlers import general_exception_handler, upstream_error_handler, user_error_handler
from mediarecords.web.openapi import set_custom_openapi
from mediarecords.web.routers import metadata_router, records_routers


def create_fastapi_app(app_instance: App, config: Config) -> FastAPI:
    """Create and configure FastAPI application."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
        """FastAPI application lifespan management."""
        async with app_instance.lifespan():
            yield

    app = FastAPI(title="Media Records API", lifespan=lifespan)
    # Available before the lifespan runs so routes work without it in tests
    app.state.app = app_instance
    app.state.config = config

    if config.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.get("/", response_class=PlainTextResponse, include_in_schema=False)
    async def index() -> str:
        return "Hello, World!"

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        return {"status": "healthy"}

    for router in records_routers:
        app.include_router(router, prefix="/api")
    app.include_router(metadata_router)

    app.add_exception_handler(UserError, user_error_handler)
    app.add_exception_handler(UpstreamError, upstream_error_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    set_custom_openapi(app)

    return app
