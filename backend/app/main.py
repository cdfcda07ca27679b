import logging
from contextlib import asynccontextmanager
from datetime import timedelta
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import Settings, settings as default_settings
from app.database import create_db_engine, create_session_factory, init_db
from app.logging_config import configure_logging
from app.middleware import CORSHeadersMiddleware
from app.schemas.common import error_response
from app.token_store import TokenStore

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    token_store: Optional[TokenStore] = None,
) -> FastAPI:
    settings = settings if settings is not None else default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(settings.LOG_LEVEL)
        init_db(app.state.engine, app.state.session_factory, seed=settings.SEED_DATA)
        logger.info("Film API ready on %s:%s", settings.HOST, settings.PORT)
        yield
        app.state.engine.dispose()

    app = FastAPI(
        title="Film API",
        description="Film catalog REST API with bearer token sessions",
        version="0.1.0",
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.engine = create_db_engine(settings)
    app.state.session_factory = create_session_factory(app.state.engine)

    # One store per application; every request shares it through app.state
    if token_store is None:
        token_store = TokenStore(ttl=timedelta(hours=settings.TOKEN_TTL_HOURS))
    app.state.token_store = token_store

    # Also renders unhandled errors as 500s, so CORS headers survive them
    app.add_middleware(CORSHeadersMiddleware, debug=settings.DEBUG)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content=error_response(str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.debug("Rejected request body on %s: %s", request.url.path, exc.errors())
        return JSONResponse(status_code=400, content=error_response("Invalid request body"))

    from app.api import auth, films, public

    app.include_router(auth.router)
    app.include_router(films.router)
    app.include_router(public.router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=default_settings.HOST, port=default_settings.PORT)
