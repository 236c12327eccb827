import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from api import config
from api.exceptions import register_exception_handlers
from api.middleware.logging import RequestLoggingMiddleware
from api.routers.posts_router import router
from dbase.collections.PostCollection import PostCollection
from dbase.driver import DbaseDriver

logger = logging.getLogger(__name__)


def configure_logging(level: str = config.LOG_LEVEL) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    # RequestLoggingMiddleware already writes one line per request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def create_app(driver: Optional[DbaseDriver] = None) -> FastAPI:
    """
    Build the API. With no driver the app connects to DATABASE_URL on startup
    and disconnects on shutdown; an injected driver stays owned by the caller.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned = driver is None
        if owned:
            configure_logging()
        db = DbaseDriver(config.DATABASE_URL).connect() if owned else driver
        app.state.db = db
        app.state.posts = PostCollection(db=db)
        logger.info("Connected to database %s", db.db_name)
        yield
        if owned:
            db.close()
            logger.info("Database connection closed")

    app = FastAPI(title="Blog Posts API", lifespan=lifespan)
    app.add_middleware(RequestLoggingMiddleware)
    register_exception_handlers(app)
    app.include_router(router)
    return app


app = create_app()
