import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from folio.config import LOG_LEVEL
from folio.database import init_db
from folio.errors import FolioError
from folio.routers import authors, books, comments
from folio.services.identity import check_identity_claim


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_db()
    yield


async def handle_folio_error(request: Request, exc: FolioError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail, "errors": exc.errors()},
    )


def create_app() -> FastAPI:
    logging.basicConfig(level=LOG_LEVEL)
    check_identity_claim()
    app = FastAPI(title="Folio", version="0.1.0", lifespan=lifespan)
    app.add_exception_handler(FolioError, handle_folio_error)
    app.include_router(books.router)
    app.include_router(authors.router)
    app.include_router(comments.router)
    return app


app = create_app()
