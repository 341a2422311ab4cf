# orderdesk/main.py
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
import uvicorn

from orderdesk.api import ROUTERS
from orderdesk.data.database import Database
from orderdesk.utils.logging import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    database = app.state.database
    if database is None:
        database = app.state.database = Database()

    logger.info("Initializing database...")
    database.create_all()
    try:
        yield
    finally:
        database.dispose()


async def persistence_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"Persistence failure on {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"detail": "Server Error"})


def create_app(database: Database | None = None) -> FastAPI:
    app = FastAPI(
        title="Order Service",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.database = database

    # Include routers
    for router in ROUTERS:
        app.include_router(router)

    app.add_exception_handler(SQLAlchemyError, persistence_error_handler)

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
