from contextlib import asynccontextmanager

import uvicorn
from dishka import AsyncContainer
from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from dishka.integrations.fastapi import setup_dishka

from core.container import create_container
from core.environment.config import Settings
from core.exception_handler import (
    validation_exception_handler,
    http_exception_handler,
    starlette_exception_handler,
    custom_exception_handler
)
from core.exceptions import BaseCustomException
from blockchain.router import router as blockchain_router

VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await app.state.dishka_container.close()


def create_app(container: AsyncContainer) -> FastAPI:
    """
    Build the FastAPI application around a dishka container.

    Parameters
    ----------
    container : AsyncContainer
        Dependency container

    Returns
    -------
    FastAPI
        Configured application
    """
    app = FastAPI(
        title="Simple Storage Chain Reader",
        version=VERSION,
        description="Reads the SimpleStorage contract value and its update history",
        lifespan=lifespan,
    )

    setup_dishka(container, app)

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(StarletteHTTPException, starlette_exception_handler)
    app.add_exception_handler(BaseCustomException, custom_exception_handler)
    app.add_exception_handler(Exception, custom_exception_handler)

    app.include_router(blockchain_router)

    @app.get("/")
    async def root():
        """
        Root endpoint.

        Returns
        -------
        dict
            Application information
        """
        return {
            "name": "Simple Storage Chain Reader",
            "version": VERSION,
            "endpoints": {
                "value": "/blockchain/value",
                "events": "/blockchain/events",
                "docs": "/docs"
            }
        }

    @app.get("/health")
    async def health():
        """
        Liveness endpoint, does not touch the chain.

        Returns
        -------
        dict
            Health status
        """
        return {"status": "healthy", "version": VERSION}

    return app


app = create_app(create_container())


if __name__ == "__main__":
    settings = Settings()
    uvicorn.run(app, host=settings.host, port=settings.port)
