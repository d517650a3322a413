"""
HTTP 接口

使用方式:
    from anititle.api import create_app
    app = create_app()
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from anititle.services.log_manager import setup_logging

from .control import router as control_router


def create_app(configure_logging: bool = True) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if configure_logging:
            setup_logging()
        yield

    app = FastAPI(title="anititle", lifespan=lifespan)
    app.include_router(control_router, prefix="/api/control")
    return app


__all__ = ['create_app']
