from typing import Optional
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import logging

from cretaceous_park.config import Settings, get_settings
from cretaceous_park.database import create_tables
from cretaceous_park.handlers import api_router

logging.basicConfig(level=get_settings().log_level)
logger = logging.getLogger(__name__)

create_tables()


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Невалидное тело или параметры - это 400, а не 422"""
    logger.info(f'Bad request {request.method} {request.url.path}: {exc.errors()}')
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST,
                        content={'detail': jsonable_encoder(exc.errors())})


async def unhandled_exception_handler(request: Request, exc: Exception):
    """Все, что не поймали сервисы, логируем и отдаем как 500"""
    logger.exception(f'Unhandled error on {request.method} {request.url.path}', exc_info=exc)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                        content={'detail': 'Internal Server Error'})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    application = FastAPI(title='Cretaceous Park')
    application.add_exception_handler(RequestValidationError, validation_exception_handler)
    application.add_exception_handler(Exception, unhandled_exception_handler)
    application.include_router(api_router, prefix=settings.api_prefix)
    return application


app = create_app()
