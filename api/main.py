import logging
import os
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from api.dependencies import cleanup_dependencies, init_dependencies
from api.error_handlers import register_exception_handlers
from api.routes import currency
from config.settings import get_settings
from infrastructure.monitoring.logger import configure_logging

logger = logging.getLogger(__name__)


settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
	configure_logging(settings)
	logger.info('Starting USD Cost API...')

	init_dependencies()

	logger.info('Application ready')

	yield

	logger.info('Shutting down...')
	await cleanup_dependencies()


app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)


@app.middleware('http')
async def stamp_request_time(request: Request, call_next):
	request.state.started_at = time.time()
	return await call_next(request)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
	logger.error(f'Unhandled exception: {exc}', exc_info=True)
	content = {'detail': 'Internal server error'}
	if settings.DISPLAY_ERROR_DETAILS:
		content['error'] = str(exc)
	return JSONResponse(status_code=500, content=content)


app.include_router(currency.router)
register_exception_handlers(app)


if __name__ == '__main__':
	import uvicorn

	host = os.getenv('HOST', '0.0.0.0')
	port = int(os.getenv('PORT', 8000))

	logger.info(f'Starting server on {host}:{port}')

	uvicorn.run('api.main:app', host=host, port=port, log_level='info')
