import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from config.settings import get_settings
from domain.exceptions.currency import InvalidRequestError, UpstreamError

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
	@app.exception_handler(InvalidRequestError)
	async def invalid_request_handler(request: Request, exc: InvalidRequestError):
		return JSONResponse(
			status_code=status.HTTP_400_BAD_REQUEST,
			content={'errors': exc.errors, 'status': status.HTTP_400_BAD_REQUEST},
		)

	@app.exception_handler(UpstreamError)
	async def upstream_error_handler(request: Request, exc: UpstreamError):
		logger.error(f'Upstream error: {exc}')
		content = {'detail': 'Exchange rate service unavailable'}
		if get_settings().DISPLAY_ERROR_DETAILS:
			content['error'] = str(exc)
		return JSONResponse(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=content)
