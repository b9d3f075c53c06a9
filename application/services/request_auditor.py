import logging
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TypeVar

from infrastructure.monitoring.logger import AUDIT_LOGGER_NAME

T = TypeVar('T')

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RequestContext:
	request_uri: str
	started_at: float  # epoch seconds at request arrival
	user_agent: str | None
	client_ip: str | None


class RequestAuditor:
	"""
	Runs one request's business logic and writes exactly one audit record for it,
	whether the logic returns or raises. Exceptions propagate unchanged.
	"""

	def __init__(self, audit_logger: logging.Logger | None = None, clock: Callable[[], float] = time.time):
		self.audit_logger = audit_logger or logging.getLogger(AUDIT_LOGGER_NAME)
		self._clock = clock

	async def run(self, action: Callable[[], Awaitable[T]], context: RequestContext) -> T:
		try:
			return await action()
		finally:
			self._write(context)

	def _write(self, context: RequestContext) -> None:
		try:
			now = self._clock()
			self.audit_logger.info(
				'Request logging',
				extra={
					'extra_data': {
						'request_uri': context.request_uri,
						'lead_time_ms': (now - context.started_at) * 1000,
						'user_agent': context.user_agent,
						'user_ip': context.client_ip,
						'timestamp': int(now),
					}
				},
			)
		except Exception:
			# must not replace the outcome of the request being audited
			logger.exception(f'Failed to write audit record for {context.request_uri}')
