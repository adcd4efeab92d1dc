import logging
from typing import Any, Dict, Optional

import requests
from asgiref.sync import sync_to_async

from .conf import get_setting
from .constants import COUNT_PATH
from .counts import Count, Immediate
from .exceptions import MetricsFetchError

logger = logging.getLogger(__name__)


def _truncate(value: str, limit: int = 500) -> str:
    raw = str(value or '')
    return raw if len(raw) <= limit else (raw[: limit - 3] + '...')


def _error_detail(response: requests.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get('detail'):
        return str(body['detail'])
    return _truncate(response.text) or f'Non-success status code: {response.status_code}'


class MetricsClient:
    """Authenticated HTTP client for a content dashboard deployment.

    ``token`` is sent as a JWT bearer token. Pass a pre-configured
    ``requests.Session`` to use cookie/session auth instead.
    """

    def __init__(self, base_url: str, token: Optional[str] = None, session: Optional[requests.Session] = None, timeout: Optional[float] = None):
        self.base_url = base_url.rstrip('/')
        self.session = session or requests.Session()
        self.token = token
        self.timeout = timeout if timeout is not None else float(get_setting('CLIENT_TIMEOUT_SECONDS'))

    def url_for(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def get_headers(self) -> Dict[str, str]:
        # Per request, so a caller-supplied session is left untouched.
        headers = {'Accept': 'application/json'}
        if self.token:
            headers['Authorization'] = f'Bearer {self.token}'
        return headers

    def get(self, path: str) -> Any:
        url = self.url_for(path)
        try:
            response = self.session.get(url, timeout=self.timeout, headers=self.get_headers())
        except requests.RequestException as exc:
            raise MetricsFetchError(f'Request to {url} failed: {exc}') from exc

        if not 200 <= response.status_code < 300:
            logger.warning('GET %s returned status=%s', url, response.status_code)
            raise MetricsFetchError(_error_detail(response), status_code=response.status_code)

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise MetricsFetchError(f'Invalid JSON from {url}') from exc

    async def fetch_counts(self) -> Optional[Dict[str, Count]]:
        data = await sync_to_async(self.get, thread_sensitive=False)(COUNT_PATH)
        if data is None:
            return None
        if not isinstance(data, dict):
            raise MetricsFetchError(f'Unexpected response shape: {type(data).__name__}')
        # Over the wire every count is already a plain number or string.
        return {str(name): Immediate(value) for name, value in data.items()}


__all__ = ['MetricsClient']
