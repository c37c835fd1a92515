"""HTTP gateway for the Hue Bridge v1 REST API.

Requests are issued on a background worker and return a PendingRequest
straight away. The caller blocks on the handle before the process exits so
the response callback always gets to run.
"""

import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable

import click
import requests

from core.config import ConfigStore, get_request_timeout
from core.errors import MissingConfig, TransportError, UnexpectedResponseShape

JSON_HEADERS = {
    'Content-Type': 'application/json',
    'Accept': 'application/json',
}
ACCEPT_HEADERS = {'Accept': 'application/json'}


def _ignore_response(data: Any):
    pass


class PendingRequest:
    """One-shot completion signal for an in-flight request.

    Signalled exactly once by the worker, waited on by the main thread. If
    the response callback raised, wait() re-raises the same exception.
    """

    def __init__(self, url: str):
        self.url = url
        self._event = threading.Event()
        self._lock = threading.Lock()
        self._error: BaseException | None = None

    @property
    def done(self) -> bool:
        return self._event.is_set()

    def signal(self, error: BaseException | None = None):
        with self._lock:
            if self._event.is_set():
                raise RuntimeError(f"Request to {self.url} already completed")
            self._error = error
            self._event.set()

    def wait(self):
        """Block until the request has completed. There is no timeout."""
        self._event.wait()
        if self._error is not None:
            raise self._error


class HttpGateway:
    """Builds bridge URLs and performs requests against them."""

    def __init__(self, config: ConfigStore, session: requests.Session | None = None,
                 executor: ThreadPoolExecutor | None = None, timeout: float | None = None):
        """Initialise HttpGateway.

        Args:
            config: Loaded configuration providing bridge IP and username
            session: HTTP session (a new one is created if not provided)
            executor: Worker pool requests run on (single worker by default)
            timeout: Request timeout in seconds, None to wait indefinitely
        """
        self.config = config
        self.session = session or requests.Session()
        self._executor = executor or ThreadPoolExecutor(
            max_workers=1, thread_name_prefix='hue-request'
        )
        self.timeout = timeout if timeout is not None else get_request_timeout()

    def build_pairing_url(self) -> str:
        ip_address = self.config.ip_address
        if not ip_address:
            raise MissingConfig('ip address')
        return f"http://{ip_address}/api/"

    def build_authenticated_url(self, relative_path: str) -> str:
        ip_address = self.config.ip_address
        if not ip_address:
            raise MissingConfig('ip address')
        username = self.config.username
        if not username:
            raise MissingConfig('username')
        return f"http://{ip_address}/api/{username}/{relative_path.lstrip('/')}"

    def get(self, url: str, on_success: Callable[[Any], None]) -> PendingRequest:
        return self._submit('GET', url, on_success, headers=ACCEPT_HEADERS)

    def post(self, url: str, body: Any, on_success: Callable[[Any], None]) -> PendingRequest:
        return self._submit('POST', url, on_success, headers=JSON_HEADERS, body=body)

    def delete(self, url: str, on_success: Callable[[Any], None] = _ignore_response) -> PendingRequest:
        return self._submit('DELETE', url, on_success, headers=ACCEPT_HEADERS)

    def close(self):
        """Shut down the worker pool and HTTP session."""
        self._executor.shutdown(wait=True)
        self.session.close()

    def _submit(self, method: str, url: str, on_success: Callable[[Any], None],
                headers: dict[str, str], body: Any = None) -> PendingRequest:
        pending = PendingRequest(url)
        self._executor.submit(self._perform, pending, method, url, on_success, headers, body)
        return pending

    def _perform(self, pending: PendingRequest, method: str, url: str,
                 on_success: Callable[[Any], None], headers: dict[str, str], body: Any):
        """Run one request and its callback, then release the handle."""
        error = None
        try:
            kwargs = {'headers': headers, 'timeout': self.timeout}
            if body is not None:
                kwargs['json'] = body

            try:
                response = self.session.request(method, url, **kwargs)
            except requests.exceptions.RequestException as e:
                click.echo(str(TransportError(url, str(e))), err=True)
                return

            if not response.content:
                click.echo(f"Calling {url} gives empty response", err=True)
                return

            try:
                data = response.json()
            except ValueError as e:
                raise UnexpectedResponseShape(f"Calling {url} returned invalid JSON: {e}") from e

            on_success(data)
        except Exception as e:
            # Handed over to the waiting thread by wait()
            error = e
        finally:
            pending.signal(error)
