"""HTTP client with retries and optional tracing of failed exchanges."""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import Any, TextIO

import requests

from ezstore.logger import Logger, LogLevel

_RETRY_COUNT = 5
_RETRY_STEP_SECONDS = 5


def _status(response: Any) -> str:
    reason = getattr(response, "reason", None) or ""
    return f"{response.status_code} {reason}".strip()


def _as_text(body: Any) -> str:
    if isinstance(body, (bytes, bytearray)):
        return bytes(body).decode("utf-8", errors="replace")
    return str(body)


def trace_request(stream: TextIO, request: Any) -> None:
    """Write the method, URL, headers and body of a request to stream."""
    if request is None:
        return
    lines = [f"> {str(request.method).upper()} {request.url}\n"]
    for key, value in (request.headers or {}).items():
        lines.append(f"> {key}: {value}\n")
    if request.body is not None:
        lines.append("> Body:\n")
        lines.append(f"{_as_text(request.body)}\n")
    lines.append("\n")
    stream.write("".join(lines))


def trace_error(stream: TextIO, error: BaseException | None) -> None:
    """Write the text of an error to stream."""
    if error is None:
        return
    text = str(error)
    line = f"! {text}\n" if text else "! (empty)\n"
    stream.write(line + "\n")


def trace_response(stream: TextIO, response: Any) -> None:
    """Write the status, headers and body of a response to stream."""
    if response is None:
        return
    lines = []
    status = _status(response)
    if status:
        lines.append(f"< {status}\n")
    for key, value in (response.headers or {}).items():
        lines.append(f"< {key}: {value}\n")
    body = response.content
    if body:
        lines.append("< Body:\n")
        lines.append(f"{_as_text(body)}\n")
    lines.append("\n")
    stream.write("".join(lines))


class StoreClient:
    """Sends requests, retrying network failures with a growing pause between attempts."""

    def __init__(
        self,
        logger: Logger | None = None,
        session: requests.Session | None = None,
        retries: int = _RETRY_COUNT,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.logger = logger if logger is not None else Logger()
        self.session = session if session is not None else requests.Session()
        self.session.headers["Content-Encoding"] = "Encoding.UTF8"
        self.retries = retries
        self._sleep = sleep

    def request(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        """Send a request and return the response, whatever its status.

        Network errors are retried; the last one is raised once retries run out.
        """
        attempt = 0
        while True:
            try:
                response = self.session.request(method, url, **kwargs)
            except requests.RequestException as error:
                if attempt >= self.retries:
                    self._trace(error.request, error, error.response)
                    raise
                attempt += 1
                self._trace(error.request, error, error.response)
                self.logger.warning(str(error))
                self._sleep(_RETRY_STEP_SECONDS * attempt)
                continue
            if response.status_code >= 400:
                self._trace(response.request, None, response)
            return response

    def _trace(self, request: Any, error: BaseException | None, response: Any) -> None:
        if self.logger.level != LogLevel.DETAILED:
            return
        with open(self.logger.trace_file, "a", encoding="utf-8") as stream:
            trace_request(stream, request)
            trace_error(stream, error)
            trace_response(stream, response)

    def close(self) -> None:
        """Close the underlying session."""
        self.session.close()

    def __enter__(self) -> StoreClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()