"""Retry policy for HTTP calls made by the backend client."""

import sys

import httpx
from tenacity import AsyncRetrying, retry_if_exception, stop_after_attempt, wait_exponential

TRANSIENT_STATUS_CODES = (429, 500, 502, 503)


def _is_transient(exc: BaseException) -> bool:
    """Return True if the exception is a transient HTTP/network error worth retrying."""
    if isinstance(exc, httpx.TimeoutException):
        return True
    if isinstance(exc, httpx.ConnectError):
        return True
    if isinstance(exc, httpx.HTTPStatusError):
        return exc.response.status_code in TRANSIENT_STATUS_CODES
    return False


async def send_with_retry(send, max_retries: int = 3) -> httpx.Response:
    """Await ``send()`` with exponential backoff on transient errors.

    Responses with a transient status code are turned into
    ``httpx.HTTPStatusError`` so they are retried; once retries run out that
    error is raised. Any other response is returned as-is for the caller
    to interpret. Non-transient exceptions are raised immediately.
    """
    from uigen.config import get_config

    config = get_config()
    retries = config.get("api_max_retries", max_retries)

    async def _send() -> httpx.Response:
        response = await send()
        if response.status_code in TRANSIENT_STATUS_CODES:
            response.raise_for_status()
        return response

    retrying = AsyncRetrying(
        stop=stop_after_attempt(retries + 1),  # +1 because first attempt counts
        wait=wait_exponential(
            multiplier=1,
            min=config.get("retry_wait_min", 2),
            max=config.get("retry_wait_max", 16),
        ),
        retry=retry_if_exception(_is_transient),
        reraise=True,
        before_sleep=lambda state: print(
            f"[UIGen] Transient error: {state.outcome.exception()!r}. "
            f"Retrying in {state.next_action.sleep:.0f}s "
            f"(attempt {state.attempt_number}/{retries})...",
            file=sys.stderr,
        ),
    )
    return await retrying(_send)
