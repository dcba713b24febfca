# storefront/utils/retry.py
import requests
from tenacity import retry, retry_if_exception, stop_after_attempt, wait_exponential

# rate limiting and upstream failures; other 4xx answers won't change on retry
RETRYABLE_STATUS = {429, 500, 502, 503, 504}


def is_retryable(exc: BaseException) -> bool:
    if isinstance(exc, requests.HTTPError):
        return exc.response is not None and exc.response.status_code in RETRYABLE_STATUS
    return isinstance(exc, requests.RequestException)


def http_retry(attempts: int = 3):
    return retry(
        reraise=True,
        stop=stop_after_attempt(attempts),
        wait=wait_exponential(multiplier=0.3, min=0.3, max=3),
        retry=retry_if_exception(is_retryable),
    )
