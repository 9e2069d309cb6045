from functools import wraps
import logging

import httpx

from src.utils.exceptions import RemoteAPIError


def _response_body(response: httpx.Response):
    try:
        return response.json()
    except ValueError:
        return response.text


def try_except_decorator(func):
    """Wraps a HubSpot call. Logs failures and raises them as RemoteAPIError.

    Return values are not logged since several calls carry OAuth tokens.
    """

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            result = func(*args, **kwargs)
            logging.debug("Function %s succeeded", func.__name__)
            return result
        except httpx.HTTPStatusError as e:
            logging.error(
                "HTTP status error in %s: %s | response: %s",
                func.__name__,
                e.response.status_code,
                e.response.text,
            )
            raise RemoteAPIError(
                f"HubSpot returned error response: {e.response.status_code}",
                upstream_status=e.response.status_code,
                body=_response_body(e.response),
            ) from e
        except httpx.RequestError as e:
            logging.error("HTTP request error in %s: %s", func.__name__, str(e))
            raise RemoteAPIError(
                f"HubSpot request failed: {e}", upstream_status=502
            ) from e

    return wrapper
