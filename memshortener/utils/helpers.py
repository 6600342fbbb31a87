"""Helper utilities for request handlers.

Functions:
    base_url() -> str
        Extract correct public base URL from the configuration or the request event
    get_short_url() -> str
        Get string representation of short URL for a given shortcode
    extract_shortcode() -> str | None
        Extract the requested shortcode from a redirect event
    request_body() -> str
        Return the raw request body, decoding base64-encoded payloads
    guarantee_500_response(func) -> Callable
        Decorator: Turn any uncaught handler exception into a 500 response

Example:
    Typical usage inside a request handler:

        >>> from memshortener.utils.helpers import base_url
        >>> event = {
        ...     "requestContext": {
        ...         "domainName": "abc123.execute-api.us-east-1.amazonaws.com",
        ...         "stage": "Prod"
        ...     }
        ... }
        >>> base_url(event)
        'https://abc123.execute-api.us-east-1.amazonaws.com/Prod'

        >>> base_url({}, config={'base_url': 'https://sho.rt'})
        'https://sho.rt'

        >>> base_url({})
        'http://localhost:8080'
"""

import json
import base64
import logging
import functools
from typing import Any
from collections.abc import Callable

from memshortener.constants import DEFAULT_BASE_URL, SHORT_URL_PATH_PREFIX, UNKNOWN_INTERNAL_SERVER_ERROR


logger = logging.getLogger(__name__)


def base_url(event: dict[str, Any], config: dict[str, Any] | None = None) -> str:
    """Extract public base URL for the current request

    A `base_url` set in the handler configuration always wins. Otherwise the
    base URL is derived from the request event:
    If a custom domain is used, the stage name is omitted.
    If using a default AWS execute-api domain, the stage name is included.

    Args:
        event (dict): request event passed to the handler
        config (dict | None): handler configuration

    Returns:
        str: Base URL without a trailing slash, e.g.:
             - "https://sho.rt"
             - "https://abc123.execute-api.us-east-1.amazonaws.com/Prod"
             - "http://localhost:8080"
    """
    configured = (config or {}).get('base_url')
    if configured:
        return configured.rstrip('/')

    request_context = event.get('requestContext', {})
    domain = request_context.get('domainName', '')
    stage = request_context.get('stage', '')

    if domain and 'execute-api' not in domain:
        # If the domain is a custom domain (no execute-api), skip stage
        return f'https://{domain}'
    elif domain:
        # Otherwise include the stage (for AWS default domains)
        return f'https://{domain}/{stage}'
    else:
        # Fallback: local invocation (tests, local server, etc.)
        return DEFAULT_BASE_URL


def get_short_url(shortcode: str, event: dict[str, Any], config: dict[str, Any] | None = None) -> str:
    """Get string representation of shortened URL

    Args:
        shortcode (str): shortcode
        event (dict): request event passed to the handler
        config (dict | None): handler configuration

    Returns:
        str: short url string representation, e.g. 'http://localhost:8080/s/abc123'
    """
    return f'{base_url(event, config)}{SHORT_URL_PATH_PREFIX}{shortcode}'


def extract_shortcode(event: dict[str, Any]) -> str | None:
    """Extract the requested shortcode from a redirect event

    Path parameters resolved by the router take precedence. Otherwise the
    raw request path is parsed and MUST start with the short URL prefix
    ('/s/'). The shortcode is the remainder of the path, which may be empty.

    Args:
        event (dict): request event passed to the handler

    Returns:
        str | None:
            The shortcode (possibly empty).
            None if the path doesn't carry the short URL prefix.

    Example:
        >>> extract_shortcode({'pathParameters': {'shortcode': 'abc123'}})
        'abc123'
        >>> extract_shortcode({'path': '/s/abc123'})
        'abc123'
        >>> extract_shortcode({'path': '/x/abc123'}) is None
        True
    """
    shortcode = (event.get('pathParameters') or {}).get('shortcode')
    if shortcode is not None:
        return shortcode

    path = event.get('path') or ''
    if not path.startswith(SHORT_URL_PATH_PREFIX):
        return None
    return path[len(SHORT_URL_PATH_PREFIX) :]


def request_body(event: dict[str, Any]) -> str:
    """Return the request body as text

    API Gateway flags binary-safe payloads with `isBase64Encoded`; those are
    decoded to UTF-8 text first. A missing body yields an empty string.

    Raises:
        binascii.Error: the body is flagged as base64 but isn't valid base64
        UnicodeDecodeError: the decoded bytes aren't valid UTF-8

    Example:
        >>> request_body({'body': 'dXJsPWh0dHBzJTNBJTJGJTJGc2hvLnJ0', 'isBase64Encoded': True})
        'url=https%3A%2F%2Fsho.rt'
    """
    body = event.get('body') or ''
    if event.get('isBase64Encoded'):
        body = base64.b64decode(body, validate=True).decode('utf-8')
    return body


def guarantee_500_response(func: Callable) -> Callable:
    """Decorator: respond with HTTP 500 when a handler raises unexpectedly

    The exception is logged with its traceback and the client receives a
    generic JSON error body. Expected failures are handled inside the
    handler itself.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs) -> dict:
        try:
            return func(*args, **kwargs)
        except Exception:
            logger.exception(
                'Unhandled exception in request handler. Responding with 500.',
                extra={'handler': func.__module__, 'event': UNKNOWN_INTERNAL_SERVER_ERROR},
            )
            return {
                'statusCode': 500,
                'headers': {'Content-Type': 'application/json'},
                'body': json.dumps(
                    {
                        'message': 'Internal Server Error',
                        'errorCode': UNKNOWN_INTERNAL_SERVER_ERROR,
                    }
                ),
            }

    return wrapper
