import json
import binascii
import logging

from memshortener.types import LambdaEvent, LambdaContext, LambdaResponse
from memshortener.dao.base import ShortURLBaseDAO
from memshortener.dao.memory import shared_short_url_dao
from memshortener.dao.exceptions import CapacityExhaustedError
from memshortener.utils import load_config, shortcode_options, get_short_url, request_body
from memshortener.utils.helpers import guarantee_500_response
from memshortener.lambdas.responses import response_200, response_400, response_405, response_500, response_503
from memshortener.lambdas.shorten_url.constants import (
    METHOD_NOT_ALLOWED,
    INVALID_REQUEST_BODY,
    MISSING_URL,
    CAPACITY_EXHAUSTED,
    SHORTEN_SUCCESS,
)


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext, dao: ShortURLBaseDAO | None = None) -> LambdaResponse:
    """Handle incoming JSON API requests to shorten URLs

    This handler follows this procedure to shorten URLs:
    - Step 1: Reject anything but POST
    - Step 2: Extract original URL from the JSON request body
    - Step 3: Create the short URL mapping in the store
    - Step 4: Respond to user with 200 success

    HTTP responses:
        200: Successful URL shortening
            id: newly generated shortcode
            original: original url (provided in request)
            short: newly generated short url
        400: Bad client request
            message: indicate cause of bad request (undecodable body, invalid JSON or missing url)
        405: Method not allowed
        500: Internal server error
        503: No free shortcode found (retry later)

    Args:
        event (LambdaEvent):
            Request event in API Gateway proxy format.
        context (LambdaContext):
            Runtime context object (not used directly).
        dao (ShortURLBaseDAO | None):
            Short URL store. Defaults to the process-wide in-memory store.

    Returns:
        LambdaResponse:
            Response dict with status code, headers, and JSON body.

    Example:
        >>> event = {'httpMethod': 'POST', 'body': '{"url": "https://example.com"}'}
        >>> response = lambda_handler(event, None)
        >>> response['statusCode']
        200
        >>> json.loads(response['body'])['short']
        'http://localhost:8080/s/Xa81Kq'
    """
    # 0- Get handler's config
    try:
        app_config = load_config('shorten_url')
    except FileNotFoundError:
        logger.exception('Failed to load config for shorten URL handler. Responding with 500.')
        return response_500()

    # 1- Only POST requests create short URLs
    method = (event.get('httpMethod') or '').upper()
    if method != 'POST':
        logger.info('Unsupported method. Responding with 405.', extra={'method': method, 'event': METHOD_NOT_ALLOWED})
        return response_405(allow='POST', error_code=METHOD_NOT_ALLOWED)

    # 2- Extract original URL from request body
    try:
        payload = json.loads(request_body(event) or '{}')
    except (binascii.Error, UnicodeDecodeError, json.JSONDecodeError):
        logger.info('Undecodable or invalid JSON body. Responding with 400.', extra={'event': INVALID_REQUEST_BODY})
        return response_400(message='invalid request body', error_code=INVALID_REQUEST_BODY)

    target_url = payload.get('url') if isinstance(payload, dict) else None
    if not isinstance(target_url, str) or not target_url.strip():
        logger.info("Missing 'url' in JSON body. Responding with 400.", extra={'event': MISSING_URL})
        return response_400(message='URL is required', error_code=MISSING_URL)

    # 3- Store short URL mapping
    dao = shared_short_url_dao() if dao is None else dao
    try:
        short_url = dao.create(target_url, **shortcode_options(app_config))
    except CapacityExhaustedError:
        logger.error('No free shortcode available. Responding with 503.', extra={'event': CAPACITY_EXHAUSTED})
        return response_503(message='no free short URL available, try again later', error_code=CAPACITY_EXHAUSTED)

    # 4- Return successful response to user
    short_url_string = get_short_url(short_url.shortcode, event, app_config)
    logger.info(
        'Short URL created. Responding with 200.',
        extra={'shortcode': short_url.shortcode, 'event': SHORTEN_SUCCESS},
    )
    return response_200(
        {
            'id': short_url.shortcode,
            'original': short_url.target,
            'short': short_url_string,
        }
    )
