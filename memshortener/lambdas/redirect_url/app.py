import logging

from memshortener.types import LambdaEvent, LambdaContext, LambdaResponse
from memshortener.dao.base import ShortURLBaseDAO
from memshortener.dao.memory import shared_short_url_dao
from memshortener.dao.exceptions import ShortURLNotFoundError
from memshortener.utils import load_config, get_short_url, extract_shortcode
from memshortener.utils.helpers import guarantee_500_response
from memshortener.lambdas.responses import response_301, response_400, response_404, response_405, response_500
from memshortener.lambdas.redirect_url.constants import (
    METHOD_NOT_ALLOWED,
    MALFORMED_PATH,
    SHORT_URL_NOT_FOUND,
    REDIRECT_SUCCESS,
)


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext, dao: ShortURLBaseDAO | None = None) -> LambdaResponse:
    """Handle incoming requests to redirect short URLs

    This handler follows this procedure to redirect URLs:
    - Step 1: Reject anything but GET
    - Step 2: Extract shortcode from request path
    - Step 3: Resolve the shortcode in the store
    - Step 4: Redirect client to target URL

    HTTP responses:
        301: Successful redirect
            headers:
                Location: target URL destination
        400: Bad client request
            message: path doesn't start with '/s/'
        404: Not found
            message: empty shortcode or short URL doesn't exist
        405: Method not allowed
        500: Internal server error

    Args:
        event (LambdaEvent):
            Request event carrying the shortcode path parameter or raw path.
        context (LambdaContext):
            Runtime context object (not used directly).
        dao (ShortURLBaseDAO | None):
            Short URL store. Defaults to the process-wide in-memory store.

    Returns:
        LambdaResponse:
            Response dict including statusCode, headers, and body.

    Example:
        >>> event = {'httpMethod': 'GET', 'pathParameters': {'shortcode': 'Gh71TC'}}
        >>> response = lambda_handler(event, None)
        >>> response['statusCode']
        301
        >>> response['headers']['Location']
        'https://example.com/my-page'
    """
    # 0- Get handler's config
    try:
        app_config = load_config('redirect_url')
    except FileNotFoundError:
        logger.exception('Failed to load config for redirect URL handler. Responding with 500.')
        return response_500()

    # 1- Only GET requests are redirected
    method = (event.get('httpMethod') or '').upper()
    if method != 'GET':
        logger.info('Unsupported method. Responding with 405.', extra={'method': method, 'event': METHOD_NOT_ALLOWED})
        return response_405(allow='GET', error_code=METHOD_NOT_ALLOWED)

    # 2- Extract shortcode from request's path
    shortcode = extract_shortcode(event)
    if shortcode is None:
        logger.info(
            'Path is not a short URL path. Responding with 400.',
            extra={'path': event.get('path'), 'event': MALFORMED_PATH},
        )
        return response_400(message="path must start with '/s/'", error_code=MALFORMED_PATH)
    if not shortcode:
        logger.info('Empty shortcode in path. Responding with 404.', extra={'event': SHORT_URL_NOT_FOUND})
        return response_404(message='missing shortcode', error_code=SHORT_URL_NOT_FOUND)
    logger.debug('Client requested short URL %s.', get_short_url(shortcode, event, app_config))

    # 3- Resolve shortcode to its target URL
    dao = shared_short_url_dao() if dao is None else dao
    try:
        target_url = dao.resolve(shortcode)
    except ShortURLNotFoundError:
        logger.info(
            'Short URL record not found in store. Responding with 404.',
            extra={'shortcode': shortcode, 'event': SHORT_URL_NOT_FOUND},
        )
        return response_404(
            message=f"short url {get_short_url(shortcode, event, app_config)} doesn't exist",
            error_code=SHORT_URL_NOT_FOUND,
        )

    # 4- Redirect client to target URL
    logger.info(
        'Redirecting client to target URL. Responding with 301.',
        extra={'shortcode': shortcode, 'event': REDIRECT_SUCCESS},
    )
    return response_301(location=target_url)
