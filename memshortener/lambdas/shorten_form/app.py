import binascii
import logging
from urllib.parse import parse_qs

from memshortener.types import LambdaEvent, LambdaContext, LambdaResponse
from memshortener.dao.base import ShortURLBaseDAO
from memshortener.dao.memory import shared_short_url_dao
from memshortener.dao.exceptions import CapacityExhaustedError
from memshortener.utils import load_config, shortcode_options, get_short_url, request_body
from memshortener.utils.helpers import guarantee_500_response
from memshortener.lambdas.html import render_result_page
from memshortener.lambdas.responses import response_html, response_303, response_500, response_503
from memshortener.lambdas.shorten_form.constants import (
    NOT_A_FORM_SUBMISSION,
    INVALID_REQUEST_BODY,
    MISSING_URL,
    CAPACITY_EXHAUSTED,
    SHORTEN_SUCCESS,
)


logger = logging.getLogger(__name__)


def form_value(event: LambdaEvent, name: str) -> str:
    """Return the first value of a url-encoded form field, '' if absent or undecodable."""
    try:
        body = request_body(event)
    except (binascii.Error, UnicodeDecodeError):
        logger.info('Undecodable base64 form body.', extra={'event': INVALID_REQUEST_BODY})
        return ''
    values = parse_qs(body, keep_blank_values=True).get(name) or ['']
    return values[0]


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext, dao: ShortURLBaseDAO | None = None) -> LambdaResponse:
    """Handle submissions of the home page's URL shortening form

    This handler follows this procedure to shorten URLs:
    - Step 1: Send anything but POST back to the home page
    - Step 2: Extract original URL from the form body
    - Step 3: Create the short URL mapping in the store
    - Step 4: Render the result page

    HTTP responses:
        200: HTML page showing the original and the short URL
        303: Redirect to '/' (not a POST, undecodable body, or blank url)
        500: Internal server error
        503: No free shortcode found (retry later)
    """
    # 0- Get handler's config
    try:
        app_config = load_config('shorten_form')
    except FileNotFoundError:
        logger.exception('Failed to load config for shorten form handler. Responding with 500.')
        return response_500()

    # 1- Anything other than a form submission goes back to the form
    method = (event.get('httpMethod') or '').upper()
    if method != 'POST':
        logger.info('Not a form submission. Redirecting to home page.', extra={'method': method, 'event': NOT_A_FORM_SUBMISSION})
        return response_303(location='/')

    # 2- Extract original URL from the form
    target_url = form_value(event, 'url')
    if not target_url.strip():
        logger.info("Empty 'url' form field. Redirecting to home page.", extra={'event': MISSING_URL})
        return response_303(location='/')

    # 3- Store short URL mapping
    dao = shared_short_url_dao() if dao is None else dao
    try:
        short_url = dao.create(target_url, **shortcode_options(app_config))
    except CapacityExhaustedError:
        logger.error('No free shortcode available. Responding with 503.', extra={'event': CAPACITY_EXHAUSTED})
        return response_503(message='no free short URL available, try again later', error_code=CAPACITY_EXHAUSTED)

    # 4- Render result page
    short_url_string = get_short_url(short_url.shortcode, event, app_config)
    logger.info(
        'Short URL created from form. Responding with 200.',
        extra={'shortcode': short_url.shortcode, 'event': SHORTEN_SUCCESS},
    )
    return response_html(render_result_page(short_url.target, short_url_string))
