import logging

from memshortener.types import LambdaEvent, LambdaContext, LambdaResponse
from memshortener.utils.helpers import guarantee_500_response
from memshortener.lambdas.html import HOME_PAGE
from memshortener.lambdas.responses import response_html, response_404
from memshortener.lambdas.home.constants import PAGE_NOT_FOUND, HOME_PAGE_SERVED


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Serve the home page holding the URL shortening form

    HTTP responses:
        200: HTML page with a form posting `url` to /shorten-form
        404: any path other than '/'
    """
    path = event.get('path') or '/'
    if path != '/':
        logger.info('Unknown page requested. Responding with 404.', extra={'path': path, 'event': PAGE_NOT_FOUND})
        return response_404(message=f'no page at {path}', error_code=PAGE_NOT_FOUND)

    logger.debug('Serving home page.', extra={'event': HOME_PAGE_SERVED})
    return response_html(HOME_PAGE)
