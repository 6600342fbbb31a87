from memshortener.utils.config import app_env, project_root, load_config, shortcode_options
from memshortener.utils.helpers import base_url, get_short_url, extract_shortcode, request_body, guarantee_500_response
from memshortener.utils.shortener import generate_shortcode
from memshortener.utils.logging import initialize_logging


__all__ = [
    'generate_shortcode',
    'app_env',
    'project_root',
    'load_config',
    'shortcode_options',
    'base_url',
    'get_short_url',
    'extract_shortcode',
    'request_body',
    'guarantee_500_response',
    'initialize_logging',
]
