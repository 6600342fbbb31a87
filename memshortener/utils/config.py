"""Utility functions for application configuration management.

This module provides a standardized interface for request handlers to
access their configuration. Each handler has its own directory of YAML
files under `config/`, one file per application environment (`APP_ENV`):

    config/
    ├── shorten_url/
    │   └── local.yml
    ├── shorten_form/
    │   └── local.yml
    └── redirect_url/
        └── local.yml

A handler configuration file looks like this:

    base_url: http://localhost:8080
    shortcode:
      length: 6
      max_retries: 10

Functions:
    app_env() -> str
        Return the current application environment (`APP_ENV`) value,
        defaulting to `'local'`.

    project_root() -> Path
        Return the absolute path to the project root directory, using
        `PROJECT_ROOT` when available.

    load_config(handler_name: str) -> dict
        Load the YAML configuration of a given handler for the current
        environment and return it as a Python dictionary.

    shortcode_options(config: dict) -> dict
        Extract keyword arguments for ShortURLBaseDAO.create() from a
        handler configuration.

Example:
    Typical usage inside a request handler:

        >>> from memshortener.utils.config import load_config
        >>> config = load_config('shorten_url')
        >>> print(config['shortcode']['length'])
        6
"""

import os
import logging
from pathlib import Path

import yaml

from memshortener.types import LambdaConfiguration
from memshortener.constants import ENV, Shortcode
from memshortener.exceptions import BadConfigurationError


logger = logging.getLogger(__name__)


def app_env() -> str:
    """Return the current application environment by reading 'APP_ENV'

    Returns:
        str:
            Value of `APP_ENV` environment variable, `'local'` by default.

    Example:
        >>> os.environ['APP_ENV'] = 'dev'
        >>> app_env()
        'dev'
    """
    return os.environ.get(ENV.App.APP_ENV, 'local').lower()


def project_root() -> Path:
    """Return the absolute path to the project root directory

    Finds the project root via the environment variable PROJECT_ROOT.
    Falls back to the directory holding the `memshortener` package.
    """
    return Path(os.environ.get(ENV.App.PROJECT_ROOT, Path(__file__).resolve().parents[2]))


def load_config(handler_name: str) -> LambdaConfiguration:
    """Load configuration for a given handler from its YAML file

    Args:
        handler_name (str):
            Name of the handler (e.g., "shorten_url" or "redirect_url").

    Returns:
        dict: The handler's configuration as a Python dictionary.
              An empty file yields an empty dictionary.

    Raises:
        FileNotFoundError:
            If `config/<handler_name>/<APP_ENV>.yml` doesn't exist.
        BadConfigurationError:
            If the YAML document is not a mapping.

    Example:
        >>> app_config = load_config('shorten_url')
        >>> app_config['base_url']
        'http://localhost:8080'
    """
    path = project_root() / 'config' / handler_name / f'{app_env()}.yml'
    logger.debug('Trying to load handler config.', extra={'path': str(path), 'handlerName': handler_name})

    with open(path, encoding='utf-8') as f:
        config = yaml.safe_load(f)

    if config is None:
        config = {}
    if not isinstance(config, dict):
        raise BadConfigurationError(f'Config {path} must be a mapping (given type: {type(config).__name__}).')

    logger.debug('Loaded handler config.', extra={'path': str(path), 'handlerName': handler_name})
    return config


def shortcode_options(config: LambdaConfiguration) -> dict[str, int]:
    """Extract shortcode generation options from a handler configuration

    Args:
        config (dict):
            Handler configuration as returned by load_config().

    Returns:
        dict: keyword arguments `length` and `max_retries` for
              ShortURLBaseDAO.create(), falling back to defaults.

    Raises:
        BadConfigurationError:
            If `shortcode` is not a mapping or holds non-integer values.

    Example:
        >>> shortcode_options({'shortcode': {'length': 8}})
        {'length': 8, 'max_retries': 10}
    """
    section = config.get('shortcode') or {}
    if not isinstance(section, dict):
        raise BadConfigurationError("'shortcode' config section must be a mapping.")

    options = {
        'length': section.get('length', Shortcode.LENGTH),
        'max_retries': section.get('max_retries', Shortcode.MAX_RETRIES),
    }
    for key, value in options.items():
        if not isinstance(value, int) or isinstance(value, bool):
            raise BadConfigurationError(f"'shortcode.{key}' must be an integer (given value: {value!r}).")
    if options['length'] <= 0:
        raise BadConfigurationError(f"'shortcode.length' must be positive (given value: {options['length']}).")
    if options['max_retries'] < 0:
        raise BadConfigurationError(f"'shortcode.max_retries' must be non-negative (given value: {options['max_retries']}).")
    return options
