"""Unit tests for the shorten_form handler.

Test coverage includes:

1. Successful form submission renders the result page (HTTP 200)
2. Non-POST requests and empty `url` fields redirect home (HTTP 303)
3. Base64-encoded form bodies, including undecodable ones (HTTP 303)
4. HTML escaping of user supplied values, targets stored verbatim
5. Configuration errors (HTTP 500) and exhausted shortcode space (HTTP 503)
"""

import base64
import re
from typing import cast
from unittest.mock import MagicMock
from urllib.parse import urlencode

import pytest
from pytest import MonkeyPatch

from memshortener.types import LambdaEvent
from memshortener.lambdas.shorten_form import app
from memshortener.dao.base import ShortURLBaseDAO
from memshortener.dao.memory import ShortURLMemoryDAO
from memshortener.dao.exceptions import CapacityExhaustedError


def make_event(body: str | None, method: str = 'POST', encoded: bool = False) -> LambdaEvent:
    return cast(LambdaEvent, {
        'body': body,
        'isBase64Encoded': encoded,
        'httpMethod': method,
        'path': '/shorten-form',
        'headers': {'Content-Type': 'application/x-www-form-urlencoded'},
    })


SHORT_LINK = re.compile(r'<a href="http://localhost:8080/s/([a-zA-Z0-9]{6})">')


class TestShortenFormHandler:

    @pytest.fixture(autouse=True)
    def setup(self, monkeypatch: MonkeyPatch) -> None:
        monkeypatch.setattr(app, 'load_config', lambda *a, **kw: {'base_url': 'http://localhost:8080'})
        self.dao = ShortURLMemoryDAO()

    # -------------------------------
    # 1. Successful submission
    # -------------------------------

    def test_lambda_handler(self) -> None:
        response = app.lambda_handler(make_event(urlencode({'url': 'https://example.com/page'})), None, dao=self.dao)

        assert response['statusCode'] == 200
        assert response['headers']['Content-Type'].startswith('text/html')
        assert '<h1>URL Shortened</h1>' in response['body']
        assert 'https://example.com/page' in response['body']

        match = SHORT_LINK.search(response['body'])
        assert match is not None
        assert self.dao.resolve(match.group(1)) == 'https://example.com/page'

    # -------------------------------
    # 2. Redirect home
    # -------------------------------

    @pytest.mark.parametrize('method', ['GET', 'PUT', ''])
    def test_lambda_handler_with_wrong_method(self, method: str) -> None:
        response = app.lambda_handler(make_event(urlencode({'url': 'https://example.com'}), method=method), None, dao=self.dao)

        assert response['statusCode'] == 303
        assert response['headers']['Location'] == '/'
        assert self.dao.count() == 0

    @pytest.mark.parametrize('body', [None, '', 'url=', 'url=%20%20', 'other=https%3A%2F%2Fexample.com'])
    def test_lambda_handler_with_empty_url(self, body: str | None) -> None:
        response = app.lambda_handler(make_event(body), None, dao=self.dao)

        assert response['statusCode'] == 303
        assert response['headers']['Location'] == '/'
        assert self.dao.count() == 0

    # -------------------------------
    # 3. Base64 bodies
    # -------------------------------

    def test_lambda_handler_with_base64_body(self) -> None:
        body = base64.b64encode(urlencode({'url': 'https://example.com/b64'}).encode()).decode()

        response = app.lambda_handler(make_event(body, encoded=True), None, dao=self.dao)

        assert response['statusCode'] == 200
        match = SHORT_LINK.search(response['body'])
        assert self.dao.resolve(match.group(1)) == 'https://example.com/b64'

    @pytest.mark.parametrize(
        'body',
        [
            '!!!not-base64!!!',
            base64.b64encode(b'url=\xff\xfe').decode(),
        ],
        ids=['invalid-base64', 'invalid-utf8'],
    )
    def test_lambda_handler_with_undecodable_base64_body(self, body: str) -> None:
        response = app.lambda_handler(make_event(body, encoded=True), None, dao=self.dao)

        assert response['statusCode'] == 303
        assert response['headers']['Location'] == '/'
        assert self.dao.count() == 0

    # -------------------------------
    # 4. HTML escaping
    # -------------------------------

    def test_lambda_handler_escapes_target(self) -> None:
        target = 'https://example.com/"><script>alert(1)</script>'

        response = app.lambda_handler(make_event(urlencode({'url': target})), None, dao=self.dao)

        assert '<script>' not in response['body']
        assert '&lt;script&gt;' in response['body']
        # Stored verbatim nonetheless
        match = SHORT_LINK.search(response['body'])
        assert self.dao.resolve(match.group(1)) == target

    def test_lambda_handler_stores_target_verbatim(self) -> None:
        response = app.lambda_handler(make_event('url=+https%3A%2F%2Fexample.com%2Fa+'), None, dao=self.dao)

        assert response['statusCode'] == 200
        match = SHORT_LINK.search(response['body'])
        assert self.dao.resolve(match.group(1)) == ' https://example.com/a '

    # -------------------------------
    # 5. Errors
    # -------------------------------

    def test_lambda_handler_with_missing_configuration_file(self, monkeypatch: MonkeyPatch) -> None:
        monkeypatch.setattr(app, 'load_config', MagicMock(side_effect=FileNotFoundError('config/shorten_form/local.yml')))

        response = app.lambda_handler(make_event('url=https%3A%2F%2Fexample.com'), None, dao=self.dao)

        assert response['statusCode'] == 500

    def test_lambda_handler_with_capacity_exhausted(self) -> None:
        dao = MagicMock(spec=ShortURLBaseDAO)
        dao.create.side_effect = CapacityExhaustedError('no luck')

        response = app.lambda_handler(make_event('url=https%3A%2F%2Fexample.com'), None, dao=dao)

        assert response['statusCode'] == 503


@pytest.mark.parametrize(
    'body, expected',
    [
        ('url=https%3A%2F%2Fexample.com%2Fa%3Fb%3Dc', 'https://example.com/a?b=c'),
        ('url=first&url=second', 'first'),
        ('url=+padded+', ' padded '),
        ('', ''),
        (None, ''),
    ],
)
def test_form_value(body, expected):
    assert app.form_value({'body': body}, 'url') == expected
