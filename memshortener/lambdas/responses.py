"""HTTP response builders shared by request handlers.

Every builder returns an API Gateway proxy-style response dict:

    {
        'statusCode': 200,
        'headers': {...},
        'body': '...',
    }
"""

import json


def _json_response(status_code: int, body: dict, headers: dict | None = None) -> dict:
    return {
        'statusCode': status_code,
        'headers': {'Content-Type': 'application/json', **(headers or {})},
        'body': json.dumps(body),
    }


def _error_body(base: str, message: str | None, error_code: str | None) -> dict:
    body = {'message': base if not message else f'{base} ({message})'}
    if error_code:
        body['errorCode'] = error_code
    return body


def response_200(body: dict) -> dict:
    return _json_response(200, body)


def response_html(html: str, status_code: int = 200) -> dict:
    return {
        'statusCode': status_code,
        'headers': {'Content-Type': 'text/html; charset=utf-8'},
        'body': html,
    }


def response_301(*, location: str) -> dict:
    return {
        'statusCode': 301,
        'headers': {'Location': location},
        'body': '',  # no body needed for redirects
    }


def response_303(*, location: str) -> dict:
    return {
        'statusCode': 303,
        'headers': {'Location': location},
        'body': '',
    }


def response_400(message: str | None = None, error_code: str | None = None) -> dict:
    return _json_response(400, _error_body('Bad Request', message, error_code))


def response_404(message: str | None = None, error_code: str | None = None) -> dict:
    return _json_response(404, _error_body('Not Found', message, error_code))


def response_405(*, allow: str, error_code: str | None = None) -> dict:
    return _json_response(405, _error_body('Method not allowed', None, error_code), headers={'Allow': allow})


def response_500(message: str | None = None) -> dict:
    return _json_response(500, _error_body('Internal Server Error', message, None))


def response_503(*, message: str | None = None, error_code: str | None = None) -> dict:
    return _json_response(503, _error_body('Service Unavailable', message, error_code))
