"""API Gateway (Lambda proxy) response builders

Error responses share one body shape:

    {"statusCode": 404, "errorMessage": "Key not found", "errorCode": "SLUG_NOT_FOUND"}

`statusCode` in the body mirrors the HTTP status of the response.
"""

import json

from slugstore.types import LambdaResponse


JSON_HEADERS = {'Content-Type': 'application/json'}
TEXT_HEADERS = {'Content-Type': 'text/plain; charset=utf-8'}


def error_response(status_code: int, message: str, error_code: str | None = None) -> LambdaResponse:
    body = {'statusCode': status_code, 'errorMessage': message}
    if error_code:
        body['errorCode'] = error_code
    return {
        'statusCode': status_code,
        'headers': dict(JSON_HEADERS),
        'body': json.dumps(body),
    }


def response_200_text(text: str) -> LambdaResponse:
    return {
        'statusCode': 200,
        'headers': dict(TEXT_HEADERS),
        'body': text,
    }


def response_200_json(payload: dict) -> LambdaResponse:
    return {
        'statusCode': 200,
        'headers': dict(JSON_HEADERS),
        'body': json.dumps(payload),
    }


def response_400(message: str | None = None, error_code: str | None = None) -> LambdaResponse:
    base = 'Bad Request'
    return error_response(400, base if not message else f'{base} ({message})', error_code)


def response_404(message: str = 'Key not found', error_code: str | None = None) -> LambdaResponse:
    return error_response(404, message, error_code)


def response_500(message: str | None = None, error_code: str | None = None) -> LambdaResponse:
    base = 'Internal Server Error'
    return error_response(500, base if not message else f'{base} ({message})', error_code)


def response_503(message: str | None = None, error_code: str | None = None) -> LambdaResponse:
    base = 'Service Unavailable'
    return error_response(503, base if not message else f'{base} ({message})', error_code)
