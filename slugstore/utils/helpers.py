"""Helper utilities for AWS lambda functions.

Functions:
    path_parameter(event, name) -> str | None
        Extract a path parameter from an API Gateway event
    guarantee_500_response(handler) -> Callable
        Decorator: Turn unexpected handler exceptions into a 500 response

Example:
    Typical usage inside a Lambda handler:

        >>> event = {'pathParameters': {'slug': '01JA8Q6W3M2ZB0S6QX1V9C4T7N'}}
        >>> path_parameter(event, 'slug')
        '01JA8Q6W3M2ZB0S6QX1V9C4T7N'
        >>> path_parameter(event, 'ttl') is None
        True
"""

import functools
import logging
from collections.abc import Callable

from slugstore.types import LambdaEvent, LambdaContext, LambdaResponse
from slugstore.constants import UNKNOWN_INTERNAL_SERVER_ERROR
from slugstore.utils.responses import response_500


logger = logging.getLogger(__name__)


def path_parameter(event: LambdaEvent, name: str) -> str | None:
    """Extract a path parameter from an API Gateway event

    API Gateway sends `"pathParameters": null` when a route has none,
    which is treated like an empty mapping.

    Args:
        event (dict): API Gateway event object passed to Lambda handler
        name (str): path parameter name

    Returns:
        str | None: the parameter's value, None if absent
    """
    return (event.get('pathParameters') or {}).get(name)


def guarantee_500_response(handler: Callable[[LambdaEvent, LambdaContext], LambdaResponse]) -> Callable[[LambdaEvent, LambdaContext], LambdaResponse]:
    """Decorator: respond with 500 on any unexpected exception raised by a Lambda handler

    Only `Exception` subclasses are caught. `SystemExit` passes through so a
    handler can still tear down its execution environment.

    Example:
        >>> @guarantee_500_response
        ... def lambda_handler(event, context):
        ...     raise RuntimeError('boom')
        >>> lambda_handler({}, None)['statusCode']
        500
    """

    @functools.wraps(handler)
    def wrapper(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
        try:
            return handler(event, context)
        except Exception:
            logger.exception('Unhandled exception in lambda handler. Responding with 500.', extra={'event': UNKNOWN_INTERNAL_SERVER_ERROR})
            return response_500(error_code=UNKNOWN_INTERNAL_SERVER_ERROR)

    return wrapper
