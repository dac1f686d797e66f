import logging

from slugstore.types import LambdaEvent, LambdaContext, LambdaResponse
from slugstore.dao.base import IdentityBaseDAO
from slugstore.dao.exceptions import DataStoreError
from slugstore.exceptions import ValidationError
from slugstore.constants import SLUG_CREATED, INVALID_INPUT, DATA_STORE_UNAVAILABLE
from slugstore.lambdas.dependencies import identity_dao
from slugstore.utils.helpers import path_parameter, guarantee_500_response
from slugstore.utils.responses import response_200_text, response_400, response_503
from slugstore.utils.validation import validate_input


logger = logging.getLogger(__name__)


def create_slug(event: LambdaEvent, context: LambdaContext, dao: IdentityBaseDAO) -> LambdaResponse:
    """Create a slug for an identity record

    Serves both `GET /save/{userType}/{userId}/{action}` and
    `GET /save/{userType}/{userId}/{action}/{ttl}`:
    - Step 1: Extract and validate path parameters (TTL is normalized, never rejected)
    - Step 2: Store the identity record under a fresh slug (via DAO)
    - Step 3: Respond with the slug as plain text

    HTTP responses:
        200: Slug created
            body: the slug (text/plain)
        400: Bad client request
            errorMessage: invalid user type, action or user id
        503: Service unavailable
            errorMessage: Redis write or expire failed
        500: Internal server error (see guarantee_500_response)

    Args:
        event (LambdaEvent):
            API Gateway event payload in Lambda Proxy format.
        context (LambdaContext):
            AWS Lambda context object (not used directly).
        dao (IdentityBaseDAO):
            Identity record store.

    Returns:
        LambdaResponse:
            API Gateway-compatible response including statusCode, headers, and body.

    Example:
        >>> event = {'pathParameters': {'userType': 'resident', 'userId': 'u123', 'action': 'smsConsent', 'ttl': '3600'}}
        >>> response = create_slug(event, None, dao)
        >>> response['statusCode'], response['body']
        (200, '01JA8Q6W3M2ZB0S6QX1V9C4T7N')
    """
    # 1- Extract and validate path parameters
    try:
        validated = validate_input(
            path_parameter(event, 'userType'),
            path_parameter(event, 'action'),
            path_parameter(event, 'userId'),
            path_parameter(event, 'ttl'),
        )
    except ValidationError as e:
        logger.info(
            'Rejected slug creation input. Responding with 400.',
            extra={'event': INVALID_INPUT, 'errorCode': e.error_code, 'reason': str(e)},
        )
        return response_400(message=str(e), error_code=e.error_code)

    # 2- Store the identity record under a fresh slug
    try:
        slug = dao.create(validated.record, ttl=validated.ttl)
    except DataStoreError as e:
        logger.error(
            'Failed to store identity record. Responding with 503.',
            extra={'event': DATA_STORE_UNAVAILABLE, 'errorCode': e.error_code, 'reason': str(e)},
        )
        return response_503(message='could not create slug', error_code=e.error_code)

    # 3- Respond with the slug
    logger.info(
        'Created slug. Responding with 200.',
        extra={'event': SLUG_CREATED, 'slug': slug, 'userType': validated.user_type, 'action': validated.action, 'ttl': validated.ttl},
    )
    return response_200_text(slug)


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    return create_slug(event, context, dao=identity_dao())
