import logging

from slugstore.types import LambdaEvent, LambdaContext, LambdaResponse
from slugstore.dao.base import IdentityBaseDAO
from slugstore.dao.exceptions import DataStoreError, SlugNotFoundError
from slugstore.constants import SLUG_FOUND, SLUG_NOT_FOUND, MISSING_PATH_PARAMETER, DATA_STORE_UNAVAILABLE
from slugstore.lambdas.dependencies import identity_dao
from slugstore.utils.helpers import path_parameter, guarantee_500_response
from slugstore.utils.identifiers import is_valid_slug
from slugstore.utils.responses import response_200_json, response_400, response_404, response_503


logger = logging.getLogger(__name__)


def lookup_slug(event: LambdaEvent, context: LambdaContext, dao: IdentityBaseDAO) -> LambdaResponse:
    """Resolve a slug back into its identity record

    Serves `GET /lookup/{slug}`:
    - Step 1: Extract slug from request path
    - Step 2: Fetch the identity record (via DAO)
    - Step 3: Respond with the record as JSON

    HTTP responses:
        200: Record found
            body: {"user": ..., "userType": ..., "action": ...}
        400: Bad client request
            errorMessage: missing slug in path
        404: Not found
            errorMessage: "Key not found" (malformed, unknown or expired slug)
        503: Service unavailable
            errorMessage: Redis read failed
        500: Internal server error (see guarantee_500_response)

    Args:
        event (LambdaEvent):
            API Gateway event payload containing the slug path parameter.
        context (LambdaContext):
            AWS Lambda context object (not used directly).
        dao (IdentityBaseDAO):
            Identity record store.

    Returns:
        LambdaResponse:
            API Gateway-compatible response including statusCode, headers, and body.

    Example:
        >>> event = {'pathParameters': {'slug': '01JA8Q6W3M2ZB0S6QX1V9C4T7N'}}
        >>> response = lookup_slug(event, None, dao)
        >>> response['body']
        '{"user": "u123", "userType": "resident", "action": "smsConsent"}'
    """
    # 1- Extract slug from request path
    slug = path_parameter(event, 'slug')
    if slug is None:
        logger.info('Missing "slug" in path. Responding with 400.', extra={'event': MISSING_PATH_PARAMETER})
        return response_400(message="missing 'slug' in path", error_code=MISSING_PATH_PARAMETER)

    # Slugs of the wrong shape can't exist in Redis, skip the round trip
    if not is_valid_slug(slug):
        logger.info('Malformed slug. Responding with 404.', extra={'slug': slug, 'event': SLUG_NOT_FOUND})
        return response_404(error_code=SLUG_NOT_FOUND)

    # 2- Fetch the identity record
    try:
        record = dao.lookup(slug)
    except SlugNotFoundError:
        logger.info('Slug not found (never created or expired). Responding with 404.', extra={'slug': slug, 'event': SLUG_NOT_FOUND})
        return response_404(error_code=SLUG_NOT_FOUND)
    except DataStoreError as e:
        logger.error(
            'Failed to read identity record. Responding with 503.',
            extra={'slug': slug, 'event': DATA_STORE_UNAVAILABLE, 'errorCode': e.error_code, 'reason': str(e)},
        )
        return response_503(message='could not look up slug', error_code=e.error_code)

    # 3- Respond with the record
    logger.info('Found slug. Responding with 200.', extra={'slug': slug, 'event': SLUG_FOUND})
    return response_200_json(record.to_dict())


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    return lookup_slug(event, context, dao=identity_dao())
