class SlugStoreError(Exception):
    """Base exception for all application-specific errors."""

    error_code = 'app:slugstore_error'


class MalformedResponseError(SlugStoreError):
    """Raised when a response is malformed."""

    error_code = 'app:malformed_response_error'


class ConfigurationError(SlugStoreError):
    """Base exception for all configuration errors."""

    error_code = 'config:configuration_error'


class BadConfigurationError(ConfigurationError):
    """Raised when the application is configured with invalid parameters."""

    error_code = 'config:bad_configuration_error'


class ValidationError(SlugStoreError):
    """Base exception for rejected client input."""

    error_code = 'validation:validation_error'


class InvalidUserTypeError(ValidationError):
    """Raised when the user type is not one of the supported user types."""

    error_code = 'validation:invalid_user_type_error'


class InvalidActionError(ValidationError):
    """Raised when the action is not one of the supported actions."""

    error_code = 'validation:invalid_action_error'


class InvalidUserIdError(ValidationError):
    """Raised when the user id is empty."""

    error_code = 'validation:invalid_user_id_error'
