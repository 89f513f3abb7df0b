"""Identity service backed by the AWS Cognito Identity Provider API."""

import logging
from functools import lru_cache

import botocore.session
from botocore.exceptions import ClientError, ParamValidationError

from .client import get_cognito_client
from .exceptions import CognitoError
from .map_helpers import camelize
from .service import IdentityService, ServiceResponse

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def input_members(operation: str) -> frozenset:
    """Get the request fields the boto3 operation accepts."""
    service_model = botocore.session.get_session().get_service_model("cognito-idp")
    input_shape = service_model.operation_model(camelize(operation)).input_shape
    return frozenset(input_shape.members)


class CognitoService(IdentityService):
    """Forward requests to boto3's ``cognito-idp`` client.

    A client is created for every call so configuration changes are picked
    up without restarting the process.

    Args:
        **client_options: Extra ``boto3.client`` arguments such as
            ``config=botocore.config.Config(...)``.
    """

    def __init__(self, **client_options) -> None:
        self.client_options = client_options

    def _call(self, operation: str, request: dict) -> ServiceResponse:
        client = get_cognito_client(**self.client_options)
        logger.debug("Calling Cognito %s", operation)

        # SignUp is scoped by ClientId alone and rejects UserPoolId
        members = input_members(operation)
        request = {k: v for k, v in request.items() if k in members}

        try:
            response = getattr(client, operation)(**request)
        except ClientError as e:
            error = e.response.get("Error", {})
            raise CognitoError(
                error.get("Code", "Unknown"), error.get("Message", str(e))
            ) from e
        except ParamValidationError as e:
            raise CognitoError("ParamValidationError", e.kwargs.get("report", str(e))) from e

        metadata = response.pop("ResponseMetadata", {})
        return response, metadata

    def sign_up(self, request: dict) -> ServiceResponse:
        """Registers the user in the user pool with a password and attributes."""
        return self._call("sign_up", request)

    def confirm_sign_up(self, request: dict) -> ServiceResponse:
        """Confirms registration of a user."""
        return self._call("confirm_sign_up", request)

    def admin_initiate_auth(self, request: dict) -> ServiceResponse:
        """Initiates the authentication flow as an administrator.

        Requires developer credentials.
        """
        return self._call("admin_initiate_auth", request)

    def get_user(self, request: dict) -> ServiceResponse:
        """Gets the user attributes and metadata for a user."""
        return self._call("get_user", request)

    def admin_get_user(self, request: dict) -> ServiceResponse:
        """Gets the specified user by user name as an administrator.

        Works on any user. Requires developer credentials.
        """
        return self._call("admin_get_user", request)

    def change_password(self, request: dict) -> ServiceResponse:
        """Changes the password for a user in a user pool."""
        return self._call("change_password", request)

    def update_user_attributes(self, request: dict) -> ServiceResponse:
        """Updates the attributes of the signed in user."""
        return self._call("update_user_attributes", request)

    def forgot_password(self, request: dict) -> ServiceResponse:
        """Sends the user a confirmation code required to reset the password."""
        return self._call("forgot_password", request)

    def confirm_forgot_password(self, request: dict) -> ServiceResponse:
        """Resets a forgotten password with a confirmation code."""
        return self._call("confirm_forgot_password", request)
