"""Manage user accounts through AWS Cognito.

Every function builds the request Cognito expects, sends it through an
:class:`~cognitex.service.IdentityService` and returns an
:class:`~cognitex.shapes.Outcome`. Pass ``service=`` to use something other
than the real Cognito API, e.g. a test double.
"""

import logging
from typing import Callable, Optional

from .config import get_client_id, get_user_pool_id
from .exceptions import CognitoError
from .service import IdentityService
from .shapes import (
    AdminGetUserRequest,
    AdminInitiateAuthRequest,
    Attributes,
    ChangePasswordRequest,
    ConfirmForgotPasswordRequest,
    ConfirmSignUpRequest,
    ForgotPasswordRequest,
    GetUserRequest,
    Outcome,
    SignUpRequest,
    UpdateUserAttributesRequest,
    parse_user_attributes,
)
from .wrapper import CognitoService

logger = logging.getLogger(__name__)


def _send(
    service: Optional[IdentityService],
    operation: str,
    request: dict,
    parse: Optional[Callable[[dict], dict]] = None,
) -> Outcome:
    if service is None:
        service = CognitoService()

    try:
        response, _ = getattr(service, operation)(request)
    except CognitoError as e:
        logger.info("Cognito %s failed: %s", operation, e.status)
        return Outcome.failure(e.status, e.message)

    return Outcome.success(parse(response) if parse else response)


def sign_up(
    username: str,
    password: str,
    attrs: Attributes = (),
    *,
    service: Optional[IdentityService] = None,
) -> Outcome:
    """Register a user in the configured user pool.

    Args:
        username: Username, usually the email address.
        password: Password for the new account.
        attrs: User attributes as ``(name, value)`` pairs, e.g.
            ``[("name", "John"), ("family_name", "Smith")]``.
        service: Identity service to call. Defaults to Cognito.

    Returns:
        Outcome with the raw Cognito response on success.
    """
    request = SignUpRequest(
        client_id=get_client_id(),
        user_pool_id=get_user_pool_id(),
        username=username,
        password=password,
        user_attributes=attrs,
    ).to_request()
    return _send(service, "sign_up", request)


def confirm(
    username: str,
    confirmation_code: str,
    *,
    service: Optional[IdentityService] = None,
) -> Outcome:
    """Confirm a registration with the code Cognito sent to the user."""
    request = ConfirmSignUpRequest(
        client_id=get_client_id(),
        username=username,
        confirmation_code=confirmation_code,
    ).to_request()
    return _send(service, "confirm_sign_up", request)


def authenticate(
    username: str,
    password: str,
    *,
    service: Optional[IdentityService] = None,
) -> Outcome:
    """Authenticate a user with the admin no-SRP flow.

    Returns:
        Outcome with the Cognito response, including ``AuthenticationResult``
        tokens on success.
    """
    request = AdminInitiateAuthRequest(
        client_id=get_client_id(),
        user_pool_id=get_user_pool_id(),
        username=username,
        password=password,
    ).to_request()
    return _send(service, "admin_initiate_auth", request)


def get_user(access_token: str, *, service: Optional[IdentityService] = None) -> Outcome:
    """Get the attributes of the user an access token belongs to.

    Returns:
        Outcome with ``{"user_attributes": {name: value, ...}}`` on success.
    """
    request = GetUserRequest(access_token=access_token).to_request()
    return _send(service, "get_user", request, parse_user_attributes)


def admin_get_user(username: str, *, service: Optional[IdentityService] = None) -> Outcome:
    """Get the attributes of any user in the pool by username."""
    request = AdminGetUserRequest(
        user_pool_id=get_user_pool_id(),
        username=username,
    ).to_request()
    return _send(service, "admin_get_user", request, parse_user_attributes)


def change_password(
    access_token: str,
    previous_password: str,
    proposed_password: str,
    *,
    service: Optional[IdentityService] = None,
) -> Outcome:
    """Change the password of the user an access token belongs to."""
    request = ChangePasswordRequest(
        access_token=access_token,
        previous_password=previous_password,
        proposed_password=proposed_password,
    ).to_request()
    return _send(service, "change_password", request)


def update_user_attributes(
    access_token: str,
    attrs: Attributes,
    *,
    service: Optional[IdentityService] = None,
) -> Outcome:
    """Update attributes of the user an access token belongs to."""
    request = UpdateUserAttributesRequest(
        access_token=access_token,
        user_attributes=attrs,
    ).to_request()
    return _send(service, "update_user_attributes", request)


def forgot_password(username: str, *, service: Optional[IdentityService] = None) -> Outcome:
    """Start a password reset. Cognito sends the user a confirmation code."""
    request = ForgotPasswordRequest(
        client_id=get_client_id(),
        username=username,
    ).to_request()
    return _send(service, "forgot_password", request)


def confirm_forgot_password(
    confirmation_code: str,
    username: str,
    password: str,
    *,
    service: Optional[IdentityService] = None,
) -> Outcome:
    """Set a new password using the code from :func:`forgot_password`."""
    request = ConfirmForgotPasswordRequest(
        client_id=get_client_id(),
        confirmation_code=confirmation_code,
        username=username,
        password=password,
    ).to_request()
    return _send(service, "confirm_forgot_password", request)
