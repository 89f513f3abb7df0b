"""Manage user accounts through AWS Cognito."""

from .accounts import (
    admin_get_user,
    authenticate,
    change_password,
    confirm,
    confirm_forgot_password,
    forgot_password,
    get_user,
    sign_up,
    update_user_attributes,
)
from .exceptions import CognitoError
from .service import IdentityService
from .shapes import Outcome, UserAttribute
from .wrapper import CognitoService

__all__ = [
    "CognitoError",
    "CognitoService",
    "IdentityService",
    "Outcome",
    "UserAttribute",
    "admin_get_user",
    "authenticate",
    "change_password",
    "confirm",
    "confirm_forgot_password",
    "forgot_password",
    "get_user",
    "sign_up",
    "update_user_attributes",
]
