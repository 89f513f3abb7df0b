"""Contract for the identity provider calls the account API depends on."""

from abc import ABC, abstractmethod
from typing import Any

# (response mapping, opaque metadata)
ServiceResponse = tuple[dict, Any]


class IdentityService(ABC):
    """Port for Cognito user pool operations.

    Every method takes the request mapping Cognito expects and returns a
    ``(response, metadata)`` tuple, or raises
    :class:`~cognitex.exceptions.CognitoError` when the provider rejects it.
    """

    @abstractmethod
    def sign_up(self, request: dict) -> ServiceResponse:
        """Register a user with a password and attributes"""

    @abstractmethod
    def confirm_sign_up(self, request: dict) -> ServiceResponse:
        """Confirm registration with the emailed code"""

    @abstractmethod
    def admin_initiate_auth(self, request: dict) -> ServiceResponse:
        """Authenticate a user as an administrator"""

    @abstractmethod
    def get_user(self, request: dict) -> ServiceResponse:
        """Get the attributes of the user owning an access token"""

    @abstractmethod
    def admin_get_user(self, request: dict) -> ServiceResponse:
        """Get a user by username as an administrator"""

    @abstractmethod
    def change_password(self, request: dict) -> ServiceResponse:
        """Change the password of the user owning an access token"""

    @abstractmethod
    def update_user_attributes(self, request: dict) -> ServiceResponse:
        """Update attributes of the user owning an access token"""

    @abstractmethod
    def forgot_password(self, request: dict) -> ServiceResponse:
        """Send a password reset code to the user"""

    @abstractmethod
    def confirm_forgot_password(self, request: dict) -> ServiceResponse:
        """Set a new password with a password reset code"""
