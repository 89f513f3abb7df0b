"""Errors raised by the identity service layer."""


class CognitoError(Exception):
    """A request rejected by Cognito.

    Attributes:
        status: The provider error code, e.g. ``"NotAuthorizedException"``.
        message: The provider's human readable message.
    """

    def __init__(self, status: str, message: str) -> None:
        super().__init__(f"{status}: {message}")
        self.status = status
        self.message = message
