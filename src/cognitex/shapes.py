"""Request and result shapes exchanged with Cognito."""

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any, NamedTuple, Optional, Union

from .map_helpers import atomize_keys, camelize, stringify_key, underscore_keys

ADMIN_AUTH_FLOW = "ADMIN_NO_SRP_AUTH"


class UserAttribute(NamedTuple):
    """A single Cognito user attribute such as ``("email", "j@example.com")``."""

    name: str
    value: str


Attributes = Union[Mapping, list, tuple]


def encode_user_attributes(attrs: Attributes) -> list[dict]:
    """Encode attributes as Cognito ``{"Name": ..., "Value": ...}`` entries.

    Args:
        attrs: ``UserAttribute``s or ``(name, value)`` pairs, or a mapping of
            names to values. Caller order is kept.

    Returns:
        List of attribute dicts ready for the ``UserAttributes`` field.
    """
    pairs = attrs.items() if isinstance(attrs, Mapping) else attrs
    return [{"Name": stringify_key(name), "Value": value} for name, value in pairs]


@dataclass(frozen=True)
class _Request:
    def to_request(self) -> dict:
        request = {}
        for field in fields(self):
            value = getattr(self, field.name)
            if field.name == "user_attributes":
                value = encode_user_attributes(value)
            request[camelize(field.name)] = value
        return request


@dataclass(frozen=True)
class SignUpRequest(_Request):
    client_id: Optional[str]
    user_pool_id: Optional[str]
    username: str
    password: str
    user_attributes: Attributes = ()


@dataclass(frozen=True)
class ConfirmSignUpRequest(_Request):
    client_id: Optional[str]
    username: str
    confirmation_code: str


@dataclass(frozen=True)
class AdminInitiateAuthRequest(_Request):
    client_id: Optional[str]
    user_pool_id: Optional[str]
    username: str
    password: str

    def to_request(self) -> dict:
        return {
            "AuthFlow": ADMIN_AUTH_FLOW,
            "ClientId": self.client_id,
            "UserPoolId": self.user_pool_id,
            "AuthParameters": {"USERNAME": self.username, "PASSWORD": self.password},
        }


@dataclass(frozen=True)
class GetUserRequest(_Request):
    access_token: str


@dataclass(frozen=True)
class AdminGetUserRequest(_Request):
    user_pool_id: Optional[str]
    username: str


@dataclass(frozen=True)
class ChangePasswordRequest(_Request):
    access_token: str
    previous_password: str
    proposed_password: str


@dataclass(frozen=True)
class UpdateUserAttributesRequest(_Request):
    access_token: str
    user_attributes: Attributes = ()


@dataclass(frozen=True)
class ForgotPasswordRequest(_Request):
    client_id: Optional[str]
    username: str


@dataclass(frozen=True)
class ConfirmForgotPasswordRequest(_Request):
    client_id: Optional[str]
    confirmation_code: str
    username: str
    password: str


class Outcome(NamedTuple):
    """Result of an account operation.

    ``data`` is the Cognito response on success and a
    ``{"status": ..., "message": ...}`` dict on failure.
    """

    ok: bool
    data: dict

    @classmethod
    def success(cls, data: dict) -> "Outcome":
        return cls(True, data)

    @classmethod
    def failure(cls, status: str, message: str) -> "Outcome":
        return cls(False, {"status": status, "message": message})


def parse_user_attributes(response: dict[str, Any]) -> dict:
    """Flatten a get-user response into ``{"user_attributes": {name: value}}``.

    Attribute names are kept exactly as Cognito returns them, so custom
    attributes like ``custom:tier`` survive unchanged.
    """
    parsed = atomize_keys(underscore_keys(response))
    attributes = parsed.get("user_attributes") or []
    return {"user_attributes": {attr["name"]: attr.get("value") for attr in attributes}}
