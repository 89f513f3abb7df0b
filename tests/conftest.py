from unittest.mock import patch

import boto3
import pytest
from botocore.stub import Stubber

from cognitex.exceptions import CognitoError
from cognitex.service import IdentityService


@pytest.fixture(autouse=True)
def cognito_env(monkeypatch):
    """Point the configuration at a fake pool for every test."""
    monkeypatch.setenv("AWS_COGNITO_CLIENT_ID", "client_id")
    monkeypatch.setenv("AWS_COGNITO_USER_POOL_ID", "user_pool_id")
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_REGION", "us-east-1")
    monkeypatch.delenv("AWS_COGNITO_ENDPOINT", raising=False)


class FakeIdentityService(IdentityService):
    """Records every request and answers with a canned result.

    ``result`` is either a ``(response, metadata)`` tuple or a
    ``(status, message)`` pair wrapped in a CognitoError.
    """

    def __init__(self, result=({}, {})):
        self.result = result
        self.calls = []

    def _reply(self, operation, request):
        self.calls.append((operation, request))
        if isinstance(self.result, CognitoError):
            raise self.result
        return self.result

    def sign_up(self, request):
        return self._reply("sign_up", request)

    def confirm_sign_up(self, request):
        return self._reply("confirm_sign_up", request)

    def admin_initiate_auth(self, request):
        return self._reply("admin_initiate_auth", request)

    def get_user(self, request):
        return self._reply("get_user", request)

    def admin_get_user(self, request):
        return self._reply("admin_get_user", request)

    def change_password(self, request):
        return self._reply("change_password", request)

    def update_user_attributes(self, request):
        return self._reply("update_user_attributes", request)

    def forgot_password(self, request):
        return self._reply("forgot_password", request)

    def confirm_forgot_password(self, request):
        return self._reply("confirm_forgot_password", request)


@pytest.fixture
def fake_service():
    return FakeIdentityService()


@pytest.fixture
def stubbed_client():
    """Route CognitoService through a real cognito-idp client with a Stubber."""
    client = boto3.client(
        "cognito-idp",
        region_name="us-east-1",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )
    with Stubber(client) as stubber:
        with patch("cognitex.wrapper.get_cognito_client", return_value=client):
            yield stubber
        stubber.assert_no_pending_responses()
