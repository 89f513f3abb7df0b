"""Cognito client factory."""

import boto3

from .config import get_aws_config
from .map_helpers import deep_merge


def get_cognito_client(**overrides):
    """Create and return a Cognito IDP client.

    Args:
        **overrides: Extra ``boto3.client`` arguments, merged over the
            environment configuration.
    """
    config = deep_merge(get_aws_config(), overrides)
    return boto3.client("cognito-idp", **config)
