"""Configuration management using environment variables."""

import os

from dotenv import load_dotenv

# Load .env file from current working directory
load_dotenv()

DEFAULT_REGION = "ap-southeast-1"


def get_aws_config():
    """Get boto3 client arguments from environment variables.

    ``endpoint_url`` is only included when ``AWS_COGNITO_ENDPOINT`` is set,
    so boto3 falls back to the regional endpoint otherwise.
    """
    config = {
        "aws_access_key_id": os.environ.get("AWS_ACCESS_KEY_ID"),
        "aws_secret_access_key": os.environ.get("AWS_SECRET_ACCESS_KEY"),
        "region_name": os.environ.get("AWS_REGION", DEFAULT_REGION),
    }
    endpoint = os.environ.get("AWS_COGNITO_ENDPOINT")
    if endpoint:
        config["endpoint_url"] = endpoint
    return config


def get_client_id():
    """Get Cognito app client ID from environment variable."""
    return os.environ.get("AWS_COGNITO_CLIENT_ID")


def get_user_pool_id():
    """Get Cognito User Pool ID from environment variable."""
    return os.environ.get("AWS_COGNITO_USER_POOL_ID")
