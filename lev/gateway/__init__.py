"""Platform gateway: boto3 Lambda access and error classification."""

from .error_classifier import classify_environment_error, classify_exception, kind_for_code
from .lambda_gateway import LambdaGateway, PlatformGateway, create_lambda_client

__all__ = [
    "LambdaGateway",
    "PlatformGateway",
    "classify_environment_error",
    "classify_exception",
    "create_lambda_client",
    "kind_for_code",
]
