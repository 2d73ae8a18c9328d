"""AWS Lambda gateway.

Keeps boto3 and botocore out of the mutation logic: the gateway fetches and
updates function configuration and turns every botocore failure into a
LevError.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Protocol

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError, NoRegionError

from lev.errors import InvalidArgumentsError
from lev.gateway.error_classifier import classify_exception
from lev.models.domain import FunctionConfiguration
from lev.observability.redaction import describe_keys

if TYPE_CHECKING:
    from mypy_boto3_lambda import LambdaClient

    from lev.config import LevConfig

logger = logging.getLogger(__name__)


class PlatformGateway(Protocol):
    """What the mutation logic needs from the platform."""

    def fetch(self, function_name: str) -> FunctionConfiguration: ...

    def update(
        self, function_name: str, configuration: FunctionConfiguration
    ) -> FunctionConfiguration: ...


def create_lambda_client(config: LevConfig) -> LambdaClient:
    """Create a boto3 Lambda client from configuration.

    botocore's own retries are disabled so one lev invocation maps to at most
    one GetFunctionConfiguration and one UpdateFunctionConfiguration request.
    Retrying is left to the operator.
    """
    try:
        session = boto3.Session(
            profile_name=config.aws_profile,
            region_name=config.aws_region,
        )
        return session.client(
            "lambda",
            endpoint_url=config.endpoint_url,
            config=Config(retries={"max_attempts": 1, "mode": "standard"}),
        )
    except NoRegionError as e:
        raise InvalidArgumentsError(
            "no AWS region configured; pass --region or set LEV_AWS_REGION or AWS_REGION"
        ) from e
    except BotoCoreError as e:
        raise classify_exception(e) from e


class LambdaGateway:
    """Fetches and updates Lambda function configuration.

    Args:
        client: boto3 Lambda client.
        use_revision_id: Send the fetched RevisionId with updates so Lambda
            rejects the write if the function changed in between.
    """

    def __init__(self, client: LambdaClient, *, use_revision_id: bool = True) -> None:
        self.client = client
        self.use_revision_id = use_revision_id

    def fetch(self, function_name: str) -> FunctionConfiguration:
        """Fetch the current configuration of `function_name`.

        Raises:
            LevError: Classified failure from the Lambda API.
        """
        logger.debug("GetFunctionConfiguration: function=%s", function_name)
        try:
            response = self.client.get_function_configuration(FunctionName=function_name)
        except (ClientError, BotoCoreError) as e:
            logger.debug("GetFunctionConfiguration failed: function=%s error=%s", function_name, e)
            raise classify_exception(e) from e

        return FunctionConfiguration.from_response(response)

    def update(
        self, function_name: str, configuration: FunctionConfiguration
    ) -> FunctionConfiguration:
        """Write the environment map of `configuration` back to Lambda.

        Only the Environment block is sent; Lambda keeps every field that is
        not part of the request as it was.

        Raises:
            LevError: Classified failure from the Lambda API.
        """
        env = configuration.env_map()
        request: dict[str, Any] = {
            "FunctionName": function_name,
            "Environment": {"Variables": env},
        }
        if self.use_revision_id and configuration.revision_id:
            request["RevisionId"] = configuration.revision_id

        logger.debug(
            "UpdateFunctionConfiguration: function=%s keys=[%s] revision_id=%s",
            function_name,
            describe_keys(env),
            request.get("RevisionId"),
        )
        try:
            response = self.client.update_function_configuration(**request)
        except (ClientError, BotoCoreError) as e:
            logger.debug(
                "UpdateFunctionConfiguration failed: function=%s error=%s", function_name, e
            )
            raise classify_exception(e) from e

        return FunctionConfiguration.from_response(response)
