"""LambdaModel base class for AWS Lambda API payloads."""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_pascal


class LambdaModel(BaseModel):
    """Base model for Lambda API payloads with PascalCase/snake_case conversion.

    - Wire payloads (boto3 requests/responses) use PascalCase
    - Internal Python uses snake_case
    - Fields the model does not declare are kept verbatim as extras, so a
      payload survives a load/dump cycle without losing anything
    - Instances are immutable; derive new ones with `model_copy(update=...)`
    """

    model_config = ConfigDict(
        alias_generator=to_pascal,
        populate_by_name=True,
        extra="allow",
        frozen=True,
    )

    @property
    def extra_fields(self) -> dict[str, Any]:
        """Fields present in the source payload that the model does not declare."""
        return dict(self.model_extra or {})
