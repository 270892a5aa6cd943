"""Remote distribution API: capability protocol and the boto3 CloudFront adapter."""

from __future__ import annotations

from typing import Any, Protocol

import boto3
from botocore.exceptions import ClientError

PRECONDITION_FAILED_CODES = ("PreconditionFailed", "InvalidIfMatchVersion")


class DistributionClient(Protocol):
    """What the configurator needs from the remote control plane."""

    def get_distribution_config(self, distribution_id: str) -> tuple[dict[str, Any], str]:
        ...

    def update_distribution_config(
        self, distribution_id: str, config: dict[str, Any], etag: str
    ) -> None:
        ...


def is_precondition_failure(exc: BaseException) -> bool:
    """True if exc is the API rejecting a stale IfMatch ETag."""
    if not isinstance(exc, ClientError):
        return False
    code = exc.response.get("Error", {}).get("Code", "")
    status = exc.response.get("ResponseMetadata", {}).get("HTTPStatusCode")
    return code in PRECONDITION_FAILED_CODES or status == 412


class Boto3DistributionClient:
    """DistributionClient over boto3's CloudFront client. Errors propagate as raised by botocore."""

    def __init__(self, client: Any = None, region: str | None = None) -> None:
        self._client = client if client is not None else boto3.client("cloudfront", region_name=region)

    def get_distribution_config(self, distribution_id: str) -> tuple[dict[str, Any], str]:
        resp = self._client.get_distribution_config(Id=distribution_id)
        return resp["DistributionConfig"], resp["ETag"]

    def update_distribution_config(
        self, distribution_id: str, config: dict[str, Any], etag: str
    ) -> None:
        self._client.update_distribution(
            Id=distribution_id,
            DistributionConfig=config,
            IfMatch=etag,
        )
