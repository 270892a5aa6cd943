"""Lambda@Edge association as a Pulumi dynamic resource wrapping the configurator."""

from __future__ import annotations

from typing import Any

import pulumi
import pulumi.dynamic

from edgeassoc.associations import DEFAULT_EVENT_TYPE
from edgeassoc.client import Boto3DistributionClient
from edgeassoc.config import AssociationRequest
from edgeassoc.configurator import Configurator

_INPUTS = ("distribution_id", "event_type", "function_arn", "include_body")


class _LambdaEdgeAssociationProvider(pulumi.dynamic.ResourceProvider):
    """Dynamic provider: create/update run one read-modify-write against CloudFront."""

    def __init__(self, region: str | None = None) -> None:
        super().__init__()
        self._region = region

    def _client(self) -> Boto3DistributionClient:
        return Boto3DistributionClient(region=self._region)

    def _apply(self, props: dict[str, Any]) -> dict[str, Any]:
        request = AssociationRequest(
            distribution_id=props["distribution_id"],
            function_arn=props["function_arn"],
            event_type=props.get("event_type") or DEFAULT_EVENT_TYPE,
            include_body=props.get("include_body"),
        )
        result = Configurator(self._client(), request).apply_association().unwrap()
        return {**props, "event_type": result.event_type, "inserted": result.inserted}

    def create(self, props: dict[str, Any]) -> pulumi.dynamic.CreateResult:
        outs = self._apply(props)
        return pulumi.dynamic.CreateResult(
            id_=f"{outs['distribution_id']}/{outs['event_type']}",
            outs=outs,
        )

    def diff(self, id_: str, olds: dict[str, Any], news: dict[str, Any]) -> pulumi.dynamic.DiffResult:
        changed = [k for k in _INPUTS if olds.get(k) != news.get(k)]
        replaces = [k for k in ("distribution_id", "event_type") if k in changed]
        return pulumi.dynamic.DiffResult(
            changes=bool(changed),
            replaces=replaces,
            delete_before_replace=False,
        )

    def update(self, id_: str, olds: dict[str, Any], news: dict[str, Any]) -> pulumi.dynamic.UpdateResult:
        return pulumi.dynamic.UpdateResult(outs=self._apply(news))

    def delete(self, id_: str, props: dict[str, Any]) -> None:
        # Association stays on the distribution; removal is not supported.
        pulumi.log.warn(f"{id_}: association left in place on delete")


class LambdaEdgeAssociation(pulumi.dynamic.Resource):
    """Binds one event type on a distribution's default cache behavior to a function ARN."""

    distribution_id: pulumi.Output[str]
    event_type: pulumi.Output[str]
    function_arn: pulumi.Output[str]
    inserted: pulumi.Output[bool]

    def __init__(
        self,
        resource_name: str,
        distribution_id: pulumi.Input[str],
        function_arn: pulumi.Input[str],
        event_type: str = DEFAULT_EVENT_TYPE,
        include_body: bool | None = None,
        region: str | None = None,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__(
            _LambdaEdgeAssociationProvider(region),
            resource_name,
            {
                "distribution_id": distribution_id,
                "function_arn": function_arn,
                "event_type": event_type,
                "include_body": include_body,
                "inserted": None,
            },
            opts,
        )
