"""Read-modify-write of a distribution's default cache behavior edge associations."""

from __future__ import annotations

from dataclasses import dataclass
import json
import sys
from typing import Any, TextIO

from edgeassoc.associations import (
    Upsert,
    read_associations,
    upsert_association,
    with_associations,
)
from edgeassoc.client import DistributionClient, is_precondition_failure
from edgeassoc.config import ENV_DISTRIBUTION_ID, ENV_LAMBDA_ARN, AssociationRequest, missing
from edgeassoc.errors import (
    ConcurrentModification,
    FetchFailed,
    Outcome,
    UpdateFailed,
)


@dataclass
class Fetched:
    config: dict[str, Any]
    etag: str


@dataclass
class AssociationResult:
    """Final state reported after a successful update."""

    distribution_id: str
    event_type: str
    function_arn: str
    inserted: bool
    before: dict[str, Any]
    after: dict[str, Any]
    etag: str


class Configurator:
    """Ensures one event type on a distribution's default cache behavior points at one function.

    The client is passed in so tests can substitute a fake. out/err default to
    the process streams and receive the progress and warning lines.
    """

    def __init__(
        self,
        client: DistributionClient,
        request: AssociationRequest,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.client = client
        self.request = request
        self._out = out
        self._err = err

    def _print(self, msg: str) -> None:
        print(msg, file=self._out or sys.stdout)

    def _warn(self, msg: str) -> None:
        print(msg, file=self._err or sys.stderr)

    def validate(self) -> Outcome[AssociationRequest]:
        if not self.request.distribution_id:
            return Outcome.failure(missing(ENV_DISTRIBUTION_ID))
        if not self.request.function_arn:
            return Outcome.failure(missing(ENV_LAMBDA_ARN))
        return Outcome.success(self.request)

    def fetch(self) -> Outcome[Fetched]:
        distribution_id = self.request.distribution_id
        try:
            config, etag = self.client.get_distribution_config(distribution_id)
        except Exception as e:
            return Outcome.failure(
                FetchFailed(f"Failed to fetch distribution {distribution_id}", e)
            )
        return Outcome.success(Fetched(config=config, etag=etag))

    def mutate(self, fetched: Fetched) -> Outcome[Upsert]:
        req = self.request
        before = read_associations(fetched.config)
        self._print("Current assocs: " + json.dumps(before))
        upsert = upsert_association(before, req.event_type, req.function_arn, req.include_body)
        if upsert.duplicates:
            self._warn(
                f"Warning: {upsert.duplicates} additional {req.event_type} association(s) "
                f"on {req.distribution_id} left unchanged; only the first was updated"
            )
        self._print("New assocs: " + json.dumps(upsert.associations))
        return Outcome.success(upsert)

    def submit(self, fetched: Fetched, upsert: Upsert) -> Outcome[None]:
        distribution_id = self.request.distribution_id
        config = with_associations(fetched.config, upsert.associations)
        try:
            self.client.update_distribution_config(distribution_id, config, fetched.etag)
        except Exception as e:
            if is_precondition_failure(e):
                return Outcome.failure(
                    ConcurrentModification(
                        f"Distribution {distribution_id} changed since it was read (ETag {fetched.etag})",
                        e,
                    )
                )
            return Outcome.failure(
                UpdateFailed(f"Failed to update distribution {distribution_id}", e)
            )
        return Outcome.success(None)

    def apply_association(self) -> Outcome[AssociationResult]:
        """validate -> fetch -> locate/mutate -> submit -> report. Stops at the first error."""
        validated = self.validate()
        if validated.error is not None:
            return Outcome.failure(validated.error)

        req = self.request
        self._print(f"Updating distribution {req.distribution_id}")

        fetched = self.fetch()
        if fetched.error is not None:
            return Outcome.failure(fetched.error)
        snapshot = fetched.unwrap()

        mutated = self.mutate(snapshot)
        if mutated.error is not None:
            return Outcome.failure(mutated.error)
        upsert = mutated.unwrap()

        submitted = self.submit(snapshot, upsert)
        if submitted.error is not None:
            return Outcome.failure(submitted.error)

        self._print(
            f"Distribution {req.distribution_id} {req.event_type} handler is set to {req.function_arn}"
        )
        return Outcome.success(
            AssociationResult(
                distribution_id=req.distribution_id,
                event_type=req.event_type,
                function_arn=req.function_arn,
                inserted=upsert.inserted,
                before=read_associations(snapshot.config),
                after=upsert.associations,
                etag=snapshot.etag,
            )
        )
