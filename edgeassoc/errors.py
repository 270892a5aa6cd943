"""Error taxonomy and step outcome for the association workflow."""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class EdgeAssocError(Exception):
    """Base class for all workflow failures. exit_code is the process exit status."""

    exit_code = 1


class MissingConfiguration(EdgeAssocError):
    """A required input is absent or empty."""

    exit_code = 1

    def __init__(self, field: str, alternatives: tuple[str, ...] = ()) -> None:
        where = f" (or {', '.join(alternatives)})" if alternatives else ""
        super().__init__(f"{field}{where} must be specified")
        self.field = field
        self.alternatives = alternatives


class InvalidConfiguration(MissingConfiguration):
    """An input is present but unusable (bad config file, bad boolean)."""

    def __init__(self, field: str, reason: str) -> None:
        EdgeAssocError.__init__(self, f"{field}: {reason}")
        self.field = field
        self.alternatives: tuple[str, ...] = ()
        self.reason = reason


class _RemoteError(EdgeAssocError):
    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message if cause is None else f"{message}: {cause}")
        self.cause = cause
        self.__cause__ = cause


class FetchFailed(_RemoteError):
    """Reading the distribution config failed (not found, auth, transport)."""

    exit_code = 2


class ConcurrentModification(_RemoteError):
    """The update was rejected because the ETag is stale."""

    exit_code = 3


class UpdateFailed(_RemoteError):
    """The update failed for any reason other than a stale ETag."""

    exit_code = 4


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Result of one workflow step: a value or an error, never both."""

    value: T | None = None
    error: EdgeAssocError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "Outcome[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: EdgeAssocError) -> "Outcome[Any]":
        return cls(error=error)

    def unwrap(self) -> T:
        """Return the value or raise the error."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]
