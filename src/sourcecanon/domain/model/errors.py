"""Errors raised while resolving source identities.

Every error aborts resolution of the whole batch: a partially resolved graph could
present a wrong canonical identity without any visible indication.
"""

from __future__ import annotations


class SourceResolutionError(ValueError):
    """Base class for batch resolution failures."""

    def __init__(self, source_id: str, message: str) -> None:
        super().__init__(message)
        self.source_id = source_id


class MalformedRecordError(SourceResolutionError):
    """A record violates the shape invariant of its kind."""

    def __init__(self, source_id: str, reason: str) -> None:
        super().__init__(source_id, f"Malformed source record {source_id!r}: {reason}")
        self.reason = reason


class CyclicRelationshipError(SourceResolutionError):
    """Canonical-edge resolution did not reach a fixed point."""

    def __init__(self, source_id: str, *, steps: int) -> None:
        super().__init__(
            source_id,
            f"Canonical identity of {source_id!r} did not settle within {steps} steps "
            "(cyclic relationship)",
        )
        self.steps = steps


class UnknownSourceError(SourceResolutionError):
    """A record references an id that is not part of the batch."""

    def __init__(self, source_id: str, *, referenced_by: str) -> None:
        super().__init__(
            source_id,
            f"Source {referenced_by!r} references unknown source {source_id!r}",
        )
        self.referenced_by = referenced_by


class DuplicateSourceError(SourceResolutionError):
    """A different record was announced under an id that is already in use."""

    def __init__(self, source_id: str) -> None:
        super().__init__(source_id, f"Source id {source_id!r} is already in use")
