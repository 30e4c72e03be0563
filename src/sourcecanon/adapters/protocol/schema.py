"""Minimal Pydantic models for recording-protocol source messages."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from sourcecanon.domain.model import SourceKind  # noqa: TC001


class ProtocolBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


class NewSourcePayload(ProtocolBaseModel):
    """``newSource`` event payload announcing one source."""

    source_id: str = Field(alias="sourceId", min_length=1)
    kind: SourceKind
    url: str | None = None
    generated_source_ids: list[str] = Field(default_factory=list[str], alias="generatedSourceIds")
    content_hash: str | None = Field(default=None, alias="contentHash")


class SourceDetailsPayload(ProtocolBaseModel):
    """Resolved description as handed to the UI layer."""

    id: str
    kind: SourceKind
    canonical_id: str = Field(alias="canonicalId")
    url: str | None = None
    content_hash: str | None = Field(default=None, alias="contentHash")
    generated: list[str] = Field(default_factory=list[str])
    generated_from: list[str] = Field(default_factory=list[str], alias="generatedFrom")
    pretty_printed: str | None = Field(default=None, alias="prettyPrinted")
    pretty_printed_from: str | None = Field(default=None, alias="prettyPrintedFrom")
