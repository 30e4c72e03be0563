from __future__ import annotations

import pytest

from sourcecanon.domain.model import (
    MalformedRecordError,
    PrettyPrintedSource,
    ProducingSource,
    RawSource,
    SourceKind,
    source_record_from_raw,
)


def test_raw_pretty_printed_record_names_its_base() -> None:
    raw = RawSource(
        id="pp1",
        kind=SourceKind.PRETTY_PRINTED,
        url="/src/index.js",
        content_hash="ignored",
        downstream_ids=("1",),
    )

    record = source_record_from_raw(raw)

    assert record == PrettyPrintedSource(id="pp1", base_id="1", url="/src/index.js")
    assert record.content_hash is None
    assert record.related_ids == ("1",)


def test_raw_producing_record_keeps_its_outputs() -> None:
    raw = RawSource(id="h1", kind=SourceKind.HTML, url="/", downstream_ids=("2", "3"))

    record = source_record_from_raw(raw)

    assert isinstance(record, ProducingSource)
    assert record.produced_ids == ("2", "3")
    assert record.kind is SourceKind.HTML


@pytest.mark.parametrize("downstream_ids", [(), ("1", "2")])
def test_pretty_printed_record_needs_exactly_one_base(downstream_ids: tuple[str, ...]) -> None:
    raw = RawSource(id="pp1", kind=SourceKind.PRETTY_PRINTED, downstream_ids=downstream_ids)

    with pytest.raises(MalformedRecordError) as exc:
        source_record_from_raw(raw)

    assert exc.value.source_id == "pp1"
    assert str(len(downstream_ids)) in exc.value.reason


def test_producing_source_cannot_be_pretty_printed() -> None:
    with pytest.raises(MalformedRecordError):
        ProducingSource(id="pp1", kind=SourceKind.PRETTY_PRINTED)


def test_source_kind_uses_wire_names() -> None:
    assert SourceKind("inlineScript") is SourceKind.INLINE_SCRIPT
    with pytest.raises(ValueError):
        SourceKind("bogus")
