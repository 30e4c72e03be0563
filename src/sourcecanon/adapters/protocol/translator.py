"""Translate recording-protocol payloads to and from domain records."""

from __future__ import annotations

import json
from logging import getLogger
from typing import TYPE_CHECKING, Any, cast

from pydantic import ValidationError

from sourcecanon.domain.model import RawSource

from .schema import NewSourcePayload, SourceDetailsPayload

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping
    from pathlib import Path

    from sourcecanon.domain.model import SourceDetails


log = getLogger(__name__)


class AnnouncementFormatError(ValueError):
    """Raised when a stored announcement cannot be parsed."""

    def __init__(self, message: str, *, line_number: int | None = None) -> None:
        location = f"line {line_number}: " if line_number is not None else ""
        super().__init__(f"{location}{message}")
        self.line_number = line_number


def translate_new_source(payload: NewSourcePayload | Mapping[str, Any]) -> RawSource:
    """Build the raw domain record for one ``newSource`` payload."""

    parsed = (
        payload
        if isinstance(payload, NewSourcePayload)
        else NewSourcePayload.model_validate(payload)
    )
    return RawSource(
        id=parsed.source_id,
        kind=parsed.kind,
        url=parsed.url,
        content_hash=parsed.content_hash,
        downstream_ids=tuple(parsed.generated_source_ids),
    )


def raw_source_payload(record: RawSource) -> dict[str, Any]:
    """Wire form of ``record``; inverse of ``translate_new_source``."""

    payload = NewSourcePayload(
        source_id=record.id,
        kind=record.kind,
        url=record.url,
        generated_source_ids=list(record.downstream_ids),
        content_hash=record.content_hash,
    )
    return payload.model_dump(mode="json", by_alias=True, exclude_none=True)


def source_details_payload(details: SourceDetails) -> SourceDetailsPayload:
    return SourceDetailsPayload(
        id=details.id,
        kind=details.kind,
        canonical_id=details.canonical_id,
        url=details.url,
        content_hash=details.content_hash,
        generated=list(details.generated),
        generated_from=list(details.generated_from),
        pretty_printed=details.pretty_printed,
        pretty_printed_from=details.pretty_printed_from,
    )


def dump_source_details(details: Iterable[SourceDetails]) -> dict[str, dict[str, Any]]:
    """Resolved descriptions keyed by id, in the camelCase shape the UI expects."""

    return {
        item.id: source_details_payload(item).model_dump(mode="json", by_alias=True)
        for item in details
    }


def iter_announcements(lines: Iterable[str | bytes]) -> Iterator[RawSource]:
    """Parse JSON Lines announcements, skipping blank lines.

    Byte lines are decoded as UTF-8 one at a time, so an undecodable line is
    reported with its line number.
    """

    for line_number, line in enumerate(lines, start=1):
        text = _decode_line(line, line_number=line_number).strip()
        if not text:
            continue
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise AnnouncementFormatError(
                f"invalid JSON ({exc.msg})", line_number=line_number
            ) from exc
        if not isinstance(data, dict):
            raise AnnouncementFormatError("expected a JSON object", line_number=line_number)
        try:
            record = translate_new_source(cast("dict[str, Any]", data))
        except ValidationError as exc:
            raise AnnouncementFormatError(
                f"invalid source announcement ({exc.error_count()} errors)",
                line_number=line_number,
            ) from exc
        yield record


def read_announcements(path: Path) -> tuple[RawSource, ...]:
    with path.open("rb") as handle:
        records = tuple(iter_announcements(handle))
    log.debug("Read %d announcements from %s", len(records), path)
    return records


def _decode_line(line: str | bytes, *, line_number: int) -> str:
    if isinstance(line, str):
        return line
    try:
        return line.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise AnnouncementFormatError(
            f"invalid UTF-8 at byte {exc.start}", line_number=line_number
        ) from exc
