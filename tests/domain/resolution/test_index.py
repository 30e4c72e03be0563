from __future__ import annotations

import pytest

from sourcecanon.domain.resolution import key_for_source, resolve_sources
from tests.helpers.sources import (
    bundled_app,
    html_document,
    inline_script,
    pretty_printed,
    script_source,
)


def test_key_for_source_combines_url_and_content_hash() -> None:
    assert key_for_source(script_source("1", url="/a.js", content_hash="abc")) == "/a.js:abc"


def test_alternate_ids_list_every_other_representation() -> None:
    index = resolve_sources(bundled_app())

    assert index.alternate_ids("1") == ("o1", "pp1")
    assert index.alternate_ids("o1") == ("ppo1", "1")
    assert index.alternate_ids("pp1") == ("o1", "1")
    assert index.alternate_ids("ppo1") == ("o1",)


def test_canonical_details_returns_preferred_representation() -> None:
    index = resolve_sources(bundled_app())

    assert index.canonical_details("pp1").id == "o1"
    assert index.canonical_details("o1") is index["o1"]


def test_corresponding_sources_share_url_and_content_hash() -> None:
    index = resolve_sources(
        [
            script_source("1", url="/index.js", content_hash="h"),
            script_source("2", url="/index.js", content_hash="h"),
            script_source("3", url="/index.js", content_hash="other"),
            pretty_printed("pp1", base="1", url="/index.js"),
        ]
    )

    assert index.corresponding_source_ids("1") == ("2",)
    assert index.corresponding_source_ids("2") == ("1",)
    assert index.corresponding_source_ids("3") == ()
    assert index.corresponding_source_ids("pp1") == ()


def test_corresponding_sources_do_not_merge_canonical_identity() -> None:
    index = resolve_sources(
        [
            html_document("h1", inline_scripts=("2",), content_hash="h"),
            inline_script("2", content_hash="h"),
            script_source("3", url="/index.html", content_hash="h"),
        ]
    )

    assert index.corresponding_source_ids("3") == ("h1", "2")
    assert index["3"].canonical_id == "3"


def test_index_lookup_of_unknown_id_raises_key_error() -> None:
    index = resolve_sources([])

    with pytest.raises(KeyError):
        index.alternate_ids("missing")
    assert index.get("missing") is None
