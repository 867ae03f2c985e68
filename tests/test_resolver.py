"""
Tests for shard selection, ordering and merging.

Verifies that:
1. Shards are selected by date prefix or permanent prefix
2. Merge order is permanent, primary, then other date shards
3. Malformed shards contribute nothing without failing the request
4. Directory failures and missing dates raise domain errors
"""

import json
from datetime import datetime, timezone

import pytest

from backend.exceptions import (
    DirectoryUnavailableError,
    MalformedShardError,
    NewsNotFoundError,
)
from backend.storage import (
    InMemoryStorageBackend,
    LocalStorageBackend,
    NewsResolver,
    order_shards,
    parse_shard,
    select_shards,
)

NOW = datetime(2026, 2, 9, 9, 0, tzinfo=timezone.utc)


def shard(*headlines) -> str:
    return json.dumps([{"headline": h, "teaser": "", "source_url": "", "source_name": ""} for h in headlines])


def make_resolver(shards, **kwargs) -> NewsResolver:
    storage = InMemoryStorageBackend(shards)
    return NewsResolver(storage, clock=lambda: NOW, **kwargs)


class TestShardSelection:
    """Test which files contribute to a date."""

    def test_selects_date_and_permanent_json(self):
        """Date-prefixed and permanent .json files are selected."""
        names = [
            "2026-02-09.json",
            "2026-02-09-07-09.json",
            "2026-02-08.json",
            "permanent-links.json",
            "2026-02-09.txt",
            "notes.json",
        ]
        selected = select_shards(names, "2026-02-09")
        assert sorted(selected) == ["2026-02-09-07-09.json", "2026-02-09.json", "permanent-links.json"]

    def test_order_permanent_primary_then_others(self):
        """Merge precedence follows the fixed rule."""
        names = ["2026-02-09-extra.json", "permanent-b.json", "2026-02-09.json", "permanent-a.json"]
        assert order_shards(names, "2026-02-09") == [
            "permanent-a.json",
            "permanent-b.json",
            "2026-02-09.json",
            "2026-02-09-extra.json",
        ]

    def test_order_without_primary(self):
        """Other date shards are sorted when no primary shard exists."""
        names = ["2026-02-09-b.json", "2026-02-09-a.json"]
        assert order_shards(names, "2026-02-09") == ["2026-02-09-a.json", "2026-02-09-b.json"]


class TestParseShard:
    """Test tolerant shard parsing."""

    def test_parses_list_of_records(self):
        """A JSON array becomes NewsItems in file order."""
        items = parse_shard("a.json", shard("one", "two"))
        assert [i.headline for i in items] == ["one", "two"]

    def test_strips_bom(self):
        """A leading UTF-8 BOM does not break parsing."""
        items = parse_shard("a.json", "\ufeff" + shard("one"))
        assert items[0].headline == "one"

    def test_invalid_json_raises(self):
        """Broken JSON is a malformed shard."""
        with pytest.raises(MalformedShardError):
            parse_shard("a.json", '[{"headline": "x",]')

    def test_deep_nesting_raises(self):
        """Decoder recursion failures are a malformed shard."""
        with pytest.raises(MalformedShardError):
            parse_shard("a.json", "[" * 100000 + "]" * 100000)

    def test_non_list_raises(self):
        """A top-level object is a malformed shard."""
        with pytest.raises(MalformedShardError):
            parse_shard("a.json", '{"headline": "x"}')

    def test_skips_non_object_entries(self):
        """Strings or numbers inside the array are dropped."""
        items = parse_shard("a.json", '[1, "x", {"headline": "ok"}]')
        assert [i.headline for i in items] == ["ok"]

    def test_null_fields_and_extras(self):
        """Null text fields become empty strings; unknown fields survive."""
        items = parse_shard("a.json", '[{"headline": null, "category": null, "video": "v.mp4"}]')
        assert items[0].headline == ""
        assert items[0].category is None
        assert items[0].to_dict()["video"] == "v.mp4"

    def test_to_dict_keeps_only_stored_keys(self):
        """Defaults for absent fields are not added to the output record."""
        items = parse_shard("a.json", '[{"headline": "x", "video": "v.mp4"}]')
        assert items[0].to_dict() == {"headline": "x", "video": "v.mp4"}


class TestNewsResolver:
    """Test end-to-end resolution over a storage backend."""

    def test_merge_order(self):
        """Items follow shard precedence, then file order."""
        resolver = make_resolver({
            "permanent-b.json": shard("pb"),
            "permanent-a.json": shard("pa1", "pa2"),
            "2026-02-09.json": shard("primary"),
            "2026-02-09-extra.json": shard("extra"),
            "2026-02-08.json": shard("old"),
        })

        items = resolver.resolve("2026-02-09")

        assert [i.headline for i in items] == ["pa1", "pa2", "pb", "primary", "extra"]

    def test_default_date_is_civil_today(self):
        """Without a date the clock's civil day is used."""
        resolver = make_resolver({"2026-02-09.json": shard("today")})
        assert [i.headline for i in resolver.resolve()] == ["today"]

    def test_yesterday(self):
        """'yesterday' selects the previous civil day."""
        resolver = make_resolver({"2026-02-08.json": shard("yesterday")})
        assert [i.headline for i in resolver.resolve("yesterday")] == ["yesterday"]

    def test_malformed_shard_is_empty(self):
        """A broken shard contributes nothing; the rest still merges."""
        resolver = make_resolver({
            "2026-02-09.json": "not json at all",
            "2026-02-09-extra.json": shard("extra"),
            "2026-02-09-object.json": '{"headline": "x"}',
        })

        items = resolver.resolve("2026-02-09")

        assert [i.headline for i in items] == ["extra"]

    def test_oversized_number_shard_is_empty(self):
        """A number past the int conversion limit only drops its own shard."""
        resolver = make_resolver({
            "2026-02-09.json": shard("ok"),
            "2026-02-09-bad.json": "[" + "9" * 5000 + "]",
        })
        assert [i.headline for i in resolver.resolve("2026-02-09")] == ["ok"]

    def test_deeply_nested_shard_is_empty(self):
        """Nesting past the decoder's depth limit only drops its own shard."""
        resolver = make_resolver({
            "2026-02-09.json": shard("ok"),
            "2026-02-09-bad.json": "[" * 100000 + "]" * 100000,
        })
        assert [i.headline for i in resolver.resolve("2026-02-09")] == ["ok"]

    def test_only_permanent_shards_still_found(self):
        """Permanent shards alone satisfy any date."""
        resolver = make_resolver({"permanent.json": shard("always")})
        assert [i.headline for i in resolver.resolve("2020-01-01")] == ["always"]

    def test_no_shard_raises_not_found(self):
        """No matching shard is a NotFound condition."""
        resolver = make_resolver({"2026-02-08.json": shard("old")})
        with pytest.raises(NewsNotFoundError) as exc_info:
            resolver.resolve("2026-02-09")
        assert exc_info.value.status_code == 404
        assert exc_info.value.date_key == "2026-02-09"

    def test_only_malformed_shard_is_empty_success(self):
        """A matching but broken shard yields an empty list, not NotFound."""
        resolver = make_resolver({"2026-02-09.json": "{{"})
        assert resolver.resolve("2026-02-09") == []

    def test_directory_failure_raises(self):
        """An unlistable directory is fatal for the request."""
        resolver = NewsResolver(InMemoryStorageBackend(unavailable=True), clock=lambda: NOW)
        with pytest.raises(DirectoryUnavailableError) as exc_info:
            resolver.resolve("2026-02-09")
        assert exc_info.value.status_code == 500

    def test_sequential_and_concurrent_reads_agree(self):
        """Fan-out reads join in the same order as sequential reads."""
        shards = {f"2026-02-09-{i:02d}.json": shard(f"h{i}") for i in range(12)}
        sequential = make_resolver(shards, max_workers=1).resolve("2026-02-09")
        concurrent = make_resolver(shards, max_workers=8).resolve("2026-02-09")
        assert [i.headline for i in sequential] == [i.headline for i in concurrent]
        assert [i.headline for i in concurrent] == [f"h{i}" for i in range(12)]


class TestLocalStorageBackend:
    """Test resolution against real files."""

    def test_reads_directory(self, tmp_path):
        """Shards on disk are listed, read and merged."""
        (tmp_path / "2026-02-09.json").write_text(shard("primary"), encoding="utf-8")
        (tmp_path / "permanent.json").write_text(shard("perm"), encoding="utf-8")
        (tmp_path / "2026-02-09-late.json").write_bytes(b"\xef\xbb\xbf" + shard("late").encode("utf-8"))
        (tmp_path / "sub").mkdir()

        resolver = NewsResolver(LocalStorageBackend(str(tmp_path)), clock=lambda: NOW)

        assert [i.headline for i in resolver.resolve()] == ["perm", "primary", "late"]

    def test_missing_directory_is_unavailable(self, tmp_path):
        """A missing data directory maps to DirectoryUnavailableError."""
        resolver = NewsResolver(LocalStorageBackend(str(tmp_path / "missing")), clock=lambda: NOW)
        with pytest.raises(DirectoryUnavailableError):
            resolver.resolve()

    def test_undecodable_shard_is_empty(self, tmp_path):
        """A shard that is not UTF-8 contributes nothing."""
        (tmp_path / "2026-02-09.json").write_bytes(b"\xff\xfe\x00garbage")
        (tmp_path / "2026-02-09-b.json").write_text(shard("b"), encoding="utf-8")

        resolver = NewsResolver(LocalStorageBackend(str(tmp_path)), clock=lambda: NOW)

        assert [i.headline for i in resolver.resolve()] == ["b"]
