"""Tests for MessageMerger: filtering, flattening and ordering.

Python 3.13+.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from langjs.constants import MAX_NESTING_DEPTH
from langjs.diagnostics import DiagnosticCode, ResourceParseError
from langjs.merging import MessageMerger, flatten, merge_messages, normalize_group_filter
from langjs.sources import LocalFileSystem, scan_source_tree


def _merge(root: Path, group_filter=None, *, sort: bool = True) -> dict[str, str]:
    return merge_messages(scan_source_tree(root), root, group_filter, sort=sort)


class TestFlatten:
    """Recursive flattening of decoded resources."""

    def test_nested_mappings_join_with_dots(self) -> None:
        """Each nesting level adds a dotted segment."""
        data = {"auth": {"login": {"title": "Log in"}}, "ok": "OK"}

        assert list(flatten(data, "en.messages")) == [
            ("en.messages.auth.login.title", "Log in"),
            ("en.messages.ok", "OK"),
        ]

    def test_lists_use_indices(self) -> None:
        """List items are keyed by position."""
        assert list(flatten({"days": ["Mon", "Tue"]}, "en.dates")) == [
            ("en.dates.days.0", "Mon"),
            ("en.dates.days.1", "Tue"),
        ]

    def test_scalars_use_json_text(self) -> None:
        """Numbers and booleans are emitted as their JavaScript literal text."""
        data = {"count": 5, "ratio": 1.5, "enabled": True, "disabled": False}

        assert dict(flatten(data, "en.settings")) == {
            "en.settings.count": "5",
            "en.settings.ratio": "1.5",
            "en.settings.enabled": "true",
            "en.settings.disabled": "false",
        }

    def test_none_is_dropped(self) -> None:
        """Null leaves produce no key."""
        assert list(flatten({"a": None, "b": "x"}, "en.g")) == [("en.g.b", "x")]

    def test_empty_containers_produce_nothing(self) -> None:
        """Empty mappings and lists have no leaves."""
        assert list(flatten({"a": {}, "b": []}, "en.g")) == []

    def test_non_string_keys_are_stringified(self) -> None:
        """YAML integer keys become text segments."""
        assert list(flatten({1: "one"}, "en.numbers")) == [("en.numbers.1", "one")]

    def test_unsupported_leaf_type(self) -> None:
        """Other leaf types are rejected with the offending key."""
        with pytest.raises(ResourceParseError) as exc_info:
            list(flatten({"when": object()}, "en.g", path="en/g.yaml"))

        diagnostic = exc_info.value.diagnostic
        assert diagnostic is not None
        assert diagnostic.code is DiagnosticCode.INVALID_VALUE_TYPE
        assert "en.g.when" in diagnostic.message

    def test_depth_limit(self) -> None:
        """Nesting beyond the limit raises instead of recursing."""
        data: dict[str, object] = {"leaf": "x"}
        for _ in range(MAX_NESTING_DEPTH + 1):
            data = {"k": data}

        with pytest.raises(ResourceParseError) as exc_info:
            list(flatten(data, "en.deep", path="en/deep.json"))

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.NESTING_DEPTH_EXCEEDED

    def test_depth_at_limit_is_accepted(self) -> None:
        """Exactly max_depth levels still flatten."""
        data: object = "x"
        for _ in range(MAX_NESTING_DEPTH):
            data = {"k": data}

        ((key, value),) = list(flatten(data, "en.deep"))  # type: ignore[arg-type]

        assert value == "x"
        assert key.count(".k") == MAX_NESTING_DEPTH

    @given(
        st.recursive(
            st.text(max_size=5),
            lambda children: st.dictionaries(
                st.from_regex(r"[a-z]{1,4}", fullmatch=True), children, max_size=4
            ),
            max_leaves=20,
        )
    )
    def test_every_leaf_emitted_once(self, data: object) -> None:
        """Leaf count equals emitted pair count and all keys share the prefix."""

        def count_leaves(node: object) -> int:
            if isinstance(node, dict):
                return sum(count_leaves(v) for v in node.values())
            return 1

        if not isinstance(data, dict):
            data = {"value": data}
        pairs = list(flatten(data, "en.g"))

        assert len(pairs) == count_leaves(data)
        assert len({k for k, _ in pairs}) == len(pairs)
        assert all(k.startswith("en.g.") for k, _ in pairs)
        event(f"leaves={min(len(pairs), 5)}")


class TestNormalizeGroupFilter:
    """Filter entry normalization."""

    def test_none_and_empty_include_everything(self) -> None:
        """None and [] both mean no filter."""
        assert normalize_group_filter(None) is None
        assert normalize_group_filter([]) is None
        assert normalize_group_filter(["  "]) is None

    def test_entries_are_normalized(self) -> None:
        """Whitespace, backslashes, extensions and duplicates are cleaned up."""
        assert normalize_group_filter(
            [" messages ", "forum\\thread", "acme::messages.json", "messages"]
        ) == ("messages", "forum/thread", "acme::messages")


class TestMessageMerger:
    """Merging discovered resources."""

    def test_scenario_plain_group(self, lang_tree) -> None:
        """en/messages.json {"welcome": "Hi"} yields en.messages.welcome."""
        root = lang_tree({"en/messages.json": {"welcome": "Hi"}})

        assert _merge(root) == {"en.messages.welcome": "Hi"}

    def test_scenario_vendor_namespace(self, lang_tree) -> None:
        """Vendor resources use namespace::group, never vendor.<ns>."""
        root = lang_tree({"en/vendor/acme/messages.json": {"hello": "Hello"}})

        messages = _merge(root)

        assert messages == {"en.acme::messages.hello": "Hello"}
        assert not any(key.startswith("en.vendor.") for key in messages)

    def test_scenario_nested_directory(self, lang_tree) -> None:
        """en/forum/thread.json yields en.forum.thread.*."""
        root = lang_tree({"en/forum/thread.json": {"title": "T"}})

        assert _merge(root) == {"en.forum.thread.title": "T"}

    def test_filter_excludes_other_groups(self, fixture_tree: Path) -> None:
        """Only filtered groups are merged."""
        messages = _merge(fixture_tree, ["messages"])

        assert messages
        assert all(".messages." in key for key in messages)
        assert not any(".validation." in key for key in messages)
        assert not any("::" in key for key in messages)

    def test_filter_nested_and_namespaced(self, fixture_tree: Path) -> None:
        """Filter entries may use dir/group and namespace::group forms."""
        messages = _merge(fixture_tree, ["forum/thread", "acme::messages"])

        assert messages == {
            "en.acme::messages.hello": "Hello from Acme",
            "en.forum.thread.title": "Thread",
        }

    def test_filter_applies_to_all_locales(self, fixture_tree: Path) -> None:
        """A group filter is locale independent."""
        messages = _merge(fixture_tree, ["validation"])

        assert set(messages) == {"en.validation.required", "es.validation.required"}

    def test_filter_skips_unparseable_excluded_files(self, lang_tree) -> None:
        """Excluded resources are never read."""
        root = lang_tree(
            {"en/messages.json": {"a": "b"}, "en/broken.json": "{not json"}
        )

        assert _merge(root, ["messages"]) == {"en.messages.a": "b"}

    def test_parse_error_is_fatal(self, lang_tree) -> None:
        """A single undecodable file aborts the merge."""
        root = lang_tree(
            {"en/messages.json": {"a": "b"}, "en/broken.json": "{not json"}
        )

        with pytest.raises(ResourceParseError) as exc_info:
            _merge(root)

        assert exc_info.value.path == "en/broken.json"

    def test_invalid_utf8_is_parse_error(self, lang_tree) -> None:
        """Undecodable bytes surface as ResourceParseError."""
        root = lang_tree({})
        (root / "en").mkdir()
        (root / "en" / "latin1.json").write_bytes(b'{"a": "caf\xe9"}')

        with pytest.raises(ResourceParseError):
            _merge(root)

    @pytest.mark.parametrize("name", ["messages.json", "messages.yaml", "messages.po"])
    def test_utf8_bom_accepted(self, lang_tree, name: str) -> None:
        """Files saved with a UTF-8 byte order mark decode normally."""
        content = {
            "messages.json": '{"welcome": "Hi"}',
            "messages.yaml": "welcome: Hi\n",
            "messages.po": 'msgid "welcome"\nmsgstr "Hi"\n',
        }[name]
        root = lang_tree({})
        (root / "en").mkdir()
        (root / "en" / name).write_bytes(b"\xef\xbb\xbf" + content.encode())

        assert _merge(root) == {"en.messages.welcome": "Hi"}

    def test_yaml_keys_and_dates_kept(self, lang_tree) -> None:
        """YAML yes/no keys and date values merge as written."""
        root = lang_tree({"en/messages.yaml": "yes: 'Yes'\nreleased: 2024-01-01\n"})

        assert _merge(root) == {
            "en.messages.released": "2024-01-01",
            "en.messages.yes": "Yes",
        }

    def test_sorted_by_default(self, lang_tree) -> None:
        """Keys are sorted regardless of source order."""
        root = lang_tree({"en/messages.json": '{"b": "2", "a": "1", "c": "3"}'})

        assert list(_merge(root)) == [
            "en.messages.a",
            "en.messages.b",
            "en.messages.c",
        ]

    def test_source_order_without_sort(self, lang_tree) -> None:
        """sort=False keeps scan and source order."""
        root = lang_tree({"en/messages.json": '{"b": "2", "a": "1", "c": "3"}'})

        assert list(_merge(root, sort=False)) == [
            "en.messages.b",
            "en.messages.a",
            "en.messages.c",
        ]

    def test_duplicate_keys_last_write_wins(
        self, lang_tree, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Two files flattening to one key keep the later file's value."""
        root = lang_tree(
            {
                "en/forum/thread.json": {"title": "from nested file"},
                "en/forum.json": {"thread": {"title": "from group file"}},
            }
        )
        order = [r.relative_path for r in scan_source_tree(root)]

        with caplog.at_level(logging.DEBUG, logger="langjs.merging.merger"):
            messages = _merge(root)

        # "forum" lists before "forum.json"
        assert order == ["en/forum/thread.json", "en/forum.json"]
        assert messages == {"en.forum.thread.title": "from group file"}
        assert any("overwritten" in r.getMessage() for r in caplog.records)

    def test_mixed_formats(self, lang_tree) -> None:
        """JSON, YAML and PO resources merge into one mapping."""
        root = lang_tree(
            {
                "en/a.json": {"k": "json"},
                "en/b.yml": "k: yaml\n",
                "en/c.po": 'msgid "k"\nmsgstr "po"\n',
            }
        )

        assert _merge(root) == {"en.a.k": "json", "en.b.k": "yaml", "en.c.k": "po"}

    def test_group_filter_property(self) -> None:
        """The merger exposes its normalized filter."""
        merger = MessageMerger(LocalFileSystem(), ".", ["forum\\thread"])

        assert merger.group_filter == ("forum/thread",)
