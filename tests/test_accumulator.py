"""Tests for binit.accumulator: value collection and import filtering."""

import io

from binit.accumulator import Accumulator, merge_imports, merge_literal, merge_values
from binit.environ import parse_environ
from binit.exceptions import PatternError
from binit.logger import DefaultLogger


class TestAccumulator:
    def test_append_preserves_order(self):
        acc = Accumulator()
        acc.append("K", "a")
        acc.append("K", "b")

        assert acc.get("K") == ["a", "b"]

    def test_keys_are_case_sensitive(self):
        acc = Accumulator()
        acc.append("k", "1")
        acc.append("K", "2")

        assert acc.to_dict() == {"k": ["1"], "K": ["2"]}

    def test_every_key_has_a_value(self):
        acc = Accumulator()
        acc.append("A", "")

        assert "A" in acc
        assert acc.get("A") == [""]
        assert all(values for _, values in acc.items())

    def test_missing_key(self):
        acc = Accumulator()

        assert "A" not in acc
        assert acc.get("A") == []
        assert len(acc) == 0

    def test_returned_lists_are_copies(self):
        acc = Accumulator()
        acc.append("A", "1")
        acc.get("A").append("2")
        acc.to_dict()["A"].append("3")

        assert acc.get("A") == ["1"]


class TestMergeValues:
    def test_appends_all(self):
        acc = Accumulator()
        merge_values(acc, {"A": "1"})
        merge_values(acc, {"A": "2", "B": "3"})

        assert acc.to_dict() == {"A": ["1", "2"], "B": ["3"]}


class TestMergeLiteral:
    def test_present(self):
        acc = Accumulator()
        merge_literal(acc, parse_environ(["FOO=1"]), "FOO")
        assert acc.to_dict() == {"FOO": ["1"]}

    def test_absent(self):
        acc = Accumulator()
        merge_literal(acc, parse_environ(["FOO=1"]), "BAR")
        assert len(acc) == 0


class TestMergeImports:
    def test_literal_import_only(self):
        acc = Accumulator()
        merge_imports(acc, parse_environ(["FOO=1", "BAR=2"]), ["FOO"])

        assert acc.to_dict() == {"FOO": ["1"]}

    def test_wildcard_import(self):
        acc = Accumulator()
        merge_imports(acc, parse_environ(["FOO=1", "FOOBAR=2", "BAR=3"]), ["FOO*"])

        assert acc.to_dict() == {"FOO": ["1"], "FOOBAR": ["2"]}

    def test_wildcard_does_not_touch_populated_keys(self):
        acc = Accumulator()
        acc.append("FOO", "assigned")
        merge_imports(acc, parse_environ(["FOO=env", "FOOD=env"]), ["FOO*"])

        assert acc.get("FOO") == ["assigned"]
        assert acc.get("FOOD") == ["env"]

    def test_earlier_specs_win_over_later_wildcards(self):
        acc = Accumulator()
        merge_imports(acc, parse_environ(["FOO=1", "FOX=2"]), ["FOO", "F*"])

        assert acc.to_dict() == {"FOO": ["1"], "FOX": ["2"]}

    def test_overlapping_wildcards_add_once(self):
        acc = Accumulator()
        merge_imports(acc, parse_environ(["FOO=1"]), ["F*", "*O", "???"])

        assert acc.get("FOO") == ["1"]

    def test_literal_import_appends_after_assignment(self):
        acc = Accumulator()
        acc.append("FOO", "assigned")
        merge_imports(acc, parse_environ(["FOO=env"]), ["FOO"])

        assert acc.get("FOO") == ["assigned", "env"]

    def test_missing_literal_is_ignored(self):
        acc = Accumulator()
        merge_imports(acc, parse_environ(["FOO=1"]), ["NOPE"])
        assert len(acc) == 0

    def test_escaped_wildcard(self):
        acc = Accumulator()
        merge_imports(acc, parse_environ(["A*B=1", "AXB=2"]), ["A\\*B"])

        assert acc.to_dict() == {"A*B": ["1"]}

    def test_uncompilable_wildcard_falls_back_to_literal(self, monkeypatch):
        def reject(pattern):
            raise PatternError(pattern, "rejected")

        monkeypatch.setattr("binit.accumulator.compile_wildcard", reject)
        output = io.StringIO()
        acc = Accumulator()
        merge_imports(
            acc,
            parse_environ(["ODD*=literal", "ODDITY=1"]),
            ["ODD*"],
            logger=DefaultLogger(output=output),
        )

        assert acc.to_dict() == {"ODD*": ["literal"]}
        assert "ODD*" in output.getvalue()
        assert "WARNING" in output.getvalue()
