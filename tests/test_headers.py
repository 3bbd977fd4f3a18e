"""Tests for missive.http.headers — immutable, case-insensitive HeaderMap."""

from collections.abc import Mapping

import pytest

from missive.errors import EmptyHeaderValue, InvalidHeaderName, InvalidHeaderValue
from missive.http.headers import HeaderMap


class TestConstruction:
    def test_empty(self) -> None:
        h = HeaderMap()
        assert len(h) == 0
        assert list(h) == []

    def test_from_mapping(self) -> None:
        h = HeaderMap({"Accept": ["text/html", "application/json"], "Host": "example.com"})
        assert h["Accept"] == ("text/html", "application/json")
        assert h["Host"] == ("example.com",)

    def test_from_pairs(self) -> None:
        h = HeaderMap([("A", "1"), ("B", "2")])
        assert list(h) == ["A", "B"]

    def test_values_normalized(self) -> None:
        h = HeaderMap({"X": "  padded  ", "N": 5})
        assert h["X"] == ("padded",)
        assert h["N"] == ("5",)

    def test_same_identity_last_write_wins(self) -> None:
        h = HeaderMap([("X-Foo", "a"), ("x-foo", "b")])
        assert list(h) == ["x-foo"]
        assert h["X-FOO"] == ("b",)

    def test_invalid_name_aborts(self) -> None:
        with pytest.raises(InvalidHeaderName):
            HeaderMap({"Good": "ok", "Bad Name": "v"})

    def test_invalid_value_aborts(self) -> None:
        with pytest.raises(InvalidHeaderValue):
            HeaderMap({"Good": "ok", "Bad": "v\x00"})

    def test_empty_value_aborts(self) -> None:
        with pytest.raises(EmptyHeaderValue):
            HeaderMap({"X": []})

    def test_is_mapping(self) -> None:
        assert isinstance(HeaderMap(), Mapping)


class TestLookup:
    @pytest.mark.parametrize("key", [None, 42, b"Accept"])
    def test_non_string_key_rejected(self, key: object) -> None:
        h = HeaderMap({"Accept": "*/*"})
        with pytest.raises(InvalidHeaderName):
            h.get_list(key)  # type: ignore[arg-type]
        with pytest.raises(InvalidHeaderName):
            h.remove(key)  # type: ignore[arg-type]

    def test_case_insensitive_getitem(self) -> None:
        h = HeaderMap({"Content-Type": "text/html"})
        assert h["content-type"] == ("text/html",)
        assert h["CONTENT-TYPE"] == ("text/html",)

    def test_missing_key_raises(self) -> None:
        with pytest.raises(KeyError):
            HeaderMap()["X-Missing"]

    def test_contains(self) -> None:
        h = HeaderMap({"Accept": "*/*"})
        assert "accept" in h
        assert "ACCEPT" in h
        assert "x-missing" not in h

    def test_contains_rejects_non_str(self) -> None:
        assert 42 not in HeaderMap({"Accept": "*/*"})

    def test_iter_yields_original_case(self) -> None:
        h = HeaderMap({"Content-Type": "a", "X-Request-ID": "b"})
        assert list(h) == ["Content-Type", "X-Request-ID"]

    def test_original_name(self) -> None:
        h = HeaderMap({"ETag": "x"})
        assert h.original_name("etag") == "ETag"
        assert h.original_name("missing") is None

    def test_get_list(self) -> None:
        h = HeaderMap({"Accept": ["a", "b"]})
        assert h.get_list("accept") == ["a", "b"]
        assert h.get_list("missing") == []

    def test_to_dict_is_a_copy(self) -> None:
        h = HeaderMap({"Accept": ["a"]})
        out = h.to_dict()
        out["Accept"].append("b")
        out["New"] = ["x"]
        assert h.to_dict() == {"Accept": ["a"]}

    def test_repr(self) -> None:
        assert "Accept" in repr(HeaderMap({"Accept": "*/*"}))


class TestDerivation:
    def test_set_replaces_across_casing(self) -> None:
        h = HeaderMap({"X-Foo": "a"}).set("x-foo", "b")
        assert h.to_dict() == {"x-foo": ["b"]}

    def test_set_validates(self) -> None:
        with pytest.raises(InvalidHeaderName):
            HeaderMap().set("Bad Name", "v")
        with pytest.raises(EmptyHeaderValue):
            HeaderMap().set("X", [])

    def test_add_appends(self) -> None:
        h = HeaderMap({"Accept": "a"}).add("ACCEPT", ["b", "c"])
        assert h.to_dict() == {"ACCEPT": ["a", "b", "c"]}

    def test_add_new_header(self) -> None:
        h = HeaderMap().add("X-New", "v")
        assert h.to_dict() == {"X-New": ["v"]}

    def test_remove(self) -> None:
        h = HeaderMap({"A": "1", "B": "2"}).remove("a")
        assert h.to_dict() == {"B": ["2"]}
        assert "A" not in h

    def test_remove_absent_returns_self(self) -> None:
        h = HeaderMap({"A": "1"})
        assert h.remove("missing") is h

    def test_receiver_unchanged(self) -> None:
        original = HeaderMap({"A": "1"})
        original.set("A", "2")
        original.add("A", "3")
        original.set("B", "x")
        original.remove("A")
        assert original.to_dict() == {"A": ["1"]}

    def test_derived_dicts_independent(self) -> None:
        original = HeaderMap({"A": "1"})
        derived = original.set("B", "2")
        assert derived._values is not original._values
        assert derived._names is not original._names


class TestImmutability:
    def test_hash_matches_equality(self) -> None:
        a = HeaderMap({"A": "1", "B": ["2", "3"]})
        b = HeaderMap({"B": ("2", "3"), "A": 1})
        assert a == b
        assert hash(a) == hash(b)

    def test_setattr_raises(self) -> None:
        h = HeaderMap()
        with pytest.raises(AttributeError):
            h._values = {}  # type: ignore[misc]

    def test_equality(self) -> None:
        assert HeaderMap({"A": "1"}) == HeaderMap({"A": ["1"]})
        assert HeaderMap({"A": "1"}) != HeaderMap({"a": "1"})
