"""Tests for the JSON encode/decode helpers."""

import pytest

from objkit.codec import CodecError, DecodeError, EncodeError, from_json, get_json
from objkit.model import Rectangle


class _Point:
    def norm(self):
        return abs(self.x) + abs(self.y)


# ---------------------------------------------------------------------------
# get_json
# ---------------------------------------------------------------------------


class TestGetJson:
    def test_list(self):
        assert get_json([1, 2, 3]) == "[1,2,3]"

    def test_mapping_keeps_key_order(self):
        assert get_json({"width": 10, "height": 20}) == '{"width":10,"height":20}'

    def test_sort_keys(self):
        assert get_json({"width": 10, "height": 20}, sort_keys=True) == '{"height":20,"width":10}'

    def test_indent(self):
        assert get_json({"a": 1}, indent=2) == '{\n  "a": 1\n}'

    def test_dataclass(self):
        assert get_json(Rectangle(10, 20)) == '{"width":10,"height":20}'

    def test_primitives(self):
        assert get_json("x") == '"x"'
        assert get_json(None) == "null"
        assert get_json(True) == "true"

    def test_unencodable(self):
        with pytest.raises(EncodeError):
            get_json({"x": object()})

    def test_encode_error_is_codec_error(self):
        with pytest.raises(CodecError):
            get_json({1, 2})


# ---------------------------------------------------------------------------
# from_json
# ---------------------------------------------------------------------------


class TestFromJson:
    def test_rectangle(self):
        r = from_json(Rectangle, '{"width":10, "height":20}')
        assert isinstance(r, Rectangle)
        assert r.width == 10
        assert r.height == 20
        assert r.area == 200

    def test_plain_class_gets_behaviour(self):
        p = from_json(_Point, '{"x": -3, "y": 4}')
        assert isinstance(p, _Point)
        assert p.x == -3
        assert p.norm() == 7

    def test_plain_class_keeps_unknown_fields(self):
        p = from_json(_Point, '{"x": 1, "y": 2, "label": "a"}')
        assert p.label == "a"

    def test_invalid_json(self):
        with pytest.raises(DecodeError) as info:
            from_json(Rectangle, "{width: 10}")
        assert info.value.target is Rectangle

    def test_non_object(self):
        with pytest.raises(DecodeError, match="Expected a JSON object"):
            from_json(Rectangle, "[1, 2]")

    def test_missing_dataclass_field(self):
        with pytest.raises(DecodeError, match="Cannot build Rectangle"):
            from_json(Rectangle, '{"width": 10}')

    def test_round_trip(self):
        r = Rectangle(3, 4)
        assert from_json(Rectangle, get_json(r)) == r


class _Slotted:
    __slots__ = ("x", "y")

    def total(self):
        return self.x + self.y


# ---------------------------------------------------------------------------
# from_json with types lacking an instance __dict__
# ---------------------------------------------------------------------------


class TestFromJsonWithoutDict:
    def test_slotted_class(self):
        s = from_json(_Slotted, '{"x": 1, "y": 2}')
        assert isinstance(s, _Slotted)
        assert s.total() == 3

    def test_slotted_class_unknown_field(self):
        with pytest.raises(DecodeError) as info:
            from_json(_Slotted, '{"x": 1, "z": 2}')
        assert info.value.target is _Slotted

    def test_builtin_target(self):
        with pytest.raises(DecodeError, match="Cannot set fields on int"):
            from_json(int, '{"x": 1}')
