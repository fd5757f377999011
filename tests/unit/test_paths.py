"""Tests for lookslike.lib.paths."""

import pytest

from lookslike.lib.errors import InvalidPathError
from lookslike.lib.paths import ComponentKind, Path, PathComponent


class TestPathBuilding:
    """Tests for extending and concatenating paths."""

    def test_root_is_empty(self):
        """The default Path is the root and renders empty."""
        root = Path()
        assert root.is_root()
        assert len(root) == 0
        assert str(root) == ""
        assert root.last() is None

    def test_extend_map_and_slice(self):
        """Extensions append one component each."""
        path = Path().extend_map("items").extend_slice(0).extend_map("name")
        assert [pc.kind for pc in path] == [
            ComponentKind.MAP_KEY,
            ComponentKind.SLICE_INDEX,
            ComponentKind.MAP_KEY,
        ]
        assert path.last() == PathComponent.map_key("name")

    def test_extend_does_not_mutate(self):
        """Extending leaves the original Path unchanged."""
        base = Path().extend_map("a")
        child = base.extend_map("b")
        assert str(base) == "a"
        assert str(child) == "a.b"

    def test_concat(self):
        """Concat places the other Path after this one."""
        left = Path().extend_map("a").extend_slice(2)
        right = Path().extend_map("b")
        assert str(left.concat(right)) == "a.[2].b"
        assert str(left) == "a.[2]"

    def test_negative_index_rejected(self):
        """Sequence indices must be non-negative."""
        with pytest.raises(ValueError):
            Path().extend_slice(-1)

    def test_paths_compare_by_value(self):
        """Equal components make equal, hashable paths."""
        a = Path().extend_map("x").extend_slice(1)
        b = Path().extend_map("x").extend_slice(1)
        assert a == b
        assert len({a, b}) == 1


class TestPathRendering:
    """Tests for string rendering and parsing."""

    def test_render(self):
        """Indices render as [n] joined with dots."""
        path = Path().extend_map("items").extend_slice(0).extend_map("name")
        assert path.render() == "items.[0].name"

    @pytest.mark.parametrize(
        "path",
        [
            Path(),
            Path().extend_map("a"),
            Path().extend_slice(3),
            Path().extend_map("a").extend_slice(0).extend_slice(1).extend_map("b"),
            Path().extend_map("a").concat(Path().extend_slice(10).extend_map("c")),
        ],
    )
    def test_round_trip(self, path):
        """Parsing a rendered Path yields the same Path."""
        assert Path.parse(path.render()) == path

    def test_parse_empty_string_is_root(self):
        """The empty string parses to the root."""
        assert Path.parse("") == Path()

    @pytest.mark.parametrize("text", ["a..b", ".a", "a.", "a.[x]", "a.[-1]", "[]"])
    def test_parse_rejects_malformed(self, text):
        """Empty segments and malformed indices raise InvalidPathError."""
        with pytest.raises(InvalidPathError) as exc_info:
            Path.parse(text)
        assert exc_info.value.path_string == text

    def test_invalid_path_is_value_error(self):
        """InvalidPathError can be caught as ValueError."""
        with pytest.raises(ValueError):
            Path.parse("a..b")

    def test_component_kind_describe(self):
        """Component kinds have readable labels."""
        assert ComponentKind.MAP_KEY.describe() == "map key"
        assert ComponentKind.SLICE_INDEX.describe() == "sequence index"
        assert ComponentKind.SLICE_INDEX.value == "slice"


class TestPathLookup:
    """Tests for Path.lookup."""

    def test_lookup_nested(self):
        """Lookup follows keys and indices."""
        tree = {"items": [{"name": "a"}, {"name": "b"}]}
        assert Path.parse("items.[1].name").lookup(tree) == ("b", True)

    def test_lookup_root(self):
        """The root Path resolves to the tree itself."""
        tree = {"a": 1}
        value, found = Path().lookup(tree)
        assert found is True
        assert value is tree

    def test_lookup_missing_key(self):
        """An absent key reports not found."""
        assert Path.parse("a.b").lookup({"a": {}}) == (None, False)

    def test_lookup_index_out_of_bounds(self):
        """An index past the end reports not found."""
        assert Path.parse("a.[2]").lookup({"a": [1, 2]}) == (None, False)

    def test_lookup_kind_mismatch(self):
        """Keys into sequences and indices into maps are not found."""
        assert Path.parse("a.b").lookup({"a": [1]}) == (None, False)
        assert Path.parse("a.[0]").lookup({"a": {"0": 1}}) == (None, False)

    def test_lookup_through_scalar(self):
        """Descending into a scalar reports not found rather than raising."""
        assert Path.parse("a.b").lookup({"a": "text"}) == (None, False)
        assert Path.parse("[0]").lookup("text") == (None, False)

    def test_lookup_present_none(self):
        """A key holding None is found."""
        assert Path.parse("a").lookup({"a": None}) == (None, True)

    def test_lookup_tuple(self):
        """Tuples are indexed like lists."""
        assert Path.parse("[1]").lookup(("x", "y")) == ("y", True)

    def test_lookup_non_string_keys(self):
        """Keys are matched by their string form when not present as strings."""
        tree = {200: "ok", True: "push", "n": {2: "y"}}
        assert Path.parse("200").lookup(tree) == ("ok", True)
        assert Path.parse("True").lookup(tree) == ("push", True)
        assert Path.parse("n.2").lookup(tree) == ("y", True)
        assert Path.parse("404").lookup(tree) == (None, False)

    def test_lookup_prefers_exact_string_key(self):
        """A string key beats a non-string key rendering the same."""
        assert Path.parse("1").lookup({1: "int", "1": "str"}) == ("str", True)


class TestPathRenderLimits:
    """Tests for keys that do not survive render and parse."""

    def test_dotted_key_splits_on_parse(self):
        """A key containing '.' parses back as two components."""
        path = Path().extend_map("a.b")
        assert str(path) == "a.b"
        assert Path.parse(str(path)) != path
        assert len(Path.parse(str(path))) == 2

    def test_index_shaped_key_parses_as_index(self):
        """A key shaped like '[0]' parses back as a sequence index."""
        path = Path().extend_map("[0]")
        assert Path.parse(str(path)).last().kind is ComponentKind.SLICE_INDEX
