"""
Tests for immutable() and the read-only wrappers (ImmutableMapping,
ImmutableSequence, ImmutableRecord) and for immutable dicts.
"""

import collections as _collections
import dataclasses as _dataclasses
import types as _types

import pytest as _pytest

import dictkit
import dictkit.core as core
import dictkit.errors as errors


class TestImmutableDict:
    """Tests for dicts carrying the immutable flag."""

    def test_reads_pass_through(self) -> None:
        """Reads work as on a mutable dict."""
        d = dictkit.immutable_dict(a=1)

        assert d.lookup("a") == (1, True)
        assert d["a"] == 1
        assert d.a == 1
        assert d.keys() == ["a"]
        assert d.has("a")

    def test_set_raises(self) -> None:
        """set() raises with key and container type."""
        d = dictkit.immutable_dict(a=1)

        with _pytest.raises(errors.ImmutableMutationError) as exc_info:
            d.set("a", 2)

        assert exc_info.value.key == "a"
        assert exc_info.value.container_type == "Dict"
        assert d["a"] == 1

    def test_item_write_raises(self) -> None:
        """d[key] = value raises."""
        d = dictkit.immutable_dict(a=1)

        with _pytest.raises(errors.ImmutableMutationError):
            d["b"] = 2

        assert "b" not in d

    def test_attribute_write_raises(self) -> None:
        """d.key = value raises."""
        d = dictkit.immutable_dict(a=1)

        with _pytest.raises(errors.ImmutableMutationError):
            d.a = 2

    def test_multi_key_write_raises(self) -> None:
        """d[k1, k2] = ... raises."""
        d = dictkit.immutable_dict(a=1)

        with _pytest.raises(errors.ImmutableMutationError):
            d["a", "b"] = (1, 2)

    def test_is_type_error(self) -> None:
        """ImmutableMutationError is a TypeError."""
        d = dictkit.immutable_dict(a=1)

        with _pytest.raises(TypeError):
            d["a"] = 2

    def test_immutable_default_cannot_be_reconfigured(self) -> None:
        """The default attribute is a write entry point too."""
        d = dictkit.immutable(dictkit.default_dict(default=0))

        with _pytest.raises(errors.ImmutableMutationError):
            d.default = 1

        assert d["zzz"] == 0

    def test_variant_preserved(self) -> None:
        """Wrapping a StrictDict keeps strict misses."""
        d = dictkit.immutable(dictkit.strict_dict(a=1))

        assert isinstance(d, core.StrictDict)
        with _pytest.raises(errors.KeyNotFoundError):
            _ = d["b"]

    def test_view_shares_storage(self) -> None:
        """immutable(d) is a view: later writes to d are visible."""
        d = dictkit.dictionary(a=1)
        view = dictkit.immutable(d)

        d["b"] = 2

        assert view["b"] == 2
        assert view.immutable
        assert not d.immutable

    def test_wrapping_twice_is_noop(self) -> None:
        """An already immutable dict is returned as-is."""
        d = dictkit.immutable_dict(a=1)

        assert dictkit.immutable(d) is d

    def test_copy_stays_immutable(self) -> None:
        """copy() keeps the flag."""
        clone = dictkit.immutable_dict(a=1).copy()

        with _pytest.raises(errors.ImmutableMutationError):
            clone["a"] = 2

    def test_shallow(self) -> None:
        """Nested containers are not frozen."""
        d = dictkit.immutable_dict(items=[1, 2])

        d["items"].append(3)

        assert d["items"] == [1, 2, 3]


class TestImmutableMapping:
    """Tests for ImmutableMapping."""

    def test_reads(self) -> None:
        """Item access, len, iteration and membership work."""
        view = dictkit.immutable({"a": 1, "b": 2})

        assert isinstance(view, core.ImmutableMapping)
        assert view["a"] == 1
        assert len(view) == 2
        assert list(view) == ["a", "b"]
        assert "a" in view
        assert view == {"a": 1, "b": 2}

    def test_missing_key_raises_keyerror(self) -> None:
        """Foreign mappings keep their own miss behavior."""
        view = dictkit.immutable({"a": 1})

        with _pytest.raises(KeyError):
            _ = view["missing"]

    def test_item_write_and_delete_raise(self) -> None:
        """Writes and deletes raise with the wrapped type name."""
        data = {"a": 1}
        view = dictkit.immutable(data)

        with _pytest.raises(errors.ImmutableMutationError) as exc_info:
            view["a"] = 2
        with _pytest.raises(errors.ImmutableMutationError):
            del view["a"]

        assert exc_info.value.container_type == "dict"
        assert data == {"a": 1}

    @_pytest.mark.parametrize("method", ["pop", "popitem", "clear", "update", "setdefault"])
    def test_mutating_methods_raise(self, method: str) -> None:
        """dict mutators are refused when called."""
        view = dictkit.immutable({"a": 1})

        with _pytest.raises(errors.ImmutableMutationError):
            getattr(view, method)("a")

    def test_subclass_mutators_refused(self) -> None:
        """Mutators specific to a mapping subclass are refused too."""
        ordered = _collections.OrderedDict(a=1, b=2)
        counter = _collections.Counter(a=3)

        with _pytest.raises(errors.ImmutableMutationError) as exc_info:
            dictkit.immutable(ordered).move_to_end("a")
        with _pytest.raises(errors.ImmutableMutationError):
            dictkit.immutable(counter).subtract(a=1)

        assert exc_info.value.container_type == "OrderedDict"
        assert list(ordered) == ["a", "b"]
        assert counter["a"] == 3

    def test_read_methods_available(self) -> None:
        """Known read methods of the wrapped mapping pass through."""
        view = dictkit.immutable(_collections.Counter("aab"))

        assert view.most_common(1) == [("a", 2)]
        assert view.get("b") == 1

    def test_nested_values_not_wrapped(self) -> None:
        """Wrapping is shallow."""
        view = dictkit.immutable({"inner": {"x": 1}})

        assert type(view["inner"]) is dict

    def test_unhashable(self) -> None:
        """Not hashable (values may be mutable)."""
        with _pytest.raises(TypeError, match="unhashable"):
            hash(dictkit.immutable({"a": 1}))


class TestImmutableSequence:
    """Tests for ImmutableSequence."""

    def test_reads(self) -> None:
        """Indexing, len, iteration, index/count work."""
        view = dictkit.immutable([1, 2, 3, 2])

        assert isinstance(view, core.ImmutableSequence)
        assert view[0] == 1
        assert view[-1] == 2
        assert len(view) == 4
        assert list(view) == [1, 2, 3, 2]
        assert view.count(2) == 2
        assert view.index(3) == 2

    def test_slice_is_immutable(self) -> None:
        """Slices come back wrapped."""
        view = dictkit.immutable([1, 2, 3])

        part = view[1:]

        assert isinstance(part, core.ImmutableSequence)
        assert part == [2, 3]

    def test_index_write_raises_with_index(self) -> None:
        """Positional write raises and reports the index."""
        view = dictkit.immutable([1, 2, 3])

        with _pytest.raises(errors.ImmutableMutationError) as exc_info:
            view[1] = 99

        assert exc_info.value.key == 1
        assert exc_info.value.container_type == "list"

    def test_delete_raises(self) -> None:
        """del view[i] raises."""
        view = dictkit.immutable([1, 2, 3])

        with _pytest.raises(errors.ImmutableMutationError):
            del view[0]

    @_pytest.mark.parametrize("method", ["append", "extend", "insert", "remove", "sort"])
    def test_mutating_methods_raise(self, method: str) -> None:
        """list mutators are refused when called."""
        data = [1, 2, 3]
        view = dictkit.immutable(data)

        with _pytest.raises(errors.ImmutableMutationError):
            getattr(view, method)()

        assert data == [1, 2, 3]

    def test_inplace_add_raises(self) -> None:
        """view += [...] raises."""
        view = dictkit.immutable([1])

        with _pytest.raises(errors.ImmutableMutationError):
            view += [2]

    def test_eq_with_string_is_false(self) -> None:
        """Strings are not compared as sequences."""
        assert dictkit.immutable(["a"]) != "a"

    def test_deque_mutators_refused(self) -> None:
        """deque-only mutators are refused; plain attributes still read."""
        data = _collections.deque([1, 2], maxlen=5)
        view = dictkit.immutable(data)

        for method in ["appendleft", "extendleft", "rotate", "popleft"]:
            with _pytest.raises(errors.ImmutableMutationError):
                getattr(view, method)(0)

        assert list(data) == [1, 2]
        assert view.maxlen == 5
        assert view.count(1) == 1


class TestImmutableSet:
    """Tests for ImmutableSet."""

    def test_reads(self) -> None:
        """Membership, len, iteration and comparison work."""
        view = dictkit.immutable({1, 2})

        assert isinstance(view, core.ImmutableSet)
        assert 1 in view
        assert len(view) == 2
        assert sorted(view) == [1, 2]
        assert view == {1, 2}
        assert view.issubset({1, 2, 3})

    @_pytest.mark.parametrize("method", ["add", "discard", "remove", "update", "clear"])
    def test_mutating_methods_raise(self, method: str) -> None:
        """set mutators are refused and the set is unchanged."""
        data = {1, 2}
        view = dictkit.immutable(data)

        with _pytest.raises(errors.ImmutableMutationError) as exc_info:
            getattr(view, method)(1)

        assert exc_info.value.container_type == "set"
        assert data == {1, 2}

    def test_operators_return_frozenset(self) -> None:
        """Set operators build new frozensets."""
        view = dictkit.immutable({1, 2})

        assert (view | {3}) == frozenset({1, 2, 3})
        assert type(view & {1}) is frozenset

    def test_unhashable(self) -> None:
        """Not hashable (the wrapped set may change)."""
        with _pytest.raises(TypeError, match="unhashable"):
            hash(dictkit.immutable({1}))


@_dataclasses.dataclass
class _Point:
    x: int
    y: int

    def move(self, dx: int) -> None:
        self.x += dx


class TestImmutableRecord:
    """Tests for ImmutableRecord."""

    def test_attribute_reads(self) -> None:
        """Attribute reads pass through."""
        view = dictkit.immutable(_Point(1, 2))

        assert isinstance(view, core.ImmutableRecord)
        assert view.x == 1
        assert view.y == 2

    def test_named_field_write_raises(self) -> None:
        """Attribute writes raise with field name and type label."""
        point = _Point(1, 2)
        view = dictkit.immutable(point)

        with _pytest.raises(errors.ImmutableMutationError) as exc_info:
            view.x = 5

        assert exc_info.value.key == "x"
        assert exc_info.value.container_type == "_Point"
        assert point.x == 1

    def test_attribute_delete_raises(self) -> None:
        """Attribute deletes raise."""
        view = dictkit.immutable(_types.SimpleNamespace(a=1))

        with _pytest.raises(errors.ImmutableMutationError):
            del view.a

    def test_set_raises(self) -> None:
        """set() raises."""
        view = dictkit.immutable(_types.SimpleNamespace(a=1))

        with _pytest.raises(errors.ImmutableMutationError):
            view.set("a", 2)

    def test_missing_attribute(self) -> None:
        """Missing attributes raise AttributeError as usual."""
        view = dictkit.immutable(_types.SimpleNamespace(a=1))

        with _pytest.raises(AttributeError):
            _ = view.b

    def test_bound_methods_refused(self) -> None:
        """Methods bound to the wrapped object are refused."""
        point = _Point(1, 2)
        view = dictkit.immutable(point)

        with _pytest.raises(errors.ImmutableMutationError) as exc_info:
            view.move(5)

        assert exc_info.value.key == "move"
        assert point.x == 1


class TestImmutablePassthrough:
    """Values that are already immutable come back unchanged."""

    @_pytest.mark.parametrize("value", ["text", b"bytes", (1, 2), 3, 2.5, None, frozenset({1})])
    def test_returned_as_is(self, value: object) -> None:
        """Scalars, tuples and frozensets are not wrapped."""
        assert dictkit.immutable(value) is value

    def test_wrappers_not_rewrapped(self) -> None:
        """Wrapping a wrapper returns it."""
        view = dictkit.immutable([1])

        assert dictkit.immutable(view) is view
