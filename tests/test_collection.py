import numpy as np
import pytest

from collection.base import IAggregate, IIterator
from collection.custom import CustomCollection, ForwardIterator


def make_collection(items, **kwargs):
    collection = CustomCollection(**kwargs)
    for item in items:
        collection.append(item)
    return collection


def test_traversal_yields_every_element_in_append_order():
    items = ["a", "b", "c", "d", "e", "f", "g"]
    collection = make_collection(items)

    iterator = collection.create_iterator()
    seen = []
    while iterator.has_next():
        seen.append(iterator.next())

    assert seen == items
    assert iterator.has_next() is False


def test_empty_collection_has_nothing_to_iterate():
    collection = CustomCollection()
    iterator = collection.create_iterator()

    assert collection.size() == 0
    assert iterator.has_next() is False
    with pytest.raises(IndexError, match="No more elements"):
        iterator.next()


def test_next_past_the_end_raises_index_error():
    iterator = make_collection([1, 2]).create_iterator()
    iterator.next()
    iterator.next()

    with pytest.raises(IndexError, match="No more elements"):
        iterator.next()
    # still exhausted, position did not move past size
    assert iterator.has_next() is False


@pytest.mark.parametrize("index", [-1, -5, 3, 100])
def test_get_out_of_range_raises(index):
    collection = make_collection([10, 20, 30])

    with pytest.raises(IndexError, match="Index out of range"):
        collection.get(index)


def test_get_returns_element_at_position():
    collection = make_collection([10, 20, 30])

    assert [collection.get(i) for i in range(3)] == [10, 20, 30]


def test_typed_storage_returns_plain_python_values():
    collection = make_collection([1, 2, 3], dtype=np.int64)

    value = collection.get(0)
    assert value == 1
    assert type(value) is int
    assert collection.dtype == np.dtype(np.int64)


def test_growth_beyond_initial_capacity_keeps_order():
    items = list(range(37))
    collection = make_collection(items, dtype=np.int32, capacity=1)

    assert collection.size() == len(collection) == 37
    assert list(collection) == items


def test_independent_cursors_do_not_interfere():
    collection = make_collection([1, 2, 3])
    first = collection.create_iterator()
    second = collection.create_iterator()

    assert first.next() == 1
    assert first.next() == 2
    assert second.next() == 1
    assert first.next() == 3
    assert second.has_next() is True
    assert first.has_next() is False


def test_direct_construction_matches_factory():
    collection = make_collection([4, 5, 6])

    assert list(ForwardIterator(collection)) == list(collection.create_iterator())


def test_mutation_during_traversal_fails_fast():
    collection = make_collection([1, 2, 3])
    iterator = collection.create_iterator()
    iterator.next()
    collection.append(4)

    with pytest.raises(RuntimeError, match="changed during iteration"):
        iterator.next()


def test_cursor_supports_native_iteration_protocol():
    collection = make_collection(["x", "y"])
    iterator = collection.create_iterator()

    assert iter(iterator) is iterator
    assert list(iterator) == ["x", "y"]
    with pytest.raises(StopIteration):
        next(iterator)


def test_interfaces_are_abstract():
    with pytest.raises(TypeError):
        IAggregate()
    with pytest.raises(TypeError):
        IIterator()
    assert isinstance(CustomCollection(), IAggregate)


def test_lifecycle_traces_are_printed_once(capsys):
    with CustomCollection() as collection:
        collection.append(1)
    collection.close()

    out = capsys.readouterr().out.splitlines()
    assert out == ["CustomCollection created", "CustomCollection destroyed"]


@pytest.mark.parametrize("dtype, value", [(np.int64, 3.7), (np.int8, 300), (np.float32, 0.1)])
def test_append_rejects_values_the_dtype_cannot_hold(dtype, value):
    collection = CustomCollection(dtype=dtype)

    with pytest.raises(TypeError, match="without loss"):
        collection.append(value)
    assert collection.size() == 0


def test_append_accepts_exactly_representable_values():
    collection = make_collection([3.0, True], dtype=np.int64)
    floats = make_collection([float("nan"), 0.5], dtype=np.float64)

    assert [collection.get(0), collection.get(1)] == [3, 1]
    assert np.isnan(floats.get(0))
    assert floats.get(1) == 0.5


def test_object_storage_returns_the_appended_object():
    scalar = np.float32(1.5)
    payload = {"k": 1}
    collection = make_collection([scalar, payload])

    assert type(collection.get(0)) is np.float32
    assert collection.get(0) == scalar
    assert collection.get(1) is payload


def test_modcount_tracks_appends():
    collection = make_collection([1, 2])

    assert collection.modcount == 2
    collection.append(3)
    assert collection.modcount == 3
