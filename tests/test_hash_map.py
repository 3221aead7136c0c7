import random

import pytest

from adtkit.hash_map import HashMap, hash_int, hash_pointer, hash_string

N = 1000


class Box:
    """An integer held in its own object, so equivalent keys can differ in identity."""

    def __init__(self, value):
        self.value = value

    def __repr__(self):
        return f"Box({self.value})"


def compare_boxes(a, b):
    return a.value - b.value


def hash_box(box):
    return hash_int(box.value)


def make_map(destroy_key=None, destroy_value=None):
    return HashMap(compare_boxes, destroy_key, destroy_value, hash_box)


def test_create():
    hmap = HashMap(compare_boxes, None, None, None)
    hmap.set_hash_function(hash_box)
    assert hmap.set_destroy_key(None) is None
    assert hmap.set_destroy_value(None) is None
    assert len(hmap) == 0
    assert hmap.capacity() == 53


def test_set_destroy_returns_previous():
    destroyed = []
    hmap = make_map(destroyed.append, None)
    assert hmap.set_destroy_key(None) == destroyed.append
    assert hmap.set_destroy_value(destroyed.append) is None


def test_insert_shuffled():
    keys = [Box(i) for i in range(N)]
    random.Random(1).shuffle(keys)
    hmap = make_map()
    values = []
    for i, key in enumerate(keys):
        value = Box(i)
        values.append(value)
        hmap.insert(key, value)
        assert hmap.find(key) is value
        assert len(hmap) == i + 1

    new_key = Box(keys[0].value)
    new_value = Box(99)
    hmap.insert(new_key, new_value)
    assert hmap.find(new_key) is new_value
    node = hmap.find_node(keys[0])
    assert node.key is new_key
    assert len(hmap) == N


def test_replace_destroys_old_key_and_value():
    destroyed_keys = []
    destroyed_values = []
    hmap = make_map(destroyed_keys.append, destroyed_values.append)
    old_key, old_value = Box(7), Box(1)
    hmap.insert(old_key, old_value)
    new_key, new_value = Box(7), Box(2)
    hmap.insert(new_key, new_value)
    assert destroyed_keys == [old_key]
    assert destroyed_values == [old_value]
    assert hmap.find(Box(7)) is new_value


def test_replace_same_objects_not_destroyed():
    destroyed = []
    hmap = make_map(destroyed.append, destroyed.append)
    key, value = Box(0), Box(0)
    hmap.insert(key, value)
    hmap.insert(key, value)
    assert destroyed == []
    assert len(hmap) == 1


def test_insert_replace_without_destroy():
    hmap = make_map()
    key1, key2 = Box(0), Box(0)
    value1, value2 = Box(0), Box(0)
    hmap.insert(key1, value1)
    assert hmap.find(key1) is value1
    hmap.insert(key1, value2)
    assert hmap.find(key1) is value2
    hmap.insert(key2, value2)
    assert hmap.find(key2) is value2
    assert len(hmap) == 1


def test_colliding_keys_after_remove():
    hmap = HashMap(hash_func=hash_int)
    value1, value2 = Box(1), Box(2)
    hmap.insert(1, value1)
    hmap.insert(54, value1)
    assert hmap.remove(1)
    hmap.insert(54, value2)
    assert len(hmap) == 1
    assert hmap.remove(54)
    assert hmap.find(54) is None


def test_remove():
    destroyed = []
    hmap = make_map(destroyed.append, None)
    keys = [Box(i) for i in range(N)]
    for i, key in enumerate(keys):
        hmap.insert(key, Box(i))
        if i % (N // 20) == 0:
            assert hmap.remove(key)

    assert not hmap.remove(Box(2000))

    for i, key in enumerate(keys):
        if i % (N // 20) != 0:
            assert hmap.remove(key)

    assert not hmap.remove(Box(100))
    assert len(hmap) == 0
    assert sorted(box.value for box in destroyed) == list(range(N))


def test_sequential_insert_remove():
    hmap = make_map()
    for i in range(N):
        key = Box(i)
        hmap.insert(key, Box(i))
        hmap.remove(key)
        assert len(hmap) == 0
    assert hmap.find(Box(5)) is None


def test_find():
    hmap = make_map()
    keys = [Box(i) for i in range(N)]
    values = [Box(i) for i in range(N)]
    for key, value in zip(keys, values):
        hmap.insert(key, value)
        found = hmap.find_node(key)
        assert found is not None
        assert found.key is key
        assert found.value is value

    assert hmap.find_node(Box(2000)) is None
    assert hmap.find(Box(2000)) is None


def test_find_after_many_deletes():
    hmap = make_map()
    for i in range(53):
        key = Box(i)
        hmap.insert(key, Box(i))
        assert hmap.remove(key)
    assert hmap.find(Box(53)) is None
    assert Box(10) not in hmap


def test_iterate():
    hmap = HashMap(hash_func=hash_int)
    assert list(hmap) == []
    for i in range(N):
        hmap.insert(i, 2 * i)

    seen = set()
    count = 0
    for key, value in hmap.items():
        assert 0 <= key < N and key not in seen
        assert value == 2 * key
        seen.add(key)
        count += 1
    assert count == N
    assert sorted(hmap) == list(range(N))


def test_contains():
    hmap = HashMap(hash_func=hash_string)
    hmap.insert("foo", 1)
    assert "foo" in hmap
    assert "bar" not in hmap


def test_none_value_distinguished_by_find_node():
    hmap = HashMap()
    hmap.insert("k", None)
    assert hmap.find("k") is None
    assert hmap.find_node("k").value is None
    assert "k" in hmap


def test_capacity_grows_past_load_factor():
    hmap = HashMap(hash_func=hash_int)
    for i in range(26):
        hmap.insert(i, i)
    assert hmap.capacity() == 53
    hmap.insert(26, 26)
    assert hmap.capacity() == 97
    assert all(hmap.find(i) == i for i in range(27))


def test_set_hash_function_relocates_existing_keys():
    hmap = HashMap(hash_func=lambda key: 0)
    for i in range(20):
        hmap.insert(i, str(i))
    hmap.set_hash_function(hash_int)
    assert [hmap.find(i) for i in range(20)] == [str(i) for i in range(20)]
    assert len(hmap) == 20


def test_clear_destroys_everything():
    destroyed_keys = []
    destroyed_values = []
    hmap = HashMap(destroy_key=destroyed_keys.append, destroy_value=destroyed_values.append)
    for i in range(1, 40):
        hmap.insert(i, -i)
    hmap.clear()
    assert len(hmap) == 0
    assert hmap.capacity() == 53
    assert sorted(destroyed_keys) == list(range(1, 40))
    assert sorted(destroyed_values) == sorted(-i for i in range(1, 40))


def test_hash_string_values():
    assert hash_string("") == 5381
    assert hash_string("a") == 177670
    assert hash_string(b"a") == hash_string("a")


def test_hash_string_stays_unsigned_32_bit():
    code = hash_string("a fairly long string that overflows the hash")
    assert 0 <= code < 2**32


def test_hash_int_values():
    assert hash_int(42) == 42
    assert hash_int(-1) == 0xFFFFFFFF


def test_hash_pointer_identity():
    a, b = object(), object()
    assert hash_pointer(a) == hash_pointer(a)
    assert 0 <= hash_pointer(b) < 2**32


@pytest.mark.parametrize("key", ["x", 3, (1, 2)])
def test_default_hash_round_trip(key):
    hmap = HashMap()
    hmap.insert(key, "value")
    assert hmap.find(key) == "value"
    assert hmap.remove(key)
    assert hmap.find(key) is None