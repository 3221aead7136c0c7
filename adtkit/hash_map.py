"""Key/value map backed by an open-addressing hash table with linear probing."""

from enum import Enum
from typing import Any, Callable, Iterator, Optional, Tuple

from adtkit.common import CompareFunc, DestroyFunc, default_compare

HashFunc = Callable[[Any], int]
"""Returns an unsigned 32-bit hash code for a key."""

_UINT_MASK = 0xFFFFFFFF

# Table sizes known to behave well; past the last one the capacity doubles.
PRIME_SIZES = (
    53, 97, 193, 389, 769, 1543, 3079, 6151, 12289, 24593, 49157, 98317,
    196613, 393241, 786433, 1572869, 3145739, 6291469, 12582917, 25165843,
    50331653, 100663319, 201326611, 402653189, 805306457, 1610612741,
)

MAX_LOAD_FACTOR = 0.5


def hash_string(value: Any) -> int:
    """djb2 hash of a string (UTF-8 encoded) or bytes, as an unsigned 32-bit value."""
    data = value.encode("utf-8") if isinstance(value, str) else bytes(value)
    code = 5381
    for byte in data:
        signed = byte - 256 if byte >= 128 else byte
        code = ((code << 5) + code + signed) & _UINT_MASK
    return code


def hash_int(value: int) -> int:
    """Hash of an integer: its value reduced to an unsigned 32-bit number."""
    return int(value) & _UINT_MASK


def hash_pointer(value: Any) -> int:
    """Hash by object identity, for keys that are distinct from every other object."""
    return id(value) & _UINT_MASK


def _default_hash(value: Any) -> int:
    return hash(value) & _UINT_MASK


class _State(Enum):
    EMPTY = "empty"
    OCCUPIED = "occupied"
    DELETED = "deleted"


class MapNode:
    """A slot of a :class:`HashMap`, holding one key and its value."""

    __slots__ = ("key", "value", "state")

    def __init__(self) -> None:
        self.key: Any = None
        self.value: Any = None
        self.state = _State.EMPTY

    def __repr__(self) -> str:
        return f"MapNode({self.key!r}: {self.value!r})"


class HashMap:
    """Map from keys to values, with keys matched by ``compare`` and placed by ``hash_func``.

    Destroy callbacks, when set, are called for every key or value that is
    removed or replaced by a different object. ``None`` is never passed to them.
    Iteration visits keys in table order, which is arbitrary.
    """

    __slots__ = ("_table", "_size", "_deleted", "_compare", "_hash",
                 "_destroy_key", "_destroy_value")

    def __init__(
        self,
        compare: CompareFunc = default_compare,
        destroy_key: DestroyFunc = None,
        destroy_value: DestroyFunc = None,
        hash_func: Optional[HashFunc] = None,
    ) -> None:
        self._table = [MapNode() for _ in range(PRIME_SIZES[0])]
        self._size = 0
        self._deleted = 0
        self._compare = compare
        self._hash: HashFunc = hash_func if hash_func is not None else _default_hash
        self._destroy_key = destroy_key
        self._destroy_value = destroy_value

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"HashMap({dict(self.items())!r})"

    def __iter__(self) -> Iterator[Any]:
        return (node.key for node in self._occupied())

    def __contains__(self, key: Any) -> bool:
        return self.find_node(key) is not None

    def _occupied(self) -> Iterator[MapNode]:
        return (node for node in self._table if node.state is _State.OCCUPIED)

    def _probe(self, key: Any) -> Iterator[MapNode]:
        """Yield slots from the key's home position up to and including the first EMPTY one."""
        capacity = len(self._table)
        pos = (self._hash(key) & _UINT_MASK) % capacity
        while True:
            node = self._table[pos]
            yield node
            if node.state is _State.EMPTY:
                return
            pos = (pos + 1) % capacity

    @staticmethod
    def _call(func: DestroyFunc, value: Any) -> None:
        if func is not None and value is not None:
            func(value)

    def _rebuild(self, capacity: int) -> None:
        old_nodes = list(self._occupied())
        self._table = [MapNode() for _ in range(capacity)]
        self._size = 0
        self._deleted = 0
        for node in old_nodes:
            self._place(node.key, node.value)

    def _grow(self) -> None:
        old_capacity = len(self._table)
        capacity = next((p for p in PRIME_SIZES if p > old_capacity), old_capacity * 2)
        self._rebuild(capacity)

    def _place(self, key: Any, value: Any) -> None:
        target: Optional[MapNode] = None
        found = False
        for node in self._probe(key):
            if node.state is _State.EMPTY:
                if target is None:
                    target = node
            elif node.state is _State.DELETED:
                if target is None:
                    target = node
            elif self._compare(node.key, key) == 0:
                target = node
                found = True
                break

        assert target is not None
        if found:
            if target.key is not key:
                self._call(self._destroy_key, target.key)
            if target.value is not value:
                self._call(self._destroy_value, target.value)
        else:
            self._size += 1
            if target.state is _State.DELETED:
                self._deleted -= 1

        target.state = _State.OCCUPIED
        target.key = key
        target.value = value

    def insert(self, key: Any, value: Any) -> None:
        """Map ``key`` to ``value``, replacing any equivalent key and its value."""
        self._place(key, value)
        if (self._size + self._deleted) / len(self._table) > MAX_LOAD_FACTOR:
            self._grow()

    def remove(self, key: Any) -> bool:
        """Remove the key equivalent to ``key``; return whether one was found."""
        node = self.find_node(key)
        if node is None:
            return False
        self._call(self._destroy_key, node.key)
        self._call(self._destroy_value, node.value)
        node.state = _State.DELETED
        node.key = None
        node.value = None
        self._deleted += 1
        self._size -= 1
        return True

    def find(self, key: Any) -> Optional[Any]:
        """Return the value mapped to ``key``, or None if the key is absent."""
        node = self.find_node(key)
        return None if node is None else node.value

    def find_node(self, key: Any) -> Optional[MapNode]:
        """Return the slot holding ``key``, or None if the key is absent."""
        for node in self._probe(key):
            if node.state is _State.OCCUPIED and self._compare(node.key, key) == 0:
                return node
        return None

    def items(self) -> Iterator[Tuple[Any, Any]]:
        """Yield ``(key, value)`` pairs in table order."""
        return ((node.key, node.value) for node in self._occupied())

    def set_destroy_key(self, destroy_key: DestroyFunc) -> DestroyFunc:
        """Replace the key destroy callback and return the previous one."""
        old = self._destroy_key
        self._destroy_key = destroy_key
        return old

    def set_destroy_value(self, destroy_value: DestroyFunc) -> DestroyFunc:
        """Replace the value destroy callback and return the previous one."""
        old = self._destroy_value
        self._destroy_value = destroy_value
        return old

    def set_hash_function(self, hash_func: HashFunc) -> None:
        """Use ``hash_func`` to place keys, relocating any keys already stored."""
        self._hash = hash_func
        if self._size or self._deleted:
            self._rebuild(len(self._table))

    def clear(self) -> None:
        """Remove every entry, passing keys and values to the destroy callbacks."""
        entries = list(self.items())
        self._table = [MapNode() for _ in range(PRIME_SIZES[0])]
        self._size = 0
        self._deleted = 0
        for key, value in entries:
            self._call(self._destroy_key, key)
            self._call(self._destroy_value, value)

    def capacity(self) -> int:
        """Return the number of slots in the table."""
        return len(self._table)