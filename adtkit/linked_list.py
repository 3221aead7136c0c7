"""Singly linked list with a sentinel head node."""

from typing import Any, Iterator, Optional

from adtkit.common import CompareFunc, DestroyFunc, default_compare


class ListNode:
    """A node of a :class:`LinkedList`, holding one value."""

    __slots__ = ("value", "next")

    def __init__(self, value: Any = None, next: Optional["ListNode"] = None) -> None:
        self.value = value
        self.next = next

    def __repr__(self) -> str:
        return f"ListNode({self.value!r})"


class LinkedList:
    """Sequence with insertion and removal after any node.

    Passing ``None`` as the node to :meth:`insert_next` or :meth:`remove_next`
    refers to the position before the first node. A destroy callback, when set,
    is called for every removed value other than ``None``.
    """

    __slots__ = ("_dummy", "_last", "_size", "_destroy_value")

    def __init__(self, destroy_value: DestroyFunc = None) -> None:
        self._dummy = ListNode()
        self._last = self._dummy
        self._size = 0
        self._destroy_value = destroy_value

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def _nodes(self) -> Iterator[ListNode]:
        node = self._dummy.next
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def _destroy(self, value: Any) -> None:
        if self._destroy_value is not None and value is not None:
            self._destroy_value(value)

    def insert_next(self, node: Optional[ListNode], value: Any) -> ListNode:
        """Insert ``value`` after ``node`` (at the front if None); return the new node."""
        anchor = self._dummy if node is None else node
        new = ListNode(value, anchor.next)
        anchor.next = new
        self._size += 1
        if self._last is anchor:
            self._last = new
        return new

    def remove_next(self, node: Optional[ListNode]) -> None:
        """Remove the node after ``node`` (the first node if None)."""
        anchor = self._dummy if node is None else node
        removed = anchor.next
        if removed is None:
            raise IndexError("no node to remove after the given node")
        anchor.next = removed.next
        removed.next = None
        self._size -= 1
        if self._last is removed:
            self._last = anchor
        self._destroy(removed.value)

    def find(self, value: Any, compare: CompareFunc = default_compare) -> Optional[Any]:
        """Return the first stored value equivalent to ``value``, or None."""
        node = self.find_node(value, compare)
        return None if node is None else node.value

    def find_node(self, value: Any, compare: CompareFunc = default_compare) -> Optional[ListNode]:
        """Return the first node whose value is equivalent to ``value``, or None."""
        return next((node for node in self._nodes() if compare(value, node.value) == 0), None)

    def set_destroy_value(self, destroy_value: DestroyFunc) -> DestroyFunc:
        """Replace the destroy callback and return the previous one."""
        old = self._destroy_value
        self._destroy_value = destroy_value
        return old

    def first(self) -> Optional[ListNode]:
        """Return the first node, or None if the list is empty."""
        return self._dummy.next

    def last(self) -> Optional[ListNode]:
        """Return the last node, or None if the list is empty."""
        return None if self._last is self._dummy else self._last

    def next_node(self, node: ListNode) -> Optional[ListNode]:
        """Return the node after ``node``, or None if it is the last."""
        if node is None:
            raise ValueError("next_node requires a node")
        return node.next

    def clear(self) -> None:
        """Remove every node, passing each value to the destroy callback."""
        values = list(self)
        self._dummy.next = None
        self._last = self._dummy
        self._size = 0
        for value in values:
            self._destroy(value)