"""Singly linked lists: a list class and classic routines on chains of nodes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False, repr=False)
class Node:
    """One link of a singly linked chain; nodes compare by identity."""

    val: Any
    next: Node | None = None

    def __repr__(self) -> str:
        return f"Node({self.val!r})"


def _nodes(head: Node | None) -> Iterator[Node]:
    """Yield the nodes of a chain, raising ValueError if it loops."""
    seen: set[int] = set()
    node = head
    while node is not None:
        if id(node) in seen:
            raise ValueError("the chain has a cycle")
        seen.add(id(node))
        yield node
        node = node.next


def from_values(values: Iterable[Any]) -> Node | None:
    """Build a chain holding *values* in order and return its head."""
    dummy = Node(None)
    tail = dummy
    for value in values:
        tail.next = Node(value)
        tail = tail.next
    return dummy.next


def to_values(head: Node | None) -> list[Any]:
    """Return the values of the chain starting at *head*."""
    return [node.val for node in _nodes(head)]


class LinkedList:
    """A singly linked list with pushes and pops at both ends."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        self._length = 0
        for value in values:
            self.push_back(value)

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.val
            node = node.next

    def __len__(self) -> int:
        return self._length

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def push_back(self, value: Any) -> None:
        """Append *value* at the tail."""
        new = Node(value)
        if self.head is None:
            self.head = new
        else:
            node = self.head
            while node.next is not None:
                node = node.next
            node.next = new
        self._length += 1

    def push_front(self, value: Any) -> None:
        """Insert *value* at the head."""
        self.head = Node(value, self.head)
        self._length += 1

    def pop_back(self) -> Any:
        """Remove and return the last value; raise IndexError when empty."""
        if self.head is None:
            raise IndexError("pop from an empty list")
        if self.head.next is None:
            value = self.head.val
            self.head = None
        else:
            node = self.head
            while node.next.next is not None:
                node = node.next
            value = node.next.val
            node.next = None
        self._length -= 1
        return value

    def pop_front(self) -> Any:
        """Remove and return the first value; raise IndexError when empty."""
        if self.head is None:
            raise IndexError("pop from an empty list")
        value = self.head.val
        self.head = self.head.next
        self._length -= 1
        return value

    def insert_after(self, position: int, value: Any) -> None:
        """Insert *value* after the node at 1-based *position*."""
        if not 1 <= position <= self._length:
            raise IndexError(f"position {position} is not between 1 and {self._length}")
        node = self.head
        for _ in range(position - 1):
            node = node.next
        node.next = Node(value, node.next)
        self._length += 1


def add_numbers(first: Node | None, second: Node | None) -> Node | None:
    """Add two numbers stored as digit chains, least significant digit first."""
    dummy = Node(None)
    tail = dummy
    carry = 0
    while first is not None or second is not None or carry:
        total = carry
        if first is not None:
            total += first.val
            first = first.next
        if second is not None:
            total += second.val
            second = second.next
        carry, digit = divmod(total, 10)
        tail.next = Node(digit)
        tail = tail.next
    return dummy.next


def intersection(first: Node | None, second: Node | None) -> Node | None:
    """Return the first node the two chains share, or None."""
    a, b = first, second
    while a is not b:
        a = second if a is None else a.next
        b = first if b is None else b.next
    return a


def cycle_start(head: Node | None) -> Node | None:
    """Return the node where the chain's cycle begins, or None if it has none."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            break
    else:
        return None
    slow = head
    while slow is not fast:
        slow = slow.next
        fast = fast.next
    return slow


def merge_sorted(first: Node | None, second: Node | None) -> Node | None:
    """Merge two ascending chains in place and return the merged head."""
    if first is None:
        return second
    if second is None:
        return first
    if first.val > second.val:
        first, second = second, first
    result = first
    while first is not None and second is not None:
        last = None
        while first is not None and first.val <= second.val:
            last = first
            first = first.next
        last.next = second
        first, second = second, first
    return result


def middle(head: Node | None) -> Node | None:
    """Return the middle node; of two middles, the second."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow


def remove_nth_from_end(head: Node | None, n: int) -> Node | None:
    """Remove the *n*-th node from the end (1 is the last) and return the head."""
    dummy = Node(None, head)
    fast = dummy
    for _ in range(n):
        fast = fast.next
        if fast is None:
            break
    if n < 1 or fast is None:
        raise IndexError(f"cannot remove node {n} from the end")
    slow = dummy
    while fast.next is not None:
        slow = slow.next
        fast = fast.next
    slow.next = slow.next.next
    return dummy.next


def reverse(head: Node | None) -> Node | None:
    """Reverse the chain in place and return its new head."""
    previous = None
    while head is not None:
        head.next, previous, head = previous, head, head.next
    return previous