"""Singly linked list of arbitrary payloads.

A list is its head node, or ``None`` when empty. Functions that can change
which node is the head return the new head instead of updating it through
a reference.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional

Deleter = Callable[[Any], Any]


@dataclass(eq=False)
class ListNode:
    """One element of a singly linked list."""

    content: Any
    next: Optional[ListNode] = None

    def __iter__(self) -> Iterator[Any]:
        """Yield the contents of this node and every node after it."""
        for node in _nodes(self):
            yield node.content


def _nodes(head: Optional[ListNode]) -> Iterator[ListNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def lst_new(content: Any) -> ListNode:
    """Return a detached node holding ``content``."""
    return ListNode(content)


def lst_add_front(head: Optional[ListNode], node: Optional[ListNode]) -> Optional[ListNode]:
    """Put ``node`` before ``head`` and return the new head."""
    if node is None:
        return head
    node.next = head
    return node


def lst_add_back(head: Optional[ListNode], node: Optional[ListNode]) -> Optional[ListNode]:
    """Append ``node`` after the last node and return the head."""
    if node is None:
        return head
    last = lst_last(head)
    if last is None:
        return node
    last.next = node
    return head


def lst_size(head: Optional[ListNode]) -> int:
    """Number of nodes in the list."""
    return sum(1 for _ in _nodes(head))


def lst_last(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the last node, or ``None`` for an empty list."""
    last = None
    for last in _nodes(head):
        pass
    return last


def lst_iter(head: Optional[ListNode], f: Optional[Callable[[Any], Any]]) -> None:
    """Call ``f`` on the content of every node, front to back."""
    if f is None:
        return
    for node in _nodes(head):
        f(node.content)


def lst_map(
    head: Optional[ListNode],
    f: Optional[Callable[[Any], Any]],
    delete: Optional[Deleter],
) -> Optional[ListNode]:
    """Return a new list holding ``f`` applied to each content.

    Returns ``None`` when the list is empty or either function is missing.
    """
    if head is None or f is None or delete is None:
        return None
    new_head: Optional[ListNode] = None
    tail: Optional[ListNode] = None
    for content in head:
        node = ListNode(f(content))
        if tail is None:
            new_head = node
        else:
            tail.next = node
        tail = node
    return new_head


def lst_clear(head: Optional[ListNode], delete: Optional[Deleter]) -> None:
    """Pass every content to ``delete``, last node first, and unlink the nodes."""
    if head is None or delete is None:
        return
    for node in reversed(list(_nodes(head))):
        delete(node.content)
        node.next = None


def lst_delone(node: Optional[ListNode], delete: Optional[Deleter]) -> None:
    """Pass the content of a single node to ``delete`` and detach the node."""
    if node is None or delete is None:
        return
    delete(node.content)
    node.next = None