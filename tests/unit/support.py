"""
Shared helpers for the container tests.
"""

from __future__ import annotations

from numberlist import NumberList


def assert_consistent(lst: NumberList) -> None:
    """Walk the chain and check it against the cached size and tail."""

    count = 0
    last = None
    node = lst._head
    while node is not None:
        count += 1
        last = node
        node = node.next
        assert count <= lst.size(), "chain is longer than the cached size"
    assert count == lst.size()
    assert last is lst._tail
    assert (lst.size() == 0) == (lst._head is None) == (lst._tail is None)
