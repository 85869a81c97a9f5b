"""Errors raised by :class:`numberlist.number_list.NumberList`."""

from __future__ import annotations


class NumberListError(Exception):
    """Base class for container errors."""


class EmptyListError(NumberListError, IndexError):
    """An operation that needs at least one element was called on an empty list."""


class ListIndexError(NumberListError, IndexError):
    """A position falls outside the valid range of the list."""


class InvalidArgumentError(NumberListError, ValueError):
    """An argument is outside the domain an operation accepts."""
