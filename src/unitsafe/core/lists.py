# unitsafe.core.lists
"""
Immutable ordered lists and the elementwise combinator.

A :class:`StaticList` holds one value per dimension axis. All operations
return new lists; :func:`elementwise` combines any number of equal-length
lists position by position.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, TypeVar

from unitsafe.core.errors import LengthMismatchError

L = TypeVar("L", bound="StaticList")

END_MARKER = "end"


class StaticList(tuple):
    """
    Immutable ordered list.

    Tuple subclass => hashable and comparable; concatenation (``+``) and
    repetition (``*``) are blocked so subclasses can give those operators
    their own meaning.
    """

    __slots__ = ()

    def __new__(cls: type[L], items: Iterable[Any] = ()) -> L:
        return tuple.__new__(cls, items)

    @classmethod
    def repeat(cls: type[L], n: int, value: Any) -> L:
        """A list of length ``n`` holding ``value`` at every position."""
        if n < 1:
            raise ValueError(f"repeat length must be at least 1, got {n}")
        return cls(value for _ in range(n))

    # --- Inspection ---
    @property
    def length(self) -> int:
        return len(self)

    def get(self, index: int) -> Any:
        return self[index]

    def back(self) -> Any:
        if not self:
            raise IndexError("back() of an empty list")
        return self[-1]

    # --- Construction of new lists ---
    def push_front(self: L, value: Any) -> L:
        return type(self)((value, *self))

    def push_back(self: L, value: Any) -> L:
        return type(self)((*self, value))

    def pop_front(self: L) -> L:
        if not self:
            raise IndexError("pop_front() from an empty list")
        return type(self)(self[1:])

    def pop_back(self: L) -> L:
        if not self:
            raise IndexError("pop_back() from an empty list")
        return type(self)(self[:-1])

    def pop_at(self: L, index: int) -> L:
        """Drop the element at ``index`` (negative indices count from the end)."""
        n = len(self)
        if not -n <= index < n:
            raise IndexError(f"pop_at index {index} out of range for length {n}")
        index %= n
        return type(self)(self[:index] + self[index + 1:])

    def reversed(self: L) -> L:
        return type(self)(self[::-1])

    # --- Block tuple concatenation / repetition ---
    def __add__(self, other: Any) -> Any:
        return NotImplemented

    def __radd__(self, other: Any) -> Any:
        return NotImplemented

    def __mul__(self, other: Any) -> Any:
        return NotImplemented

    def __rmul__(self, other: Any) -> Any:
        return NotImplemented

    def __str__(self) -> str:
        return "<" + "".join(f"{item}, " for item in self) + END_MARKER + ">"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


def elementwise(op: Callable[..., Any], *lists: Iterable[Any]) -> StaticList:
    """
    Apply ``op`` across the i-th element of every list.

    ``elementwise(add, a, b)[i] == add(a[i], b[i])``. All inputs must have the
    same length; a mismatch raises LengthMismatchError instead of truncating.
    """
    if not lists:
        raise TypeError("elementwise() needs at least one list")

    seqs = [tuple(lst) for lst in lists]
    lengths = tuple(len(s) for s in seqs)
    if len(set(lengths)) != 1:
        raise LengthMismatchError(lengths)

    return StaticList(op(*items) for items in zip(*seqs, strict=True))


__all__ = ["StaticList", "elementwise", "END_MARKER"]
