"""A sequence with a movable cursor that can sit under any one element."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class ListError(Exception):
    """Raised when a CursorList operation's precondition does not hold."""


class CursorList:
    """An ordered sequence with a cursor that is either under an element or undefined.

    The cursor position is reported by ``index()``, which is -1 while the
    cursor is undefined.
    """

    __hash__ = None  # mutable

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: list[Any] = list(items)
        self._cursor: int | None = None

    # Access -----------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CursorList):
            return NotImplemented
        return self._items == other._items

    def __str__(self) -> str:
        return " ".join(str(item) for item in self._items)

    def __repr__(self) -> str:
        return f"CursorList({self._items!r}, index={self.index()})"

    def index(self) -> int:
        """Return the cursor position, or -1 if the cursor is undefined."""
        return -1 if self._cursor is None else self._cursor

    def _require_nonempty(self, operation: str) -> None:
        if not self._items:
            raise ListError(f"calling {operation}() on an empty List")

    def _require_cursor(self, operation: str) -> int:
        self._require_nonempty(operation)
        if self._cursor is None:
            raise ListError(f"calling {operation}() with an undefined cursor")
        return self._cursor

    def front(self) -> Any:
        """Return the front element."""
        self._require_nonempty("front")
        return self._items[0]

    def back(self) -> Any:
        """Return the back element."""
        self._require_nonempty("back")
        return self._items[-1]

    def get(self) -> Any:
        """Return the element under the cursor."""
        return self._items[self._require_cursor("get")]

    # Manipulation -----------------------------------------------------------

    def set(self, x: Any) -> None:
        """Overwrite the element under the cursor with x."""
        self._items[self._require_cursor("set")] = x

    def clear(self) -> None:
        """Empty the list and make the cursor undefined."""
        self._items.clear()
        self._cursor = None

    def move_front(self) -> None:
        """Place the cursor under the front element, if there is one."""
        if self._items:
            self._cursor = 0

    def move_back(self) -> None:
        """Place the cursor under the back element, if there is one."""
        if self._items:
            self._cursor = len(self._items) - 1

    def move_prev(self) -> None:
        """Step the cursor toward the front; it falls off (undefined) past the front."""
        if self._cursor is not None:
            self._cursor = self._cursor - 1 if self._cursor > 0 else None

    def move_next(self) -> None:
        """Step the cursor toward the back; it falls off (undefined) past the back."""
        if self._cursor is not None:
            nxt = self._cursor + 1
            self._cursor = nxt if nxt < len(self._items) else None

    def prepend(self, x: Any) -> None:
        """Insert x before the front element."""
        self._items.insert(0, x)
        if self._cursor is not None:
            self._cursor += 1

    def append(self, x: Any) -> None:
        """Insert x after the back element."""
        self._items.append(x)

    def insert_before(self, x: Any) -> None:
        """Insert x just before the cursor element."""
        cursor = self._require_cursor("insertBefore")
        self._items.insert(cursor, x)
        self._cursor = cursor + 1

    def insert_after(self, x: Any) -> None:
        """Insert x just after the cursor element."""
        cursor = self._require_cursor("insertAfter")
        self._items.insert(cursor + 1, x)

    def delete_front(self) -> None:
        """Remove the front element; the cursor becomes undefined if it was there."""
        self._require_nonempty("deleteFront")
        del self._items[0]
        if self._cursor is not None:
            self._cursor = self._cursor - 1 if self._cursor > 0 else None

    def delete_back(self) -> None:
        """Remove the back element; the cursor becomes undefined if it was there."""
        self._require_nonempty("deleteBack")
        if self._cursor == len(self._items) - 1:
            self._cursor = None
        del self._items[-1]

    def delete(self) -> None:
        """Remove the cursor element and make the cursor undefined."""
        cursor = self._require_cursor("delete")
        del self._items[cursor]
        self._cursor = None

    # Other ------------------------------------------------------------------

    def copy(self) -> CursorList:
        """Return a new list with the same elements and an undefined cursor."""
        return CursorList(self._items)

    def concat(self, other: CursorList) -> CursorList:
        """Return a new list holding this list's elements followed by other's."""
        return CursorList([*self._items, *other._items])