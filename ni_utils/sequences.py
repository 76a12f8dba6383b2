"""In-place and copying removal helpers for lists."""

from typing import TypeVar

T = TypeVar("T")


def remove(items: list[T], value: T) -> list[T]:
    """Remove the first occurrence of value from items, in place.

    Returns the same list object so calls can be chained. Missing values
    are ignored.
    """
    try:
        items.remove(value)
    except ValueError:
        pass
    return items


def exclude(items: list[T], *values: T) -> list[T]:
    """Return a new list with every element found in values dropped."""
    return [item for item in items if item not in values]
