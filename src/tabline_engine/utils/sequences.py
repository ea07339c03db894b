"""Small sequence and mapping helpers used around the tab line."""

from __future__ import annotations

from typing import Callable, Hashable, Iterable, Mapping, Optional, Sequence, TypeVar, Union

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V", bound=Hashable)
H = TypeVar("H", bound=Hashable)


def join(*parts: object) -> str:
    return "".join(str(part) for part in parts)


def array_concat(*parts: Union[Sequence[T], T]) -> list[T]:
    """Concatenate arguments into one list.

    Lists and tuples contribute their items (one level deep); anything else,
    strings included, is kept as a single element.
    """

    result: list[T] = []
    for part in parts:
        if isinstance(part, (list, tuple)):
            result.extend(part)
        else:
            result.append(part)  # type: ignore[arg-type]
    return result


def for_each(
    items: Iterable[T],
    callback: Callable[[T], object],
    matcher: Optional[Callable[[T], bool]] = None,
) -> None:
    for item in items:
        if matcher is None or matcher(item):
            callback(item)


def filter_duplicates(items: Iterable[H]) -> list[H]:
    return list(dict.fromkeys(items))


def reverse_lookup(mapping: Mapping[K, V]) -> dict[V, K]:
    """Swap keys and values. Values are assumed unique; later keys win."""

    return {value: key for key, value in mapping.items()}


__all__ = [
    "array_concat",
    "filter_duplicates",
    "for_each",
    "join",
    "reverse_lookup",
]
