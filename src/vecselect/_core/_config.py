from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from contextlib import contextmanager
from dataclasses import asdict, dataclass, replace
from typing import Any

from ._format import dict_repr, iter_repr
from ._validation import InvalidArgument


@dataclass(slots=True, frozen=True)
class Config:
    """Display settings used by the `__repr__` of `Seq` and `Dict`.

    Args:
        max_items (int): Maximum number of items shown before truncating with `...`.
        depth (int): Maximum nesting depth passed to `pprint.pformat`.
        width (int): Line width passed to `pprint.pformat`.
        compact (bool): Whether `pprint.pformat` packs short items on one line.
    """

    max_items: int = 20
    depth: int = 3
    width: int = 80
    compact: bool = True

    def __post_init__(self) -> None:
        for name in ("max_items", "depth", "width"):
            value = getattr(self, name)
            if value <= 0:
                msg = f"Expected positive {name}, got {value}."
                raise InvalidArgument(msg)

    def iter_repr(self, v: Iterable[Any]) -> str:
        return iter_repr(v, **asdict(self))

    def dict_repr(self, v: Mapping[Any, Any]) -> str:
        return dict_repr(v, **asdict(self))


_CONFIG: list[Config] = [Config()]


def get_config() -> Config:
    """Return the active `Config`.

    Example:
    ```python
    >>> from vecselect import get_config
    >>> get_config().max_items
    20

    ```
    """
    return _CONFIG[-1]


def set_config(**changes: Any) -> Config:  # noqa: ANN401
    """Replace the active `Config` with a copy updated by **changes**.

    Args:
        **changes (Any): Fields of `Config` to override.

    Returns:
        Config: The new active configuration.

    Raises:
        InvalidArgument: If a numeric field is not strictly positive.
    """
    _CONFIG[-1] = replace(get_config(), **changes)
    return _CONFIG[-1]


@contextmanager
def config_context(**changes: Any) -> Iterator[Config]:  # noqa: ANN401
    """Temporarily override `Config` fields inside a `with` block.

    Example:
    ```python
    >>> import vecselect as vs
    >>> with vs.config_context(max_items=3):
    ...     vs.Seq(tuple(range(10)))
    Seq(0, 1, 2, ...)
    >>> vs.Seq(tuple(range(4)))
    Seq(0, 1, 2, 3)

    ```
    """
    _CONFIG.append(replace(get_config(), **changes))
    try:
        yield _CONFIG[-1]
    finally:
        _CONFIG.pop()
