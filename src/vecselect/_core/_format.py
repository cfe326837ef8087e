from collections.abc import Iterable, Mapping
from itertools import islice
from pprint import pformat
from typing import Any


def iter_repr(
    v: Iterable[Any],
    max_items: int = 20,
    depth: int = 3,
    width: int = 80,
    *,
    compact: bool = True,
) -> str:
    head = tuple(islice(v, max_items + 1))
    suffix = ", ..." if len(head) > max_items else ""
    body = pformat(head[:max_items], depth=depth, width=width, compact=compact)
    body = body[1:-1]
    if suffix:
        body = body.removesuffix(",")
    return body + suffix


def dict_repr(
    v: Mapping[Any, Any],
    max_items: int = 20,
    depth: int = 3,
    width: int = 80,
    *,
    compact: bool = True,
) -> str:
    truncated = dict(list(v.items())[:max_items])
    suffix = "..." if len(v) > max_items else ""
    return (
        pformat(truncated, depth=depth, width=width, compact=compact, sort_dicts=False)
        + suffix
    )
