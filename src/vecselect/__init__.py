"""Allocation-new selection operations over ordered sequences."""

import logging
from typing import Final

from ._core import (
    Config,
    InvalidArgument,
    Pipeable,
    config_context,
    get_config,
    set_config,
)
from ._dict import Dict
from ._filters import filter, filter_nulls, filter_with_key, keys  # noqa: A004
from ._keyset import Keyset
from ._positional import drop, slice, take  # noqa: A004
from ._sampling import Shuffler, sample, seeded, shuffle, using_rng
from ._seq import Seq
from ._sets import diff, diff_by, intersect, unique, unique_by

ROOT_LOGGER_NAME: Final = "vecselect"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())

__all__ = [
    "ROOT_LOGGER_NAME",
    "Config",
    "Dict",
    "InvalidArgument",
    "Keyset",
    "Pipeable",
    "Seq",
    "Shuffler",
    "config_context",
    "diff",
    "diff_by",
    "drop",
    "filter",
    "filter_nulls",
    "filter_with_key",
    "get_config",
    "intersect",
    "keys",
    "sample",
    "seeded",
    "set_config",
    "shuffle",
    "slice",
    "take",
    "unique",
    "unique_by",
    "using_rng",
]
