from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from tramp.optionals import Optional, Some

from mondo.options.base import DriverOptions, index_spec, is_present, option, start_from


@dataclass
class CountOptions(DriverOptions):
    """Options for `count_documents`.

    Attributes:
        hint: Index name or list of (key, direction) pairs
        limit: Maximum number of documents to count
        max_time_ms: How long the count may run, in milliseconds
        skip: Number of documents to skip before counting
        collation: A `pymongo.collation.Collation`
        comment: Attached to the command for profiling
    """
    hint: Optional[Any] = option()
    limit: Optional[int] = option()
    max_time_ms: Optional[int] = option("maxTimeMS")
    skip: Optional[int] = option()
    collation: Optional[Any] = option()
    comment: Optional[Any] = option()


def coerce_count_options(opts: Mapping[str, Any]) -> CountOptions:
    """Coerces an options bag into `CountOptions`.

    Recognized keys: `hint`, `limit`, `max_time_ms`, `skip`. Pre-built options can be passed as `count_options`, any
    recognized keys are applied on top of them.
    """
    options = start_from(opts, "count_options", CountOptions)
    if is_present(opts, "hint"):
        options.hint = Some(index_spec(opts["hint"]))

    if is_present(opts, "limit"):
        options.limit = Some(opts["limit"])

    if is_present(opts, "max_time_ms"):
        options.max_time_ms = Some(opts["max_time_ms"])

    if is_present(opts, "skip"):
        options.skip = Some(opts["skip"])

    return options
