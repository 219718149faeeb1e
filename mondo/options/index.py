from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from tramp.optionals import Optional, Some

from mondo.conversion import encode
from mondo.options.base import DriverOptions, is_present, option, start_from


@dataclass
class IndexOptions(DriverOptions):
    """Options for creating an index.

    Attributes:
        name: Explicit index name, the server generates one from the keys otherwise
        sparse: Only index documents that have the indexed fields
        unique: Reject documents that duplicate an existing key
        expire_after_seconds: TTL for documents in the collection
        partial_filter_expression: Only index documents matching this filter
        collation: A `pymongo.collation.Collation`
    """
    name: Optional[str] = option()
    sparse: Optional[bool] = option()
    unique: Optional[bool] = option()
    expire_after_seconds: Optional[int] = option("expireAfterSeconds")
    partial_filter_expression: Optional[Mapping[str, Any]] = option("partialFilterExpression")
    collation: Optional[Any] = option()


def coerce_index_options(opts: Mapping[str, Any]) -> IndexOptions:
    """Coerces an options bag into `IndexOptions`.

    Recognized keys: `name`, `sparse`, `unique`. Pre-built options can be passed as `index_options`.
    """
    options = start_from(opts, "index_options", IndexOptions)
    if is_present(opts, "name"):
        options.name = Some(encode(opts["name"]))

    if is_present(opts, "sparse"):
        options.sparse = Some(opts["sparse"])

    if is_present(opts, "unique"):
        options.unique = Some(opts["unique"])

    return options
