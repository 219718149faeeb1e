import logging
from collections.abc import Iterator, Mapping, Sequence
from typing import Any

from pymongo.collection import Collection
from pymongo.command_cursor import CommandCursor
from pymongo.cursor import Cursor
from pymongo.database import Database

from mondo.conversion import decode, decode_many, encode
from mondo.options.base import index_spec
from mondo.options.count import coerce_count_options
from mondo.resolver import collection, namespace, session_kwargs

logger = logging.getLogger(__name__)


def aggregate(
    db: Database, coll: "str | Collection", pipeline: Sequence[Mapping[str, Any]], **opts
) -> "Iterator[dict] | CommandCursor":
    """Runs an aggregation pipeline.

    Args:
        db: The database
        coll: A collection name or handle
        pipeline: The pipeline stages
        **opts: The options bag. Recognized keys:
            - `allow_disk_use`: Allow stages to write temporary files
            - `batch_size`: Documents to return per batch
            - `bypass_document_validation`: Skip validation for `$out`/`$merge` stages
            - `keywordize`: Decode keys as keywords, default: True
            - `raw`: Return the driver's cursor instead of decoding it, default: False
            - `session`: A `ClientSession`

            Also takes the options accepted by `collection`.

    Returns:
        A lazy iterator of decoded documents, or the driver's `CommandCursor` when `raw` is set
    """
    kwargs = session_kwargs(opts)
    if opts.get("allow_disk_use") is not None:
        kwargs["allowDiskUse"] = opts["allow_disk_use"]

    if opts.get("batch_size"):
        kwargs["batchSize"] = opts["batch_size"]

    if opts.get("bypass_document_validation") is not None:
        kwargs["bypassDocumentValidation"] = opts["bypass_document_validation"]

    logger.debug("Aggregating %s", namespace(db, coll))
    cursor = collection(db, coll, **opts).aggregate(encode(pipeline), **kwargs)
    if opts.get("raw", False):
        return cursor

    return decode_many(cursor, opts.get("keywordize", True))


def count_documents(db: Database, coll: "str | Collection", query: Mapping[str, Any] | None = None, **opts) -> int:
    """Counts the documents in a collection, optionally only those matching `query`.

    Args:
        db: The database
        coll: A collection name or handle
        query: The filter, counts every document when omitted
        **opts: The options bag. Recognized keys:
            - `hint`: An index name or key specification, e.g. {"a": 1}
            - `limit`: Maximum number of documents to count
            - `max_time_ms`: How long the count may run, in milliseconds
            - `skip`: Number of documents to skip before counting
            - `count_options`: A pre-built `CountOptions`, the keys above are applied on top of it
            - `session`: A `ClientSession`

            Also takes the options accepted by `collection`.
    """
    options = coerce_count_options(opts)
    logger.debug("Counting documents in %s", namespace(db, coll))
    return collection(db, coll, **opts).count_documents(
        encode(query) if query is not None else {}, **session_kwargs(opts), **options.to_kwargs()
    )


def find(
    db: Database, coll: "str | Collection", query: Mapping[str, Any] | None = None, **opts
) -> "Iterator[dict] | Cursor":
    """Finds documents matching `query`.

    Args:
        db: The database
        coll: A collection name or handle
        query: The filter, matches every document when omitted
        **opts: The options bag. Recognized keys:
            - `limit`: Maximum number of documents to return
            - `skip`: Number of documents to skip
            - `sort`: Sort order, e.g. {"timestamp": -1}
            - `projection`: Fields to return, e.g. {"_id": 0}
            - `keywordize`: Decode keys as keywords, default: True
            - `raw`: Return the driver's cursor instead of decoding it, default: False
            - `session`: A `ClientSession`

            Also takes the options accepted by `collection`.

    Returns:
        A lazy iterator that decodes one document at a time as it's pulled from the cursor, or the driver's `Cursor`
        when `raw` is set
    """
    kwargs = session_kwargs(opts)
    if opts.get("projection") is not None:
        kwargs["projection"] = encode(opts["projection"])

    logger.debug("Finding documents in %s", namespace(db, coll))
    cursor = collection(db, coll, **opts).find(encode(query) if query is not None else {}, **kwargs)
    if opts.get("limit") is not None:
        cursor = cursor.limit(opts["limit"])

    if opts.get("skip") is not None:
        cursor = cursor.skip(opts["skip"])

    if opts.get("sort") is not None:
        cursor = cursor.sort(index_spec(opts["sort"]))

    if opts.get("raw", False):
        return cursor

    return decode_many(cursor, opts.get("keywordize", True))


def find_one(db: Database, coll: "str | Collection", query: Mapping[str, Any] | None = None, **opts) -> dict | None:
    """Finds a single document, or None when nothing matches. Takes the same options as `find` (`raw` is ignored)."""
    return next(find(db, coll, query, **{**opts, "limit": 1, "raw": False}), None)


def decode_document(document: Any, opts: Mapping[str, Any]) -> Any:
    """Decodes a single driver result using the bag's `keywordize` option."""
    return decode(document, opts.get("keywordize", True))
