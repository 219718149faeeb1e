import logging
from collections.abc import Mapping, Sequence
from typing import Any

from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.results import UpdateResult

from mondo.conversion import encode
from mondo.fetch import decode_document
from mondo.options.find_and_modify import coerce_find_one_and_replace_options, coerce_find_one_and_update_options
from mondo.options.write import coerce_replace_options, coerce_update_options
from mondo.resolver import collection, namespace, session_kwargs

logger = logging.getLogger(__name__)

Update = Mapping[str, Any] | Sequence[Mapping[str, Any]]


def find_one_and_update(
    db: Database, coll: "str | Collection", query: Mapping[str, Any], update: Update, **opts
) -> dict | None:
    """Atomically finds a document and applies an update to it.

    Args:
        db: The database
        coll: A collection name or handle
        query: The filter selecting the document
        update: Update operators (or an aggregation pipeline) to apply
        **opts: The options bag. Recognized keys:
            - `upsert`: Insert a new document when nothing matches, default: False
            - `return_new`: Return the document as it is after the update instead of before it, default: False
            - `sort`: Which document to update when several match, e.g. {"timestamp": -1}
            - `projection`: Fields to return, e.g. {"_id": 0}
            - `find_one_and_update_options`: A pre-built `FindOneAndUpdateOptions`, the keys above are applied on
              top of it
            - `keywordize`: Decode keys as keywords, default: True
            - `session`: A `ClientSession`

            Also takes the options accepted by `collection`.

    Returns:
        The decoded document, or None when nothing matched
    """
    options = coerce_find_one_and_update_options(opts)
    logger.debug("Finding and updating one document in %s", namespace(db, coll))
    document = collection(db, coll, **opts).find_one_and_update(
        encode(query), encode(update), **session_kwargs(opts), **options.to_kwargs()
    )
    return decode_document(document, opts)


def find_one_and_replace(
    db: Database, coll: "str | Collection", query: Mapping[str, Any], document: Mapping[str, Any], **opts
) -> dict | None:
    """Atomically finds a document and replaces it.

    Takes the same options as `find_one_and_update`, with `find_one_and_replace_options` for pre-built options.

    Returns:
        The decoded document, or None when nothing matched
    """
    options = coerce_find_one_and_replace_options(opts)
    logger.debug("Finding and replacing one document in %s", namespace(db, coll))
    result = collection(db, coll, **opts).find_one_and_replace(
        encode(query), encode(document), **session_kwargs(opts), **options.to_kwargs()
    )
    return decode_document(result, opts)


def replace_one(
    db: Database, coll: "str | Collection", query: Mapping[str, Any], document: Mapping[str, Any], **opts
) -> UpdateResult:
    """Replaces the first document matching `query`.

    Args:
        db: The database
        coll: A collection name or handle
        query: The filter selecting the document
        document: The replacement document
        **opts: The options bag. Recognized keys:
            - `upsert`: Insert the replacement when nothing matches, default: False
            - `bypass_document_validation`: Skip the collection's document validation
            - `replace_options`: A pre-built `ReplaceOptions`, the keys above are applied on top of it
            - `session`: A `ClientSession`

            Also takes the options accepted by `collection`.
    """
    options = coerce_replace_options(opts)
    logger.debug("Replacing one document in %s", namespace(db, coll))
    return collection(db, coll, **opts).replace_one(
        encode(query), encode(document), **session_kwargs(opts), **options.to_kwargs()
    )


def update_one(db: Database, coll: "str | Collection", query: Mapping[str, Any], update: Update, **opts) -> UpdateResult:
    """Applies an update to the first document matching `query`.

    Args:
        db: The database
        coll: A collection name or handle
        query: The filter selecting the document
        update: Update operators (or an aggregation pipeline) to apply
        **opts: The options bag. Recognized keys:
            - `upsert`: Insert a new document when nothing matches, default: False
            - `bypass_document_validation`: Skip the collection's document validation
            - `update_options`: A pre-built `UpdateOptions`, the keys above are applied on top of it
            - `session`: A `ClientSession`

            Also takes the options accepted by `collection`.
    """
    options = coerce_update_options(opts)
    logger.debug("Updating one document in %s", namespace(db, coll))
    return collection(db, coll, **opts).update_one(
        encode(query), encode(update), **session_kwargs(opts), **options.to_kwargs()
    )


def update_many(
    db: Database, coll: "str | Collection", query: Mapping[str, Any], update: Update, **opts
) -> UpdateResult:
    """Applies an update to every document matching `query`. Takes the same options as `update_one`."""
    options = coerce_update_options(opts)
    logger.debug("Updating documents in %s", namespace(db, coll))
    return collection(db, coll, **opts).update_many(
        encode(query), encode(update), **session_kwargs(opts), **options.to_kwargs()
    )
