import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from pymongo import IndexModel
from pymongo.collection import Collection
from pymongo.command_cursor import CommandCursor
from pymongo.database import Database

from mondo.conversion import decode_many
from mondo.keywords import name_of
from mondo.options.base import index_spec
from mondo.options.collection import coerce_create_collection_options, coerce_rename_collection_options
from mondo.options.index import coerce_index_options
from mondo.resolver import collection, namespace, session_kwargs

logger = logging.getLogger(__name__)


def create(db: Database, coll: str, **opts) -> Collection:
    """Creates a collection.

    Args:
        db: The database
        coll: The collection name
        **opts: The options bag. Recognized keys:
            - `capped`: Create a capped collection
            - `max_documents`: Maximum number of documents in a capped collection
            - `max_size_bytes`: Maximum size of a capped collection, in bytes
            - `create_collection_options`: A pre-built `CreateCollectionOptions`, the keys above are applied on top
              of it
            - `session`: A `ClientSession`

    Returns:
        The new collection's handle
    """
    options = coerce_create_collection_options(opts)
    logger.debug("Creating collection %s", namespace(db, coll))
    return db.create_collection(name_of(coll), **session_kwargs(opts), **options.to_kwargs())


def rename(db: Database, coll: "str | Collection", new_name: str, **opts) -> Any:
    """Renames a collection, keeping it in the same database.

    Args:
        db: The database
        coll: A collection name or handle
        new_name: The collection's new name
        **opts: The options bag. Recognized keys:
            - `drop_target`: Drop the target collection if it already exists, default: False
            - `rename_collection_options`: A pre-built `RenameCollectionOptions`, the keys above are applied on top
              of it
            - `session`: A `ClientSession`

            Also takes the options accepted by `collection`.
    """
    options = coerce_rename_collection_options(opts)
    logger.debug("Renaming %s to %s", namespace(db, coll), name_of(new_name))
    return collection(db, coll, **opts).rename(name_of(new_name), **session_kwargs(opts), **options.to_kwargs())


def drop(db: Database, coll: "str | Collection", **opts) -> None:
    """Drops a collection from the database."""
    logger.debug("Dropping %s", namespace(db, coll))
    collection(db, coll, **opts).drop(**session_kwargs(opts))


def create_index(db: Database, coll: "str | Collection", keys: Any, **opts) -> str:
    """Creates an index.

    Args:
        db: The database
        coll: A collection name or handle
        keys: The index key specification, e.g. {"a": 1}
        **opts: The options bag. Recognized keys:
            - `name`: The index name
            - `sparse`: Only index documents that have the indexed fields
            - `unique`: Reject documents that duplicate an existing key
            - `index_options`: A pre-built `IndexOptions`, the keys above are applied on top of it
            - `session`: A `ClientSession`

            Also takes the options accepted by `collection`.

    Returns:
        The name of the index
    """
    options = coerce_index_options(opts)
    logger.debug("Creating index on %s", namespace(db, coll))
    return collection(db, coll, **opts).create_index(
        index_spec(keys), **session_kwargs(opts), **options.to_kwargs()
    )


def create_indexes(db: Database, coll: "str | Collection", indexes: Iterable[Mapping[str, Any]], **opts) -> list[str]:
    """Creates many indexes.

    Args:
        db: The database
        coll: A collection name or handle
        indexes: Mappings describing each index. `keys` (the index key specification) is required, each mapping may
            also have any of the options `create_index` recognizes (`name`, `sparse`, `unique`, `index_options`).
        **opts: The options bag. Takes `session` and the options accepted by `collection`.

    Returns:
        The names of the indexes
    """
    models = [IndexModel(index_spec(index["keys"]), **coerce_index_options(index).to_kwargs()) for index in indexes]
    logger.debug("Creating %d indexes on %s", len(models), namespace(db, coll))
    return collection(db, coll, **opts).create_indexes(models, **session_kwargs(opts))


def list_indexes(db: Database, coll: "str | Collection", **opts) -> "Iterator[dict] | CommandCursor":
    """Lists the indexes on a collection.

    Recognized options: `keywordize` (default: True), `raw` (return the driver's cursor, default: False) and
    `session`, along with the options accepted by `collection`.
    """
    cursor = collection(db, coll, **opts).list_indexes(**session_kwargs(opts))
    if opts.get("raw", False):
        return cursor

    return decode_many(cursor, opts.get("keywordize", True))
