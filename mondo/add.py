import logging
from collections.abc import Iterable, Mapping
from typing import Any

from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.results import InsertManyResult, InsertOneResult

from mondo.conversion import encode, encode_many
from mondo.options.insert import coerce_insert_many_options, coerce_insert_one_options
from mondo.resolver import collection, namespace, session_kwargs

logger = logging.getLogger(__name__)


def insert_one(db: Database, coll: "str | Collection", document: Mapping[str, Any], **opts) -> InsertOneResult:
    """Inserts a single document. The driver generates an `_id` when the document doesn't have one.

    Args:
        db: The database
        coll: A collection name or handle
        document: The document to insert
        **opts: The options bag. Recognized keys:
            - `bypass_document_validation`: Skip the collection's document validation
            - `insert_one_options`: A pre-built `InsertOneOptions`, the keys above are applied on top of it
            - `session`: A `ClientSession`

            Also takes the options accepted by `collection`.
    """
    options = coerce_insert_one_options(opts)
    logger.debug("Inserting one document into %s", namespace(db, coll))
    return collection(db, coll, **opts).insert_one(encode(document), **session_kwargs(opts), **options.to_kwargs())


def insert_many(
    db: Database, coll: "str | Collection", documents: Iterable[Mapping[str, Any]], **opts
) -> InsertManyResult:
    """Inserts multiple documents. The driver generates an `_id` for each document that doesn't have one.

    Args:
        db: The database
        coll: A collection name or handle
        documents: The documents to insert, they're encoded lazily as the driver consumes them
        **opts: The options bag. Recognized keys:
            - `bypass_document_validation`: Skip the collection's document validation
            - `ordered`: Insert the documents in the order given, stopping at the first error (driver default: True)
            - `insert_many_options`: A pre-built `InsertManyOptions`, the keys above are applied on top of it
            - `session`: A `ClientSession`

            Also takes the options accepted by `collection`.
    """
    options = coerce_insert_many_options(opts)
    logger.debug("Inserting documents into %s", namespace(db, coll))
    return collection(db, coll, **opts).insert_many(
        encode_many(documents), **session_kwargs(opts), **options.to_kwargs()
    )
