import logging
from collections.abc import Mapping
from typing import Any

from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.results import DeleteResult

from mondo.conversion import encode
from mondo.options.delete import coerce_delete_options
from mondo.resolver import collection, namespace, session_kwargs

logger = logging.getLogger(__name__)


def delete_one(db: Database, coll: "str | Collection", query: Mapping[str, Any], **opts) -> DeleteResult:
    """Deletes the first document matching `query`.

    Recognized options: `delete_options` (a pre-built `DeleteOptions`) and `session`, along with the options accepted
    by `collection`.
    """
    options = coerce_delete_options(opts)
    logger.debug("Deleting one document from %s", namespace(db, coll))
    return collection(db, coll, **opts).delete_one(encode(query), **session_kwargs(opts), **options.to_kwargs())


def delete_many(db: Database, coll: "str | Collection", query: Mapping[str, Any], **opts) -> DeleteResult:
    """Deletes every document matching `query`. Takes the same options as `delete_one`."""
    options = coerce_delete_options(opts)
    logger.debug("Deleting documents from %s", namespace(db, coll))
    return collection(db, coll, **opts).delete_many(encode(query), **session_kwargs(opts), **options.to_kwargs())
