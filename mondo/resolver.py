import logging
from collections.abc import Mapping
from typing import Any

from pymongo.collection import Collection
from pymongo.database import Database

from mondo.keywords import name_of
from mondo.options.concerns import coerce_read_concern, coerce_read_preference, coerce_write_concern

logger = logging.getLogger(__name__)


def collection(db: Database, coll: "str | Collection", **opts) -> Collection:
    """Resolves a collection handle configured with the read/write policy options in the bag.

    Args:
        db: The database to look the collection up on
        coll: A collection name, or a collection handle which is used as is (no lookup). Accepting handles lets
            callers reuse handles they've configured in ways Mondo doesn't support directly.
        **opts: The options bag. Recognized keys:
            - `read_preference`: See `coerce_read_preference`
            - `read_concern`: See `coerce_read_concern`
            - `write_concern`, `w`, `w_timeout_ms`, `journal`: See `coerce_write_concern`

    Returns:
        A new handle with the overrides applied in that order. Handles are never mutated, each override derives a new
        one.

    Raises:
        InvalidOptionError: If the read preference or read concern isn't recognized
    """
    handle = db.get_collection(name_of(coll)) if isinstance(coll, str) else coll
    if (read_preference := coerce_read_preference(opts.get("read_preference"))) is not None:
        handle = handle.with_options(read_preference=read_preference)

    if (read_concern := coerce_read_concern(opts.get("read_concern"))) is not None:
        handle = handle.with_options(read_concern=read_concern)

    if (write_concern := coerce_write_concern(opts)) is not None:
        handle = handle.with_options(write_concern=write_concern)

    return handle


def session_kwargs(opts: Mapping[str, Any]) -> dict[str, Any]:
    """Gets the session keyword argument for a driver call, empty when the bag doesn't carry a session."""
    match opts.get("session"):
        case None:
            return {}

        case session:
            return {"session": session}


def namespace(db: Database, coll: "str | Collection") -> str:
    if isinstance(coll, str):
        return f"{db.name}.{name_of(coll)}"

    return getattr(coll, "full_name", repr(coll))
