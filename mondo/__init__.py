"""Mondo, a convenience layer over pymongo.

Mondo lets you talk to MongoDB using plain Python data. Queries, updates, and documents are nested mappings and
sequences that can use keywords, enums, fractions, and decimals. Results come back as dicts keyed by keywords (or
plain strings). Options are flat keyword arguments that are coerced into the structured options each pymongo
operation expects.

-   **Conversion**: `mondo.conversion.encode` and `mondo.conversion.decode` translate between Python values and
    documents. Values that are already native to the driver pass through unchanged.
-   **Option Coercion**: Each operation family has an options type and a coercer that layers recognized keyword
    options on top of the defaults (or on top of a pre-built options object).
-   **Collection Resolution**: Collections can be given by name or handle, and read preference, read concern, and
    write concern overrides are applied per call without touching shared handles.
-   **Operations**: CRUD and admin functions that share one calling convention:
    `operation(db, collection, [query], [document or update], **options)`.

Example:
    ```python
    from pymongo import MongoClient
    from mondo import find_one, insert_many, count_documents, keyword

    db = MongoClient()["example"]
    insert_many(db, "logs", [{keyword("a"): 1}, {keyword("a"): 2}], ordered=False)
    count_documents(db, "logs", {})  # 2
    find_one(db, "logs", {"a": 1}, projection={"_id": 0})  # {:a: 1}
    ```

Note:
This `__init__.py` file uses a custom `__getattr__` to load submodules and symbols lazily, so importing `mondo` doesn't
import pymongo until an operation is actually used.
"""
import importlib
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mondo.add import insert_many, insert_one
    from mondo.conversion import decode, encode
    from mondo.delete import delete_many, delete_one
    from mondo.exceptions import InvalidOptionError, MondoException
    from mondo.fetch import aggregate, count_documents, find, find_one
    from mondo.keywords import Keyword, keyword
    from mondo.resolver import collection
    from mondo.schema import create, create_index, create_indexes, drop, list_indexes, rename
    from mondo.transaction import with_transaction
    from mondo.update import find_one_and_replace, find_one_and_update, replace_one, update_many, update_one

__lookup = {
    "Keyword": "mondo.keywords",
    "keyword": "mondo.keywords",
    "encode": "mondo.conversion",
    "decode": "mondo.conversion",
    "MondoException": "mondo.exceptions",
    "InvalidOptionError": "mondo.exceptions",
    "collection": "mondo.resolver",
    "aggregate": "mondo.fetch",
    "count_documents": "mondo.fetch",
    "find": "mondo.fetch",
    "find_one": "mondo.fetch",
    "delete_one": "mondo.delete",
    "delete_many": "mondo.delete",
    "insert_one": "mondo.add",
    "insert_many": "mondo.add",
    "find_one_and_update": "mondo.update",
    "find_one_and_replace": "mondo.update",
    "replace_one": "mondo.update",
    "update_one": "mondo.update",
    "update_many": "mondo.update",
    "create": "mondo.schema",
    "rename": "mondo.schema",
    "drop": "mondo.schema",
    "create_index": "mondo.schema",
    "create_indexes": "mondo.schema",
    "list_indexes": "mondo.schema",
    "with_transaction": "mondo.transaction",
}

__all__ = list(__lookup.keys())

__modules = set()

for _path in Path(__file__).parent.iterdir():
    if _path.name.startswith("_"):
        continue

    if not _path.is_dir() and _path.suffix != ".py":
        continue

    __modules.add(_path.stem)


def __getattr__(name):
    """Lazily loads the symbols in `__lookup` and the submodules of the `mondo` package.

    Raises:
        ImportError: If a symbol listed in `__lookup` cannot be imported from its module.
        AttributeError: If the name isn't a known symbol or submodule.
    """
    if name in __lookup:
        try:
            module = importlib.import_module(__lookup[name])
        except Exception as e:
            raise ImportError(f"Failed to import {name} from {__lookup[name]}: {e}") from e

        return getattr(module, name)

    if name in __modules:
        return importlib.import_module(f"mondo.{name}")

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
