from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from tramp.optionals import Optional, Some

from mondo.options.base import DriverOptions, is_present, option, start_from


@dataclass
class CreateCollectionOptions(DriverOptions):
    """Options for creating a collection.

    Attributes:
        capped: Create a capped collection
        max_documents: Maximum number of documents in a capped collection
        max_size_bytes: Maximum size of a capped collection, in bytes
        validator: Validation rules applied to inserted and updated documents
        collation: Default collation for the collection
    """
    capped: Optional[bool] = option()
    max_documents: Optional[int] = option("max")
    max_size_bytes: Optional[int] = option("size")
    validator: Optional[Mapping[str, Any]] = option()
    collation: Optional[Any] = option()


@dataclass
class RenameCollectionOptions(DriverOptions):
    drop_target: Optional[bool] = option("dropTarget")
    comment: Optional[Any] = option()


def coerce_create_collection_options(opts: Mapping[str, Any]) -> CreateCollectionOptions:
    """Coerces an options bag into `CreateCollectionOptions`.

    Recognized keys: `capped`, `max_documents`, `max_size_bytes`. Pre-built options can be passed as
    `create_collection_options`.
    """
    options = start_from(opts, "create_collection_options", CreateCollectionOptions)
    if is_present(opts, "capped"):
        options.capped = Some(opts["capped"])

    if is_present(opts, "max_documents"):
        options.max_documents = Some(opts["max_documents"])

    if is_present(opts, "max_size_bytes"):
        options.max_size_bytes = Some(opts["max_size_bytes"])

    return options


def coerce_rename_collection_options(opts: Mapping[str, Any]) -> RenameCollectionOptions:
    """Coerces an options bag into `RenameCollectionOptions`.

    Recognized keys: `drop_target` (replace the target collection if it exists). Pre-built options can be passed as
    `rename_collection_options`.
    """
    options = start_from(opts, "rename_collection_options", RenameCollectionOptions)
    if is_present(opts, "drop_target"):
        options.drop_target = Some(opts["drop_target"])

    return options
