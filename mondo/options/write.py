from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Type, TypeVar

from tramp.optionals import Optional, Some

from mondo.options.base import DriverOptions, is_present, option, start_from

T = TypeVar("T", bound="ReplaceOptions")


@dataclass
class ReplaceOptions(DriverOptions):
    """Options for `replace_one`.

    Attributes:
        upsert: Insert the replacement when nothing matches
        bypass_document_validation: Skip the collection's document validation
        hint: Index name or list of (key, direction) pairs
        collation: A `pymongo.collation.Collation`
        comment: Attached to the command for profiling
    """
    upsert: Optional[bool] = option()
    bypass_document_validation: Optional[bool] = option()
    hint: Optional[Any] = option()
    collation: Optional[Any] = option()
    comment: Optional[Any] = option()


@dataclass
class UpdateOptions(ReplaceOptions):
    """Options for `update_one` and `update_many`. Adds `array_filters` to the replace options."""
    array_filters: Optional[list[Mapping[str, Any]]] = option()


def _coerce_write_options(opts: Mapping[str, Any], key: str, options_type: Type[T]) -> T:
    options = start_from(opts, key, options_type)
    if is_present(opts, "upsert"):
        options.upsert = Some(opts["upsert"])

    if is_present(opts, "bypass_document_validation"):
        options.bypass_document_validation = Some(opts["bypass_document_validation"])

    return options


def coerce_replace_options(opts: Mapping[str, Any]) -> ReplaceOptions:
    """Coerces an options bag into `ReplaceOptions`.

    Recognized keys: `upsert`, `bypass_document_validation`. Pre-built options can be passed as `replace_options`.
    """
    return _coerce_write_options(opts, "replace_options", ReplaceOptions)


def coerce_update_options(opts: Mapping[str, Any]) -> UpdateOptions:
    """Coerces an options bag into `UpdateOptions`.

    Recognized keys: `upsert`, `bypass_document_validation`. Pre-built options can be passed as `update_options`.
    """
    return _coerce_write_options(opts, "update_options", UpdateOptions)
