from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Type, TypeVar

from pymongo import ReturnDocument
from tramp.optionals import Optional, Some

from mondo.conversion import encode
from mondo.options.base import DriverOptions, index_spec, is_present, option, start_from

T = TypeVar("T", bound="FindAndModifyOptions")


@dataclass
class FindAndModifyOptions(DriverOptions):
    """Options shared by `find_one_and_update` and `find_one_and_replace`.

    Attributes:
        upsert: Insert a new document when nothing matches
        return_document: `ReturnDocument.BEFORE` (driver default) or `ReturnDocument.AFTER`
        sort: List of (key, direction) pairs choosing which document is modified when several match
        projection: Fields to return
        hint: Index name or list of (key, direction) pairs
        collation: A `pymongo.collation.Collation`
        comment: Attached to the command for profiling
    """
    upsert: Optional[bool] = option()
    return_document: Optional[bool] = option()
    sort: Optional[Any] = option()
    projection: Optional[Any] = option()
    hint: Optional[Any] = option()
    collation: Optional[Any] = option()
    comment: Optional[Any] = option()


@dataclass
class FindOneAndUpdateOptions(FindAndModifyOptions):
    array_filters: Optional[list[Mapping[str, Any]]] = option()


@dataclass
class FindOneAndReplaceOptions(FindAndModifyOptions):
    bypass_document_validation: Optional[bool] = option()


def _coerce_find_and_modify_options(opts: Mapping[str, Any], key: str, options_type: Type[T]) -> T:
    options = start_from(opts, key, options_type)
    if is_present(opts, "upsert"):
        options.upsert = Some(opts["upsert"])

    if opts.get("return_new"):
        options.return_document = Some(ReturnDocument.AFTER)

    if is_present(opts, "sort"):
        options.sort = Some(index_spec(opts["sort"]))

    if is_present(opts, "projection"):
        options.projection = Some(encode(opts["projection"]))

    return options


def coerce_find_one_and_update_options(opts: Mapping[str, Any]) -> FindOneAndUpdateOptions:
    """Coerces an options bag into `FindOneAndUpdateOptions`.

    Recognized keys: `upsert`, `return_new` (return the document as it is after the update), `sort`, `projection`.
    Pre-built options can be passed as `find_one_and_update_options`.
    """
    return _coerce_find_and_modify_options(opts, "find_one_and_update_options", FindOneAndUpdateOptions)


def coerce_find_one_and_replace_options(opts: Mapping[str, Any]) -> FindOneAndReplaceOptions:
    """Coerces an options bag into `FindOneAndReplaceOptions`.

    Takes the same keys as `coerce_find_one_and_update_options`. Pre-built options can be passed as
    `find_one_and_replace_options`.
    """
    return _coerce_find_and_modify_options(opts, "find_one_and_replace_options", FindOneAndReplaceOptions)
