"""Structured options for pymongo operations and the coercers that build them from keyword option bags.

Every coercer follows the same pattern: start from a pre-built options object passed in the bag under the coercer's
escape-hatch key (or the defaults when there isn't one), then apply each recognized option that is present in the bag.
Options that aren't present never overwrite values on the pre-built object, and unrecognized keys are ignored.
"""
from mondo.options.base import DriverOptions, index_spec
from mondo.options.collection import (
    CreateCollectionOptions,
    RenameCollectionOptions,
    coerce_create_collection_options,
    coerce_rename_collection_options,
)
from mondo.options.concerns import (
    READ_CONCERNS,
    READ_PREFERENCES,
    WRITE_CONCERNS,
    coerce_read_concern,
    coerce_read_preference,
    coerce_write_concern,
)
from mondo.options.count import CountOptions, coerce_count_options
from mondo.options.delete import DeleteOptions, coerce_delete_options
from mondo.options.find_and_modify import (
    FindOneAndReplaceOptions,
    FindOneAndUpdateOptions,
    coerce_find_one_and_replace_options,
    coerce_find_one_and_update_options,
)
from mondo.options.index import IndexOptions, coerce_index_options
from mondo.options.insert import (
    InsertManyOptions,
    InsertOneOptions,
    coerce_insert_many_options,
    coerce_insert_one_options,
)
from mondo.options.write import ReplaceOptions, UpdateOptions, coerce_replace_options, coerce_update_options

__all__ = [
    "CountOptions",
    "CreateCollectionOptions",
    "DeleteOptions",
    "DriverOptions",
    "FindOneAndReplaceOptions",
    "FindOneAndUpdateOptions",
    "IndexOptions",
    "InsertManyOptions",
    "InsertOneOptions",
    "READ_CONCERNS",
    "READ_PREFERENCES",
    "RenameCollectionOptions",
    "ReplaceOptions",
    "UpdateOptions",
    "WRITE_CONCERNS",
    "coerce_count_options",
    "coerce_create_collection_options",
    "coerce_delete_options",
    "coerce_find_one_and_replace_options",
    "coerce_find_one_and_update_options",
    "coerce_index_options",
    "coerce_insert_many_options",
    "coerce_insert_one_options",
    "coerce_read_concern",
    "coerce_read_preference",
    "coerce_rename_collection_options",
    "coerce_replace_options",
    "coerce_update_options",
    "coerce_write_concern",
    "index_spec",
]
