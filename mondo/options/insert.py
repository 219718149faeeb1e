from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from tramp.optionals import Optional, Some

from mondo.options.base import DriverOptions, is_present, option, start_from


@dataclass
class InsertOneOptions(DriverOptions):
    bypass_document_validation: Optional[bool] = option()
    comment: Optional[Any] = option()


@dataclass
class InsertManyOptions(DriverOptions):
    bypass_document_validation: Optional[bool] = option()
    ordered: Optional[bool] = option()
    comment: Optional[Any] = option()


def coerce_insert_one_options(opts: Mapping[str, Any]) -> InsertOneOptions:
    """Coerces an options bag into `InsertOneOptions`.

    Recognized keys: `bypass_document_validation`. Pre-built options can be passed as `insert_one_options`.
    """
    options = start_from(opts, "insert_one_options", InsertOneOptions)
    if is_present(opts, "bypass_document_validation"):
        options.bypass_document_validation = Some(opts["bypass_document_validation"])

    return options


def coerce_insert_many_options(opts: Mapping[str, Any]) -> InsertManyOptions:
    """Coerces an options bag into `InsertManyOptions`.

    Recognized keys: `bypass_document_validation`, `ordered` (insert in the order given, the driver defaults to true).
    Pre-built options can be passed as `insert_many_options`.
    """
    options = start_from(opts, "insert_many_options", InsertManyOptions)
    if is_present(opts, "bypass_document_validation"):
        options.bypass_document_validation = Some(opts["bypass_document_validation"])

    if is_present(opts, "ordered"):
        options.ordered = Some(opts["ordered"])

    return options
