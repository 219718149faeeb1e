from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from tramp.optionals import Optional

from mondo.options.base import DriverOptions, option, start_from


@dataclass
class DeleteOptions(DriverOptions):
    collation: Optional[Any] = option()
    hint: Optional[Any] = option()
    comment: Optional[Any] = option()
    let: Optional[Mapping[str, Any]] = option()


def coerce_delete_options(opts: Mapping[str, Any]) -> DeleteOptions:
    """Coerces an options bag into `DeleteOptions`. Only pre-built options (`delete_options`) are recognized."""
    return start_from(opts, "delete_options", DeleteOptions)
