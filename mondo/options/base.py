from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace
from typing import Any, Type, TypeVar

from tramp.optionals import Nothing, Some

from mondo.conversion import encode

T = TypeVar("T", bound="DriverOptions")


def option(driver_name: str | None = None) -> Any:
    """Declares an options field that starts out unset.

    Args:
        driver_name: The keyword argument pymongo expects for the field, when it isn't the field's own name.
    """
    return field(default=Nothing(), metadata={"driver_name": driver_name})


@dataclass
class DriverOptions:
    """Base type for the structured options passed to a single pymongo operation.

    Every field is an `Optional` that defaults to `Nothing()`. Only fields that have been set (`Some(...)`) are handed
    to the driver, so pymongo's own defaults apply to everything else.
    """

    def to_kwargs(self) -> dict[str, Any]:
        kwargs = {}
        for options_field in fields(self):
            match getattr(self, options_field.name):
                case Some(value):
                    kwargs[options_field.metadata.get("driver_name") or options_field.name] = value

        return kwargs

    def is_unset(self, name: str) -> bool:
        return not getattr(self, name)


def start_from(opts: Mapping[str, Any], key: str, options_type: Type[T]) -> T:
    """Gets the starting point for a coercer: a copy of the pre-built options stored under `key`, or the defaults."""
    match opts.get(key):
        case None:
            return options_type()

        case options_type() as prebuilt:
            return replace(prebuilt)

        case prebuilt:
            raise TypeError(f"Expected {key} to be {options_type.__name__}, got {type(prebuilt).__name__}")


def is_present(opts: Mapping[str, Any], key: str) -> bool:
    """An option is present when it's in the bag with a value other than None. False and 0 are present."""
    return opts.get(key) is not None


def index_spec(value: Any) -> Any:
    """Encodes a sort, hint, or index key specification into the list of (key, direction) pairs pymongo expects.

    Strings (index names) are returned unchanged.
    """
    match encode(value):
        case Mapping() as document:
            return list(document.items())

        case encoded:
            return encoded
