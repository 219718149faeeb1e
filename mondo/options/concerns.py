"""Coercion of the read/write policy options every operation accepts.

Read concerns and read preferences are looked up by name in closed tables and unrecognized names raise an
`InvalidOptionError`. Write concerns are built from a base concern with the `w`, `w_timeout_ms` and `journal` options
layered on top.
"""
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pymongo.read_concern import ReadConcern
from pymongo.read_preferences import Nearest, Primary, PrimaryPreferred, Secondary, SecondaryPreferred
from pymongo.write_concern import WriteConcern

from mondo.exceptions import InvalidOptionError
from mondo.keywords import name_of
from mondo.options.base import is_present

ReadPreference = Primary | PrimaryPreferred | Secondary | SecondaryPreferred | Nearest

READ_CONCERNS: Mapping[str, ReadConcern] = MappingProxyType(
    {
        "available": ReadConcern("available"),
        "default": ReadConcern(),
        "linearizable": ReadConcern("linearizable"),
        "local": ReadConcern("local"),
        "majority": ReadConcern("majority"),
        "snapshot": ReadConcern("snapshot"),
    }
)

READ_PREFERENCES: Mapping[str, ReadPreference] = MappingProxyType(
    {
        "primary": Primary(),
        "primaryPreferred": PrimaryPreferred(),
        "secondary": Secondary(),
        "secondaryPreferred": SecondaryPreferred(),
        "nearest": Nearest(),
    }
)

WRITE_CONCERNS: Mapping[str, WriteConcern] = MappingProxyType(
    {
        "acknowledged": WriteConcern(),
        "journaled": WriteConcern(j=True),
        "majority": WriteConcern(w="majority"),
        "unacknowledged": WriteConcern(w=0),
        "w1": WriteConcern(w=1),
        "w2": WriteConcern(w=2),
        "w3": WriteConcern(w=3),
    }
)

WRITE_CONCERN_KEYS = ("write_concern", "w", "w_timeout_ms", "journal")


def _lookup(table: Mapping[str, Any], option: str, value: Any) -> Any:
    try:
        name = name_of(value)
    except TypeError as error:
        raise InvalidOptionError(f"No match for {option} of {value!r}", option=option, value=value) from error

    if name not in table:
        raise InvalidOptionError(f"No match for {option} of {name}", option=option, value=value)

    return table[name]


def coerce_read_concern(read_concern: Any) -> ReadConcern | None:
    """Coerces a read concern name into a `ReadConcern`.

    Accepts a `ReadConcern` or one of: available, default, linearizable, local, majority, snapshot. `None` means no
    read concern override.

    Raises:
        InvalidOptionError: If the name isn't one of the above
    """
    match read_concern:
        case None:
            return None

        case ReadConcern():
            return read_concern

        case _:
            return _lookup(READ_CONCERNS, "read concern", read_concern)


def coerce_read_preference(read_preference: Any) -> ReadPreference | None:
    """Coerces a read preference name into a pymongo read preference.

    Accepts a read preference or one of: primary, primaryPreferred, secondary, secondaryPreferred, nearest. `None`
    means no read preference override.

    Raises:
        InvalidOptionError: If the name isn't one of the above
    """
    match read_preference:
        case None:
            return None

        case Primary() | PrimaryPreferred() | Secondary() | SecondaryPreferred() | Nearest():
            return read_preference

        case _:
            return _lookup(READ_PREFERENCES, "read preference", read_preference)


def coerce_write_concern(opts: Mapping[str, Any]) -> WriteConcern | None:
    """Coerces the write concern options in a bag into a `WriteConcern`.

    Returns `None` unless at least one of these is present:

    - `write_concern`: A `WriteConcern` or one of: acknowledged, journaled, majority, unacknowledged, w1, w2, w3.
      Unrecognized names fall back to acknowledged.
    - `w`: Number of replicas that must acknowledge the write (or "majority")
    - `w_timeout_ms`: How long to wait for replicas to acknowledge, in milliseconds (0 waits indefinitely)
    - `journal`: Wait until the write has been committed to the journal

    `w`, `w_timeout_ms` and `journal` are applied in that order on top of the base concern.
    """
    if not any(is_present(opts, key) for key in WRITE_CONCERN_KEYS):
        return None

    match opts.get("write_concern"):
        case WriteConcern() as write_concern:
            base = write_concern

        case None:
            base = WRITE_CONCERNS["acknowledged"]

        case name:
            base = WRITE_CONCERNS.get(name_of(name), WRITE_CONCERNS["acknowledged"])

    document = base.document
    if is_present(opts, "w"):
        document["w"] = opts["w"]

    if is_present(opts, "w_timeout_ms"):
        document["wtimeout"] = opts["w_timeout_ms"]

    if is_present(opts, "journal"):
        document["j"] = opts["journal"]

    return WriteConcern(**document)
