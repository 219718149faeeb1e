"""Conversion between Python values and the documents pymongo reads and writes.

`encode` turns host values into BSON ready values:

- `None` stays `None`
- Keywords and enum members become their name
- Fractions become floats. This is lossy, a fraction will never decode back into a fraction.
- Decimals become `Decimal128` so they're stored exactly (up to 34 significant digits)
- Mappings become new dicts with every key and value encoded. When two keys encode to the same name the entry iterated
  last wins.
- Lists, tuples, sets and other non-string sequences become lists of encoded values
- Everything else is returned unchanged, so values that are already native to the driver (`ObjectId`, `datetime`,
  `Decimal128`, etc.) pass straight through.

`decode` goes the other way: documents become dicts keyed by keywords (or plain strings when `keywordize` is false),
lists are decoded element by element, `Decimal128` becomes `Decimal`, and everything else is returned unchanged.
"""
from collections.abc import Iterable, Iterator, Mapping, Sequence, Set
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from typing import Any

from bson.decimal128 import Decimal128

from mondo.keywords import Keyword, name_of


def encode(value: Any) -> Any:
    match value:
        case None:
            return None

        case Keyword() | Enum():
            return name_of(value)

        case Fraction():
            return float(value)

        case Decimal():
            return Decimal128(value)

        case Mapping():
            document = {}
            for key, item in value.items():
                document[encode(key)] = encode(item)

            return document

        case str() | bytes() | bytearray():
            return value

        case Sequence() | Set():
            return [encode(item) for item in value]

        case _:
            return value


def encode_many(values: Iterable[Any]) -> Iterator[Any]:
    """Lazily encodes each value, the values are never collected into an intermediate list."""
    return (encode(value) for value in values)


def decode(value: Any, keywordize: bool = True) -> Any:
    match value:
        case None:
            return None

        case Decimal128():
            return value.to_decimal()

        case list():
            return [decode(item, keywordize) for item in value]

        case Mapping():
            if keywordize:
                return {Keyword(key): decode(item, True) for key, item in value.items()}

            return {key: decode(item, False) for key, item in value.items()}

        case _:
            return value


def decode_many(values: Iterable[Any], keywordize: bool = True) -> Iterator[Any]:
    """Lazily decodes each value as it's pulled from the source iterable (usually a driver cursor)."""
    return (decode(value, keywordize) for value in values)
