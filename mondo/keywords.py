"""Keyword symbols.

A `Keyword` is a lightweight interned identifier used as the symbolic-name variant of Mondo's host data model. Document
keys are decoded into keywords by default, and keywords (along with enum members) encode to their plain name.

Keywords subclass `str`. The string value of a keyword is its qualified form, so a decoded document can still be
indexed with ordinary strings:

    ```python
    doc = find_one(db, "users", {"name": "Ann"})
    doc["name"] == doc[keyword("name")]
    ```

A namespaced keyword such as `Keyword("name", "user")` has the string value `"user/name"` but encodes to its local
name, `"name"`.
"""
from enum import Enum
from typing import Any


class Keyword(str):
    __interned: "dict[tuple[str | None, str], Keyword]" = {}

    def __new__(cls, name: str, namespace: str | None = None):
        key = (namespace, name)
        if key in cls.__interned:
            return cls.__interned[key]

        qualified = f"{namespace}/{name}" if namespace else name
        instance = super().__new__(cls, qualified)
        instance._name = name
        instance._namespace = namespace
        return cls.__interned.setdefault(key, instance)

    @property
    def name(self) -> str:
        return self._name

    @property
    def namespace(self) -> str | None:
        return self._namespace

    def __getnewargs__(self):
        return self._name, self._namespace

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __repr__(self):
        return f":{str.__str__(self)}"


def keyword(value: "str | Enum | Keyword", namespace: str | None = None) -> Keyword:
    """Creates (or looks up) the keyword for a string or enum member. Keywords are returned as they are."""
    if isinstance(value, Keyword):
        return value

    return Keyword(name_of(value), namespace)


def name_of(value: Any) -> str:
    """Projects a symbolic value to its string name.

    Keywords and enum members project to their `name`, strings are returned unchanged.

    Raises:
        TypeError: If the value isn't a keyword, enum member or string
    """
    match value:
        case Keyword():
            return value.name

        case Enum():
            return value.name

        case str():
            return value

        case _:
            raise TypeError(f"Cannot take the name of {type(value).__name__} {value!r}")
