import copy
import pickle
from enum import Enum

import pytest

from mondo.keywords import Keyword, keyword, name_of


class Color(Enum):
    RED = "r"


def test_keywords_are_interned():
    assert Keyword("name") is Keyword("name")
    assert keyword("name") is Keyword("name")
    assert Keyword("name", "user") is Keyword("name", "user")
    assert Keyword("name", "user") is not Keyword("name")


def test_keywords_compare_as_their_qualified_string():
    assert Keyword("name") == "name"
    assert Keyword("name", "user") == "user/name"
    assert {Keyword("name"): 1}["name"] == 1
    assert {"name": 1}[Keyword("name")] == 1


def test_keyword_name_and_namespace():
    kw = Keyword("name", "user")
    assert kw.name == "name"
    assert kw.namespace == "user"
    assert Keyword("name").namespace is None


def test_keyword_repr():
    assert repr(Keyword("name")) == ":name"
    assert repr(Keyword("name", "user")) == ":user/name"


def test_keyword_from_enum_member():
    assert keyword(Color.RED) is Keyword("RED")


def test_keyword_passes_keywords_through():
    kw = Keyword("name", "user")
    assert keyword(kw) is kw


def test_name_of():
    assert name_of(Keyword("name", "user")) == "name"
    assert name_of(Color.RED) == "RED"
    assert name_of("name") == "name"


def test_name_of_rejects_values_without_a_name():
    with pytest.raises(TypeError):
        name_of(5)


def test_keywords_survive_pickling_and_copying():
    kw = Keyword("name", "user")
    assert pickle.loads(pickle.dumps(kw)) is kw
    assert copy.copy(kw) is kw
    assert copy.deepcopy({kw: [kw]}) == {kw: [kw]}
