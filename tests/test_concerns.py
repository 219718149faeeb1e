import pytest
from pymongo.read_concern import ReadConcern
from pymongo.read_preferences import Nearest, Primary, PrimaryPreferred, Secondary, SecondaryPreferred
from pymongo.write_concern import WriteConcern

from mondo.exceptions import InvalidOptionError, MondoException
from mondo.keywords import Keyword
from mondo.options import coerce_read_concern, coerce_read_preference, coerce_write_concern


@pytest.mark.parametrize("name", ["available", "linearizable", "local", "majority", "snapshot"])
def test_read_concern_names(name):
    assert coerce_read_concern(name) == ReadConcern(name)
    assert coerce_read_concern(Keyword(name)) == ReadConcern(name)


def test_default_read_concern_leaves_the_level_to_the_server():
    assert coerce_read_concern("default") == ReadConcern()
    assert coerce_read_concern("default").level is None


def test_read_concern_instances_pass_through():
    read_concern = ReadConcern("majority")
    assert coerce_read_concern(read_concern) is read_concern


def test_no_read_concern():
    assert coerce_read_concern(None) is None


def test_unrecognized_read_concern():
    with pytest.raises(InvalidOptionError, match="bogus") as excinfo:
        coerce_read_concern("bogus")

    assert excinfo.value.value == "bogus"
    assert excinfo.value.option == "read concern"
    assert isinstance(excinfo.value, ValueError)
    assert isinstance(excinfo.value, MondoException)


def test_read_concern_that_cannot_be_named():
    with pytest.raises(InvalidOptionError):
        coerce_read_concern(42)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("primary", Primary()),
        ("primaryPreferred", PrimaryPreferred()),
        ("secondary", Secondary()),
        ("secondaryPreferred", SecondaryPreferred()),
        ("nearest", Nearest()),
    ],
)
def test_read_preference_names(name, expected):
    assert coerce_read_preference(name) == expected
    assert coerce_read_preference(Keyword(name)) == expected


def test_read_preference_instances_pass_through():
    read_preference = Secondary(tag_sets=[{"dc": "east"}])
    assert coerce_read_preference(read_preference) is read_preference


def test_no_read_preference():
    assert coerce_read_preference(None) is None


def test_unrecognized_read_preference():
    with pytest.raises(InvalidOptionError, match="bogus") as excinfo:
        coerce_read_preference("bogus")

    assert excinfo.value.option == "read preference"


def test_no_write_concern_options():
    assert coerce_write_concern({}) is None
    assert coerce_write_concern({"w": None, "journal": None, "limit": 1}) is None


def test_write_concern_from_w_alone():
    assert coerce_write_concern({"w": 2}) == WriteConcern(w=2)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("acknowledged", WriteConcern()),
        ("journaled", WriteConcern(j=True)),
        ("majority", WriteConcern(w="majority")),
        ("unacknowledged", WriteConcern(w=0)),
        ("w1", WriteConcern(w=1)),
        ("w2", WriteConcern(w=2)),
        ("w3", WriteConcern(w=3)),
    ],
)
def test_write_concern_names(name, expected):
    assert coerce_write_concern({"write_concern": name}) == expected


def test_write_concern_layers_timeout_onto_named_concern():
    write_concern = coerce_write_concern({"write_concern": "majority", "w_timeout_ms": 5000})

    assert write_concern.document == {"w": "majority", "wtimeout": 5000}


def test_write_concern_layers_w_before_timeout_and_journal():
    write_concern = coerce_write_concern({"write_concern": "w1", "w": 3, "w_timeout_ms": 100, "journal": True})

    assert write_concern.document == {"w": 3, "wtimeout": 100, "j": True}


def test_explicit_false_journal_is_applied():
    write_concern = coerce_write_concern({"write_concern": "journaled", "journal": False})

    assert write_concern.document == {"j": False}


def test_unrecognized_write_concern_name_is_acknowledged():
    assert coerce_write_concern({"write_concern": "bogus"}) == WriteConcern()


def test_write_concern_instances_are_the_base():
    base = WriteConcern(w="majority")

    write_concern = coerce_write_concern({"write_concern": base, "journal": True})

    assert write_concern.document == {"w": "majority", "j": True}
    assert base.document == {"w": "majority"}
