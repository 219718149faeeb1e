"""End to end behaviour against an in-memory MongoDB."""
import pytest

from mondo import (
    count_documents,
    create_index,
    delete_many,
    find,
    find_one,
    find_one_and_update,
    insert_many,
    insert_one,
    list_indexes,
    replace_one,
    update_many,
)
from mondo.keywords import Keyword, keyword

mongomock = pytest.importorskip("mongomock")


@pytest.fixture
def db():
    return mongomock.MongoClient()["tests"]


def test_find_one_by_name(db):
    db["users"].insert_one({"_id": 1, "name": "Ann"})

    assert find_one(db, "users", {"name": "Ann"}) == {Keyword("_id"): 1, Keyword("name"): "Ann"}


def test_find_one_in_an_empty_collection(db):
    assert find_one(db, "users", {"name": "Ann"}) is None


def test_insert_many_then_count(db):
    insert_many(db, "logs", [{keyword("a"): 1}, {keyword("a"): 2}], ordered=False)

    assert count_documents(db, "logs", {}) == 2


def test_create_index_then_list_indexes(db):
    insert_one(db, "users", {"email": "ann@example.com"})

    create_index(db, "users", {"email": 1}, unique=True, name="email_idx")

    indexes = {index[Keyword("name")]: index for index in list_indexes(db, "users")}
    assert indexes["email_idx"][Keyword("unique")] is True


def test_find_with_cursor_options(db):
    insert_many(db, "events", [{keyword("n"): n} for n in range(5)])

    documents = find(db, "events", {"n": {"$gte": 1}}, sort={keyword("n"): -1}, skip=1, limit=2, projection={"_id": 0})

    assert list(documents) == [{Keyword("n"): 3}, {Keyword("n"): 2}]


def test_update_many_applies_the_update(db):
    insert_many(db, "users", [{"name": "Ann", "active": False}, {"name": "Bob", "active": False}])

    result = update_many(db, "users", {}, {"$set": {keyword("active"): True}})

    assert result.modified_count == 2
    assert count_documents(db, "users", {"active": True}) == 2


def test_replace_one_replaces_the_whole_document(db):
    insert_one(db, "users", {"_id": 1, "name": "Ann", "role": "admin"})

    result = replace_one(db, "users", {"_id": 1}, {"name": "Bea"})

    assert result.modified_count == 1
    assert find_one(db, "users", {"_id": 1}, keywordize=False) == {"_id": 1, "name": "Bea"}


def test_replace_one_upserts(db):
    result = replace_one(db, "users", {"_id": 7}, {"name": "Cy"}, upsert=True)

    assert result.upserted_id == 7


def test_find_one_and_update_returns_the_new_document(db):
    insert_one(db, "counters", {"_id": "visits", "count": 1})

    before = find_one_and_update(db, "counters", {"_id": "visits"}, {"$inc": {"count": 1}})
    after = find_one_and_update(db, "counters", {"_id": "visits"}, {"$inc": {"count": 1}}, return_new=True)

    assert before == {Keyword("_id"): "visits", Keyword("count"): 1}
    assert after == {Keyword("_id"): "visits", Keyword("count"): 3}


def test_delete_many(db):
    insert_many(db, "logs", [{"a": 1}, {"a": 2}, {"a": 2}])

    assert delete_many(db, "logs", {"a": 2}).deleted_count == 2
    assert count_documents(db, "logs") == 1
