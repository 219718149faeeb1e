"""
Fake pymongo handles shared by the unit tests.

The fakes record every call made on them so tests can check exactly what Mondo hands to the driver.
"""
from dataclasses import dataclass, field
from typing import Any, ClassVar

import pytest


@dataclass
class Call:
    method: str
    args: tuple
    kwargs: dict[str, Any]


class FakeCursor:
    def __init__(self, documents, calls):
        self.documents = list(documents)
        self.calls = calls
        self.pulled = 0

    def limit(self, limit):
        self.calls.append(Call("limit", (limit,), {}))
        return self

    def skip(self, skip):
        self.calls.append(Call("skip", (skip,), {}))
        return self

    def sort(self, key_or_list):
        self.calls.append(Call("sort", (key_or_list,), {}))
        return self

    def __iter__(self):
        for document in self.documents:
            self.pulled += 1
            yield document


class FakeCollection:
    """Records calls the way a pymongo `Collection` would receive them."""

    def __init__(self, name, database, options=None, documents=None, results=None, calls=None):
        self.name = name
        self.database = database
        self.full_name = f"{database.name}.{name}"
        self.options = options or {}
        self.documents = documents if documents is not None else []
        self.results = results if results is not None else {}
        self.calls = calls if calls is not None else []
        self.cursor = None

    def _record(self, method, *args, **kwargs):
        self.calls.append(Call(method, args, kwargs))
        result = self.results.get(method)
        if isinstance(result, Exception):
            raise result

        return result

    def calls_to(self, method):
        return [call for call in self.calls if call.method == method]

    def with_options(self, **options):
        self.calls.append(Call("with_options", (), options))
        return FakeCollection(
            self.name,
            self.database,
            options={**self.options, **options},
            documents=self.documents,
            results=self.results,
            calls=self.calls,
        )

    def find(self, query, **kwargs):
        self._record("find", query, **kwargs)
        self.cursor = FakeCursor(self.documents, self.calls)
        return self.cursor

    def aggregate(self, pipeline, **kwargs):
        self._record("aggregate", pipeline, **kwargs)
        self.cursor = FakeCursor(self.documents, self.calls)
        return self.cursor

    def count_documents(self, query, **kwargs):
        self._record("count_documents", query, **kwargs)
        return len(self.documents)

    def insert_one(self, document, **kwargs):
        return self._record("insert_one", document, **kwargs)

    def insert_many(self, documents, **kwargs):
        return self._record("insert_many", list(documents), **kwargs)

    def delete_one(self, query, **kwargs):
        return self._record("delete_one", query, **kwargs)

    def delete_many(self, query, **kwargs):
        return self._record("delete_many", query, **kwargs)

    def find_one_and_update(self, query, update, **kwargs):
        return self._record("find_one_and_update", query, update, **kwargs)

    def find_one_and_replace(self, query, document, **kwargs):
        return self._record("find_one_and_replace", query, document, **kwargs)

    def replace_one(self, query, document, **kwargs):
        return self._record("replace_one", query, document, **kwargs)

    def update_one(self, query, update, **kwargs):
        return self._record("update_one", query, update, **kwargs)

    def update_many(self, query, update, **kwargs):
        return self._record("update_many", query, update, **kwargs)

    def rename(self, new_name, **kwargs):
        return self._record("rename", new_name, **kwargs)

    def drop(self, **kwargs):
        return self._record("drop", **kwargs)

    def create_index(self, keys, **kwargs):
        return self._record("create_index", keys, **kwargs)

    def create_indexes(self, models, **kwargs):
        return self._record("create_indexes", models, **kwargs)

    def list_indexes(self, **kwargs):
        self._record("list_indexes", **kwargs)
        return iter(self.results.get("indexes", []))


class FakeDatabase:
    def __init__(self, name="tests"):
        self.name = name
        self.collections: dict[str, FakeCollection] = {}
        self.calls: list[Call] = []

    def get_collection(self, name):
        self.calls.append(Call("get_collection", (name,), {}))
        return self.collections.setdefault(name, FakeCollection(name, self))

    def create_collection(self, name, **kwargs):
        self.calls.append(Call("create_collection", (name,), kwargs))
        return self.get_collection(name)


class TransientTransactionError(Exception):
    pass


@dataclass
class FakeSession:
    """Runs transaction bodies the way `ClientSession.with_transaction` does, rerunning the body after a transient error."""
    transient_error: ClassVar[type[Exception]] = TransientTransactionError

    transaction_kwargs: list[dict[str, Any]] = field(default_factory=list)
    transient_failures: int = 0

    def with_transaction(self, callback, **kwargs):
        self.transaction_kwargs.append(kwargs)
        while True:
            try:
                return callback(self)
            except TransientTransactionError:
                if self.transient_failures <= 0:
                    raise

                self.transient_failures -= 1


@pytest.fixture
def db() -> FakeDatabase:
    return FakeDatabase()


@pytest.fixture
def users(db) -> FakeCollection:
    return db.get_collection("users")


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()
