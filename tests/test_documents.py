# =============================================================================
# tests/test_documents.py - Document Collection Tests
# =============================================================================
# Exercises core.documents.Collection against stubbed core.db helpers and
# checks the SQL it sends and how results and failures come back.
# =============================================================================

import asyncio
import json

import pytest

from cats.schemas import Cat
from core import db
from core.documents import Collection, StoreError


class StubDb:
    """Records calls to core.db helpers and replays canned rows."""

    def __init__(self):
        self.calls = []
        self.one = None
        self.all = []
        self.error = None

    async def fetch_one(self, sql, *args):
        self.calls.append((sql, args))
        if self.error:
            raise self.error
        return self.one

    async def fetch_all(self, sql, *args):
        self.calls.append((sql, args))
        if self.error:
            raise self.error
        return self.all

    async def execute(self, sql, *args):
        self.calls.append((sql, args))
        if self.error:
            raise self.error


@pytest.fixture
def stub_db(monkeypatch):
    stub = StubDb()
    monkeypatch.setattr(db, "fetch_one", stub.fetch_one)
    monkeypatch.setattr(db, "fetch_all", stub.fetch_all)
    monkeypatch.setattr(db, "execute", stub.execute)
    return stub


@pytest.fixture
def cats():
    return Collection("cats", Cat)


class TestCollectionName:
    def test_rejects_non_identifiers(self):
        with pytest.raises(ValueError):
            Collection("cats; DROP TABLE dogs", Cat)


class TestFind:
    def test_find_uses_containment_filter(self, stub_db, cats):
        stub_db.all = [
            {"id": 1, "doc": '{"name": "Anne Bonny", "beds_owned": 3}'},
            {"id": 2, "doc": {"name": "Mary Read", "beds_owned": 1}},
        ]

        result = asyncio.run(cats.find({}))

        sql, args = stub_db.calls[0]
        assert "FROM cats" in sql
        assert "doc @> $1::jsonb" in sql
        assert json.loads(args[0]) == {}
        assert [(c.id, c.name, c.beds_owned) for c in result] == [
            (1, "Anne Bonny", 3),
            (2, "Mary Read", 1),
        ]

    def test_find_one_passes_filter_and_handles_no_match(self, stub_db, cats):
        stub_db.one = None

        result = asyncio.run(cats.find_one({"name": "Anne Bonny"}))

        sql, args = stub_db.calls[0]
        assert "LIMIT 1" in sql
        assert json.loads(args[0]) == {"name": "Anne Bonny"}
        assert result is None

    def test_stored_document_that_no_longer_validates(self, stub_db, cats):
        stub_db.one = {"id": 7, "doc": '{"name": "Anne Bonny", "beds_owned": -1}'}

        with pytest.raises(StoreError):
            asyncio.run(cats.find_one({"name": "Anne Bonny"}))


class TestSave:
    def test_insert_assigns_id(self, stub_db, cats):
        stub_db.one = {"id": 12}

        cat = asyncio.run(cats.insert({"name": "Anne Bonny", "beds_owned": "3"}))

        sql, args = stub_db.calls[0]
        assert sql.strip().startswith("INSERT INTO cats")
        assert json.loads(args[0]) == {"name": "Anne Bonny", "beds_owned": 3}
        assert cat.id == 12

    def test_insert_rejects_invalid_document_without_writing(self, stub_db, cats):
        with pytest.raises(StoreError):
            asyncio.run(cats.insert({"name": "Anne Bonny", "beds_owned": "lots"}))

        assert stub_db.calls == []

    def test_save_existing_record_updates_by_id(self, stub_db, cats):
        stub_db.one = {"id": 5}
        cat = Cat(id=5, name="Anne Bonny", beds_owned=4)

        asyncio.run(cats.save(cat))

        sql, args = stub_db.calls[0]
        assert sql.strip().startswith("UPDATE cats")
        assert args[0] == 5
        assert json.loads(args[1]) == {"name": "Anne Bonny", "beds_owned": 4}

    def test_save_of_vanished_record_fails(self, stub_db, cats):
        stub_db.one = None

        with pytest.raises(StoreError):
            asyncio.run(cats.save(Cat(id=5, name="Anne Bonny", beds_owned=4)))


class TestFailures:
    def test_driver_errors_become_store_errors(self, stub_db, cats):
        stub_db.error = ConnectionRefusedError("connection refused")

        with pytest.raises(StoreError) as excinfo:
            asyncio.run(cats.find({}))

        assert isinstance(excinfo.value.__cause__, ConnectionRefusedError)

    def test_uninitialized_pool_is_a_store_error(self, cats, monkeypatch):
        monkeypatch.setattr(db, "_pool", None)

        with pytest.raises(StoreError):
            asyncio.run(cats.find({}))


class TestEnsure:
    def test_creates_table_and_index(self, stub_db, cats):
        asyncio.run(cats.ensure())

        statements = [sql for sql, _ in stub_db.calls]
        assert "CREATE TABLE IF NOT EXISTS cats" in statements[0]
        assert "cats_doc_idx" in statements[1]


class TestDatabaseUrl:
    def test_sslmode_is_stripped(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@host/db?sslmode=require&application_name=pets")

        assert db.database_url() == "postgresql://u:p@host/db?application_name=pets"

    def test_missing_url(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "")

        with pytest.raises(RuntimeError):
            db.database_url()
