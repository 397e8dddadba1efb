"""
Document collections stored as Postgres `jsonb` rows.

Each collection is a table with one JSON document per row:

    <name>(id bigserial, doc jsonb, created_at, updated_at)

Documents are pydantic models. The store-assigned row id travels on the model
as `id` and is never written into the JSON itself. Filters are matched with
jsonb containment (`doc @> filter`), so `{"name": "Tom"}` is an exact field
match and `{}` matches every document.
"""

from __future__ import annotations

import asyncio
import json
import re
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import Any, Generic, TypeVar

import asyncpg
from pydantic import BaseModel, ConfigDict, ValidationError

from . import db

_IDENTIFIER = re.compile(r"^[a-z_][a-z0-9_]*$")


class StoreError(RuntimeError):
    """
    Any failure reading or writing a collection.

    The message is meant for logs only; it is never sent to clients.
    """


class Document(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    id: int | None = None

    def to_json(self) -> str:
        return self.model_dump_json(exclude={"id"})


DocumentT = TypeVar("DocumentT", bound=Document)


@contextmanager
def _store_errors(action: str) -> Iterator[None]:
    try:
        yield
    except (asyncpg.PostgresError, asyncpg.InterfaceError, asyncio.TimeoutError, OSError, RuntimeError) as exc:
        raise StoreError(f"{action} failed: {exc}") from exc


def _filter_arg(filter: Mapping[str, Any] | None) -> str:
    # asyncpg does not encode dicts for jsonb parameters; we cast text in SQL.
    return json.dumps(dict(filter or {}), ensure_ascii=True)


def _decode_doc(raw: Any) -> dict[str, Any]:
    if isinstance(raw, (str, bytes)):
        return json.loads(raw)
    return dict(raw)


class Collection(Generic[DocumentT]):
    def __init__(self, name: str, model: type[DocumentT]) -> None:
        if not _IDENTIFIER.match(name):
            raise ValueError(f"Invalid collection name: {name!r}")
        self.name = name
        self.model = model

    def __repr__(self) -> str:
        return f"Collection({self.name!r}, {self.model.__name__})"

    def _to_model(self, row: dict[str, Any]) -> DocumentT:
        try:
            return self.model.model_validate({**_decode_doc(row["doc"]), "id": int(row["id"])})
        except (ValidationError, ValueError) as exc:
            raise StoreError(f"{self.name} row {row.get('id')} does not match {self.model.__name__}") from exc

    async def ensure(self) -> None:
        """
        Create the backing table and its containment index if missing.
        """
        with _store_errors(f"ensure {self.name}"):
            await db.execute(
                f"""
                CREATE TABLE IF NOT EXISTS {self.name} (
                  id bigserial PRIMARY KEY,
                  doc jsonb NOT NULL,
                  created_at timestamptz NOT NULL DEFAULT now(),
                  updated_at timestamptz NOT NULL DEFAULT now()
                )
                """
            )
            await db.execute(
                f"CREATE INDEX IF NOT EXISTS {self.name}_doc_idx ON {self.name} USING gin (doc jsonb_path_ops)"
            )

    async def find(self, filter: Mapping[str, Any] | None = None) -> list[DocumentT]:
        with _store_errors(f"find in {self.name}"):
            rows = await db.fetch_all(
                f"""
                SELECT id, doc
                FROM {self.name}
                WHERE doc @> $1::jsonb
                ORDER BY id ASC
                """,
                _filter_arg(filter),
            )
        return [self._to_model(row) for row in rows]

    async def find_one(self, filter: Mapping[str, Any] | None = None) -> DocumentT | None:
        with _store_errors(f"find_one in {self.name}"):
            row = await db.fetch_one(
                f"""
                SELECT id, doc
                FROM {self.name}
                WHERE doc @> $1::jsonb
                ORDER BY id ASC
                LIMIT 1
                """,
                _filter_arg(filter),
            )
        return self._to_model(row) if row is not None else None

    async def insert(self, data: Mapping[str, Any]) -> DocumentT:
        """
        Validate raw field values against the model and store them as a new document.
        """
        try:
            record = self.model.model_validate(dict(data))
        except ValidationError as exc:
            raise StoreError(f"{self.name} document failed validation: {exc.error_count()} error(s)") from exc
        record.id = None
        return await self.save(record)

    async def save(self, record: DocumentT) -> DocumentT:
        """
        Insert `record` if it has no id yet, otherwise replace the stored document.

        The assigned id is written back onto `record`.
        """
        if record.id is None:
            with _store_errors(f"insert into {self.name}"):
                row = await db.fetch_one(
                    f"""
                    INSERT INTO {self.name} (doc)
                    VALUES ($1::jsonb)
                    RETURNING id
                    """,
                    record.to_json(),
                )
        else:
            with _store_errors(f"update {self.name}"):
                row = await db.fetch_one(
                    f"""
                    UPDATE {self.name}
                    SET doc = $2::jsonb,
                        updated_at = now()
                    WHERE id = $1
                    RETURNING id
                    """,
                    record.id,
                    record.to_json(),
                )

        if row is None:
            raise StoreError(f"{self.name} document {record.id} no longer exists")
        record.id = int(row["id"])
        return record
