"""SQL collection backend built on SQLAlchemy Core.

Each collection maps onto one table whose columns are derived from the
record model's fields.  Tables are created on first use; queries are the
one-liners you would expect (``select(t).where(t.c.user_id == 3)``).
"""

from __future__ import annotations

import datetime as dt
import logging
import types
import typing
from collections.abc import Iterable, Mapping
from typing import Any, Literal

from pydantic import BaseModel, EmailStr
from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    Date,
    DateTime,
    Float,
    Integer,
    MetaData,
    Table,
    Text,
    create_engine,
    delete,
    func,
    insert,
    inspect,
    select,
    update,
)
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import StaticPool
from sqlalchemy.types import TypeEngine

from protokit.backend.core.storage.base import Collection, R, StorageBackend, as_values

logger = logging.getLogger(__name__)


def _unwrap_optional(annotation: Any) -> tuple[Any, bool]:
    """Strip ``None`` from a union annotation; report whether it was there."""
    origin = typing.get_origin(annotation)
    if origin is typing.Union or origin is types.UnionType:
        args = [a for a in typing.get_args(annotation) if a is not type(None)]
        nullable = len(args) < len(typing.get_args(annotation))
        if len(args) == 1:
            return args[0], nullable
        return args, nullable
    return annotation, False


def column_type(annotation: Any) -> TypeEngine | type[TypeEngine]:
    """Map a record field annotation onto a SQLAlchemy column type."""
    origin = typing.get_origin(annotation) or annotation
    if origin is Literal:
        return Text
    if origin in (list, dict, tuple, set) or isinstance(annotation, list):
        return JSON
    # bool is a subclass of int, check it first
    if origin is bool:
        return Boolean
    if origin is int:
        return Integer
    if origin is float:
        return Float
    if origin is dt.datetime:
        return DateTime
    if origin is dt.date:
        return Date
    if origin is str or origin is EmailStr:
        return Text
    return JSON


def build_table(name: str, model: type[BaseModel], metadata: MetaData) -> Table:
    """Derive a table definition from a Pydantic record model."""
    columns = [Column("id", Integer, primary_key=True)]
    for field_name, field in model.model_fields.items():
        if field_name == "id":
            continue
        annotation, optional = _unwrap_optional(field.annotation)
        nullable = optional or not field.is_required()
        columns.append(Column(field_name, column_type(annotation), nullable=nullable))
    # AUTOINCREMENT keeps SQLite from reusing the id of a deleted last row.
    return Table(name, metadata, *columns, sqlite_autoincrement=True)


class SqlCollection(Collection[R]):
    def __init__(self, name: str, model: type[R], engine: Engine, table: Table) -> None:
        super().__init__(name, model)
        self.engine = engine
        self.table = table

    def _to_record(self, row: Any) -> R:
        return self.model.model_validate(dict(row._mapping))

    def get(self, record_id: int) -> R | None:
        with self.engine.connect() as conn:
            row = conn.execute(select(self.table).where(self.table.c.id == record_id)).first()
        return self._to_record(row) if row is not None else None

    def all(self) -> list[R]:
        with self.engine.connect() as conn:
            rows = conn.execute(select(self.table).order_by(self.table.c.id)).all()
        return [self._to_record(row) for row in rows]

    def where(self, **criteria: Any) -> list[R]:
        self._check_fields(criteria)
        stmt = select(self.table).where(*self._conditions(criteria)).order_by(self.table.c.id)
        with self.engine.connect() as conn:
            rows = conn.execute(stmt).all()
        return [self._to_record(row) for row in rows]

    def count(self, **criteria: Any) -> int:
        self._check_fields(criteria)
        stmt = select(func.count()).select_from(self.table).where(*self._conditions(criteria))
        with self.engine.connect() as conn:
            return int(conn.execute(stmt).scalar_one())

    def insert(self, values: Mapping[str, Any] | BaseModel) -> R:
        data = as_values(values)
        explicit = data.pop("id", None)
        # Validate before touching the database; id 0 is a placeholder.
        record = self._validate(int(explicit) if explicit is not None else 0, data)
        row = record.model_dump(exclude={"id"})
        if explicit is not None:
            if self.get(record.id) is not None:
                raise ValueError(f"{self.name}: id {record.id} already exists")
            row["id"] = record.id
        with self.engine.begin() as conn:
            result = conn.execute(insert(self.table).values(**row))
            record_id = result.inserted_primary_key[0]
        logger.debug("Inserted %s #%d", self.name, record_id)
        return record.model_copy(update={"id": record_id})

    def update(self, record_id: int, changes: Mapping[str, Any] | BaseModel) -> R | None:
        patch = as_values(changes, exclude_unset=True)
        patch.pop("id", None)
        current = self.get(record_id)
        if current is None:
            return None
        record = self._validate(record_id, {**current.model_dump(), **patch})
        if not patch:
            return record
        # Only the patched columns are written so concurrent increments survive.
        row = record.model_dump(include=set(patch))
        with self.engine.begin() as conn:
            conn.execute(update(self.table).where(self.table.c.id == record_id).values(**row))
        logger.debug("Updated %s #%d", self.name, record_id)
        return record

    def increment(self, record_id: int, field: str, amount: int = 1) -> R | None:
        self._check_fields([field])
        column = self.table.c[field]
        with self.engine.begin() as conn:
            result = conn.execute(
                update(self.table).where(self.table.c.id == record_id).values({column: column + amount})
            )
        if result.rowcount == 0:
            return None
        return self.get(record_id)

    def delete(self, record_id: int) -> bool:
        with self.engine.begin() as conn:
            result = conn.execute(delete(self.table).where(self.table.c.id == record_id))
        removed = result.rowcount > 0
        if removed:
            logger.debug("Deleted %s #%d", self.name, record_id)
        return removed

    def clear(self) -> None:
        with self.engine.begin() as conn:
            conn.execute(delete(self.table))

    def _conditions(self, criteria: Mapping[str, Any]) -> list[Any]:
        conditions = []
        for key, value in criteria.items():
            column = self.table.c[key]
            conditions.append(column.is_(None) if value is None else column == value)
        return conditions


class SqlBackend(StorageBackend):
    """Collections stored in a relational database.

    Args:
        url: SQLAlchemy database URL, e.g. ``sqlite:///protokit.db`` or
            ``postgresql+psycopg://user:pw@host/db``
        echo: Log every SQL statement
    """

    kind = "sql"

    def __init__(self, url: str, echo: bool = False) -> None:
        self.url = url
        self.engine = _create_engine(url, echo)
        self.metadata = MetaData()
        self._collections: dict[str, SqlCollection] = {}

    def collection(self, name: str, model: type[R]) -> SqlCollection[R]:
        existing = self._collections.get(name)
        if existing is not None:
            if existing.model is not model:
                raise ValueError(f"Collection {name!r} already holds {existing.model.__name__}")
            return existing
        table = build_table(name, model, self.metadata)
        self.metadata.create_all(self.engine, tables=[table], checkfirst=True)
        created = SqlCollection(name, model, self.engine, table)
        self._collections[name] = created
        return created

    def drop_tables(self, names: Iterable[str]) -> None:
        """Drop the named tables if they exist, so their ids start again at 1.

        Call before opening the collections.
        """
        existing = set(inspect(self.engine).get_table_names())
        reflected = MetaData()
        reflected.reflect(self.engine, only=[name for name in names if name in existing])
        reflected.drop_all(self.engine)
        logger.info("Dropped tables: %s", ", ".join(reflected.tables) or "none")

    def close(self) -> None:
        self.engine.dispose()


def _create_engine(url: str, echo: bool) -> Engine:
    parsed = make_url(url)
    if parsed.get_backend_name() != "sqlite":
        return create_engine(url, echo=echo, pool_pre_ping=True)
    kwargs: dict[str, Any] = {"connect_args": {"check_same_thread": False}}
    if parsed.database in (None, "", ":memory:"):
        # One shared connection, otherwise every checkout sees an empty database.
        kwargs["poolclass"] = StaticPool
    return create_engine(url, echo=echo, **kwargs)
