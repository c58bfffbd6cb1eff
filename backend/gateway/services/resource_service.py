"""
Board Gateway - Generic Resource Service (Capped CRUD)
=======================================================

What:  The CRUD workflow shared by users, content posts, announcements and
       registered emails: list, get, capped insert, update, delete, bulk delete.
How:   One ResourceService instance per table, parametrised by ORM model,
       response schema, display label and row-count ceiling. Resource-specific
       behavior (password hashing, expired flag) lives in subclasses that
       override the `_prepare_*` and `_to_*` hooks.
Who:   Called by the route handlers in gateway/routes.

Capped Insert Flow:
    ┌──────────────┐    ┌──────────────────────┐    ┌──────────────┐
    │ COUNT(*) of  │───▶│ count + n > ceiling? │───▶│ INSERT rows  │
    │ the table    │    │   yes → 400          │    │ return them  │
    └──────────────┘    └──────────────────────┘    └──────────────┘

Error Mapping:
    read / count failure        → DatabaseError     (500)
    missing row on single get   → NotFoundError     (404)
    ceiling reached             → LimitReachedError (400)
    insert/update/delete failed → WriteError        (400)

The count and the insert are not atomic: two concurrent creates near the
ceiling can both pass the check.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional, Type

from pydantic import BaseModel
from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from gateway.database import Base
from gateway.exceptions import (
    DatabaseError,
    LimitReachedError,
    NotFoundError,
    ValidationError,
    WriteError,
)

logger = logging.getLogger(__name__)


class ResourceService:
    """
    CRUD operations over one table with a fixed row-count ceiling.

    Attributes:
        model:          SQLAlchemy model class of the table
        response_model: Pydantic schema rows are serialized into
        label:          Singular display name ("user", "content post")
        plural:         Plural display name used in messages
        limit:          Maximum number of rows the table may hold
        limit_message:  Error returned when an insert would exceed `limit`
    """

    def __init__(
        self,
        model: Type[Base],
        response_model: Type[BaseModel],
        label: str,
        limit: int,
        limit_message: str,
        plural: Optional[str] = None,
    ):
        self.model = model
        self.response_model = response_model
        self.label = label
        self.plural = plural or f"{label}s"
        self.limit = limit
        self.limit_message = limit_message

    # ── Hooks ─────────────────────────────────────────────────────────────

    async def _prepare_insert(self, values: Dict[str, Any]) -> Dict[str, Any]:
        """Transform one row's values before INSERT. Default: unchanged."""
        return values

    async def _prepare_update(self, changes: Dict[str, Any]) -> Dict[str, Any]:
        """Transform the column changes before UPDATE. Default: unchanged."""
        return changes

    def _to_response(self, row: Any) -> BaseModel:
        """Serialize a row returned by a write."""
        return self.response_model.model_validate(row)

    def _to_read_response(self, row: Any) -> BaseModel:
        """Serialize a row returned by a read. Default: same as writes."""
        return self._to_response(row)

    # ── Reads ─────────────────────────────────────────────────────────────

    async def list_all(self, db: AsyncSession) -> List[BaseModel]:
        """
        Return every row of the table ordered by id.

        Raises:
            DatabaseError: Query execution failed (→ 500)
        """
        try:
            result = await db.execute(select(self.model).order_by(self.model.id))
            rows = list(result.scalars().all())
        except Exception as e:
            logger.error("Database error listing %s: %s", self.plural, str(e), exc_info=True)
            raise DatabaseError(
                message=f"Could not retrieve {self.plural}.",
                context={"error_type": type(e).__name__},
            )
        return [self._to_read_response(row) for row in rows]

    async def get(self, db: AsyncSession, item_id: int) -> BaseModel:
        """
        Return one row by primary key.

        Raises:
            NotFoundError: No row has this id (→ 404)
            DatabaseError: Query execution failed (→ 500)
        """
        try:
            result = await db.execute(select(self.model).where(self.model.id == item_id))
            row = result.scalar_one_or_none()
        except Exception as e:
            logger.error("Database error fetching %s %s: %s", self.label, item_id, str(e))
            raise DatabaseError(
                message=f"Could not retrieve the {self.label}.",
                context={"id": item_id, "error_type": type(e).__name__},
            )
        if row is None:
            raise NotFoundError(resource=self.label, resource_id=str(item_id))
        return self._to_read_response(row)

    async def count(self, db: AsyncSession) -> int:
        """
        Return the current number of rows in the table.

        Raises:
            DatabaseError: Count query failed (→ 500)
        """
        try:
            result = await db.execute(select(func.count()).select_from(self.model))
            return result.scalar() or 0
        except Exception as e:
            logger.error("Database error counting %s: %s", self.plural, str(e))
            raise DatabaseError(
                message=f"Could not count {self.plural}.",
                context={"error_type": type(e).__name__},
            )

    # ── Writes ────────────────────────────────────────────────────────────

    async def create(self, db: AsyncSession, items: List[Dict[str, Any]]) -> List[BaseModel]:
        """
        Insert `items` unless the table would exceed its ceiling.

        Args:
            db:    Async database session
            items: Column values of each row to insert

        Returns:
            The inserted rows, in input order.

        Raises:
            LimitReachedError: count + len(items) > limit (→ 400)
            DatabaseError:     Count query failed (→ 500)
            WriteError:        INSERT rejected by the database (→ 400)
        """
        current = await self.count(db)
        if current + len(items) > self.limit:
            logger.info(
                "Rejected insert of %d %s: %d of %d already stored",
                len(items), self.plural, current, self.limit,
            )
            raise LimitReachedError(
                message=self.limit_message,
                limit=self.limit,
                current=current,
                requested=len(items),
            )

        prepared = [await self._prepare_insert(dict(values)) for values in items]
        rows = [self.model(**values) for values in prepared]
        try:
            db.add_all(rows)
            await db.flush()
        except Exception as e:
            logger.error("Database error creating %s: %s", self.plural, str(e))
            raise WriteError(
                message=f"Could not create {self.label if len(rows) == 1 else self.plural}.",
                context={"error_type": type(e).__name__},
            )

        logger.info("Created %d %s", len(rows), self.label if len(rows) == 1 else self.plural)
        return [self._to_response(row) for row in rows]

    async def update(
        self,
        db: AsyncSession,
        item_id: Optional[int],
        changes: Dict[str, Any],
    ) -> List[BaseModel]:
        """
        Apply `changes` to the row with `item_id`.

        Returns:
            The updated rows (an empty list when no row matched).

        Raises:
            ValidationError: id missing or nothing to change (→ 400)
            WriteError:      UPDATE rejected by the database (→ 400)
        """
        if not item_id:
            raise ValidationError(
                message=f"{self.label.capitalize()} ID is required in the request body.",
                field="id",
            )
        if not changes:
            raise ValidationError(message="No fields to update were provided.")

        changes = await self._prepare_update(dict(changes))
        if "updated_at" in self.model.__table__.columns and changes.get("updated_at") is None:
            changes["updated_at"] = datetime.now(timezone.utc)

        stmt = (
            update(self.model)
            .where(self.model.id == item_id)
            .values(**changes)
            .returning(self.model)
        )
        try:
            result = await db.execute(stmt)
            rows = list(result.scalars().all())
        except Exception as e:
            logger.error("Database error updating %s %s: %s", self.label, item_id, str(e))
            raise WriteError(
                message=f"Could not update the {self.label}.",
                context={"id": item_id, "error_type": type(e).__name__},
            )
        return [self._to_response(row) for row in rows]

    async def delete(self, db: AsyncSession, item_id: int) -> List[BaseModel]:
        """
        Delete the row with `item_id`.

        Returns:
            The deleted rows (an empty list when no row matched).
        """
        return await self._delete_where(db, [item_id])

    async def delete_many(self, db: AsyncSession, ids: Optional[Iterable[int]]) -> List[BaseModel]:
        """
        Delete every row whose id is in `ids`.

        Raises:
            ValidationError: ids missing or empty (→ 400)
            WriteError:      DELETE rejected by the database (→ 400)
        """
        ids = list(ids or [])
        if not ids:
            raise ValidationError(
                message="Request body must include an array of ids.",
                field="ids",
            )
        return await self._delete_where(db, ids)

    async def _delete_where(self, db: AsyncSession, ids: List[int]) -> List[BaseModel]:
        stmt = delete(self.model).where(self.model.id.in_(ids)).returning(self.model)
        try:
            result = await db.execute(stmt)
            rows = list(result.scalars().all())
        except Exception as e:
            logger.error("Database error deleting %s %s: %s", self.plural, ids, str(e))
            raise WriteError(
                message=f"Could not delete {self.label if len(ids) == 1 else self.plural}.",
                context={"ids": ids, "error_type": type(e).__name__},
            )
        logger.info("Deleted %d %s", len(rows), self.plural)
        return [self._to_response(row) for row in rows]
