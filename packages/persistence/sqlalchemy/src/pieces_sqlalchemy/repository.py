from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError

from pieces_conditions.query_options import FilterPage, QueryOptions

from .compiler import apply_query_options, build_sqla_filter
from .exceptions import RepositoryError

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from pieces_conditions.condition import FilterCondition

    from .strategy import SQLAlchemyOperatorRegistry

logger = logging.getLogger(__name__)

M = TypeVar("M")


class SQLAlchemyFilterRepository(Generic[M]):
    """
    Read and write rows of one mapped model using validated conditions.

    The session is passed per call; transaction boundaries belong to the
    caller (see :func:`pieces_sqlalchemy.connection.session_scope`)::

        repo = SQLAlchemyFilterRepository(UserModel)
        async with session_scope(config) as session:
            page = await repo.filter(session, options)
    """

    def __init__(
        self,
        model: type[M],
        *,
        registry: SQLAlchemyOperatorRegistry | None = None,
    ) -> None:
        self.model = model
        self._registry = registry

    async def filter(self, session: AsyncSession, options: QueryOptions) -> FilterPage:
        """Run one page of a filtered, id-ordered query."""
        stmt = apply_query_options(
            select(self.model), self.model, options, registry=self._registry
        )
        try:
            result = await session.execute(stmt)
        except SQLAlchemyError as exc:
            raise RepositoryError(f"Filtering {self._table} failed: {exc}") from exc
        rows = list(result.scalars().all())
        logger.debug(
            "Filtered %s: %d row(s) (limit=%s, offset=%s)",
            self._table,
            len(rows),
            options.limit,
            options.offset,
        )
        return FilterPage(records=rows, next_page=options.next_page)

    async def count(
        self, session: AsyncSession, conditions: Sequence[FilterCondition] = ()
    ) -> int:
        stmt = select(func.count()).select_from(self.model)
        if conditions:
            stmt = stmt.where(
                build_sqla_filter(self.model, conditions, registry=self._registry)
            )
        try:
            return int((await session.execute(stmt)).scalar_one())
        except SQLAlchemyError as exc:
            raise RepositoryError(f"Counting {self._table} failed: {exc}") from exc

    async def list_all(self, session: AsyncSession, *order_by: Any) -> list[M]:
        stmt = select(self.model)
        if order_by:
            stmt = stmt.order_by(*order_by)
        try:
            result = await session.execute(stmt)
        except SQLAlchemyError as exc:
            raise RepositoryError(f"Listing {self._table} failed: {exc}") from exc
        return list(result.scalars().all())

    async def add_all(self, session: AsyncSession, rows: Sequence[M]) -> int:
        """Stage *rows* for insert and flush; returns how many were added."""
        session.add_all(rows)
        try:
            await session.flush()
        except SQLAlchemyError as exc:
            raise RepositoryError(f"Inserting into {self._table} failed: {exc}") from exc
        logger.info("Inserted %d row(s) into %s", len(rows), self._table)
        return len(rows)

    @property
    def _table(self) -> str:
        return str(getattr(self.model, "__tablename__", self.model.__name__))
