"""Base repository: primary-key lookup plus write helpers with post-flush hooks.

Writes flush inside the caller's transaction, then call the matching hook
with the refreshed row. Subclasses use the hooks to queue validation
reference-set updates with _on_commit; they apply only if the transaction
commits.
"""

from collections.abc import Callable
from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from inventory.core.validation_store import ValidationStore
from inventory.infrastructure.persistence.commit_hooks import run_after_commit
from inventory.infrastructure.persistence.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Generic repository over one mapped class with an integer id."""

    def __init__(
        self,
        db: AsyncSession,
        model: type[ModelType],
        validation_store: ValidationStore | None = None,
    ) -> None:
        self.db = db
        self.model = model
        self._store = validation_store

    async def get_by_id(self, entity_id: int) -> ModelType | None:
        mapped: Any = self.model
        result = await self.db.execute(select(mapped).where(mapped.id == entity_id))
        return result.scalar_one_or_none()

    async def _flush_and_refresh(self, obj: ModelType) -> ModelType:
        await self.db.flush()
        await self.db.refresh(obj)
        return obj

    async def create(self, obj: ModelType) -> ModelType:
        self.db.add(obj)
        await self._flush_and_refresh(obj)
        await self._after_insert(obj)
        return obj

    async def update(self, obj: ModelType) -> ModelType:
        """Flush pending changes on an attached row."""
        await self._flush_and_refresh(obj)
        await self._after_update(obj)
        return obj

    async def delete(self, obj: ModelType) -> None:
        """Delete obj; _guard_delete may raise to refuse the delete."""
        await self._guard_delete(obj)
        await self.db.delete(obj)
        await self.db.flush()
        await self._after_delete(obj)

    def _on_commit(self, update: Callable[[ValidationStore], Any]) -> None:
        """Apply update to the validation store once this transaction commits."""
        store = self._store
        if store is not None:
            run_after_commit(self.db, lambda: update(store))

    async def _after_insert(self, obj: ModelType) -> None:
        pass

    async def _after_update(self, obj: ModelType) -> None:
        pass

    async def _guard_delete(self, obj: ModelType) -> None:
        pass

    async def _after_delete(self, obj: ModelType) -> None:
        pass
