"""TodoItem repository. Returns application DTOs."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from inventory.application.dtos.todo import TodoResult
from inventory.infrastructure.persistence.models.todo_item import TodoItem
from inventory.infrastructure.persistence.repositories.base import BaseRepository
from inventory.shared.utils.datetime import ensure_utc


def _to_result(t: TodoItem) -> TodoResult:
    return TodoResult(
        id=t.id,
        title=t.title,
        is_done=t.is_done,
        created_at=ensure_utc(t.created_at),
    )


class TodoRepository(BaseRepository[TodoItem]):
    """Todo item repository."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, TodoItem)

    async def list_todos(self) -> list[TodoResult]:
        result = await self.db.execute(
            select(TodoItem).order_by(TodoItem.created_at.desc(), TodoItem.id.desc())
        )
        return [_to_result(t) for t in result.scalars().all()]

    async def get_todo(self, todo_id: int) -> TodoResult | None:
        row = await self.get_by_id(todo_id)
        return _to_result(row) if row else None

    async def create_todo(self, title: str) -> TodoResult:
        created = await self.create(TodoItem(title=title, is_done=False))
        return _to_result(created)

    async def update_todo(
        self, todo_id: int, title: str, is_done: bool
    ) -> TodoResult | None:
        entity = await self.get_by_id(todo_id)
        if not entity:
            return None
        entity.title = title
        entity.is_done = is_done
        updated = await self.update(entity)
        return _to_result(updated)

    async def delete_todo(self, todo_id: int) -> bool:
        entity = await self.get_by_id(todo_id)
        if not entity:
            return False
        await self.delete(entity)
        return True
