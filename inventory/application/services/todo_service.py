"""Todo item use cases."""

from __future__ import annotations

from inventory.application.dtos.todo import TodoResult
from inventory.application.interfaces.repositories import ITodoRepository
from inventory.domain.exceptions import ResourceNotFoundException, ValidationException


def _require_title(title: str) -> str:
    if not title or not title.strip():
        raise ValidationException("Title is required.", field="title")
    return title.strip()


class TodoService:
    """CRUD over todo items. Blank titles are rejected."""

    def __init__(self, todo_repo: ITodoRepository) -> None:
        self.todo_repo = todo_repo

    async def list_todos(self) -> list[TodoResult]:
        return await self.todo_repo.list_todos()

    async def get_todo(self, todo_id: int) -> TodoResult:
        todo = await self.todo_repo.get_todo(todo_id)
        if todo is None:
            raise ResourceNotFoundException("TodoItem", todo_id)
        return todo

    async def create_todo(self, title: str) -> TodoResult:
        return await self.todo_repo.create_todo(_require_title(title))

    async def update_todo(self, todo_id: int, title: str, is_done: bool) -> TodoResult:
        updated = await self.todo_repo.update_todo(todo_id, _require_title(title), is_done)
        if updated is None:
            raise ResourceNotFoundException("TodoItem", todo_id)
        return updated

    async def delete_todo(self, todo_id: int) -> None:
        if not await self.todo_repo.delete_todo(todo_id):
            raise ResourceNotFoundException("TodoItem", todo_id)
