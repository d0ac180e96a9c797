"""Todo item API: thin routes delegating to TodoService."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from inventory.api.v1.dependencies import get_todo_service, get_todo_service_for_write
from inventory.application.services import TodoService
from inventory.core.limiter import limit_writes
from inventory.schemas.todo import TodoCreateRequest, TodoResponse, TodoUpdateRequest

router = APIRouter()


@router.get("", response_model=list[TodoResponse])
async def list_todos(
    service: Annotated[TodoService, Depends(get_todo_service)],
):
    return [TodoResponse.model_validate(t) for t in await service.list_todos()]


@router.get("/{todo_id}", response_model=TodoResponse)
async def get_todo(
    todo_id: int,
    service: Annotated[TodoService, Depends(get_todo_service)],
):
    return TodoResponse.model_validate(await service.get_todo(todo_id))


@router.post("", response_model=TodoResponse, status_code=201)
@limit_writes
async def create_todo(
    request: Request,
    body: TodoCreateRequest,
    service: Annotated[TodoService, Depends(get_todo_service_for_write)],
):
    """Create a todo item. Blank titles are rejected with 400."""
    return TodoResponse.model_validate(await service.create_todo(body.title))


@router.put("/{todo_id}", response_model=TodoResponse)
@limit_writes
async def update_todo(
    request: Request,
    todo_id: int,
    body: TodoUpdateRequest,
    service: Annotated[TodoService, Depends(get_todo_service_for_write)],
):
    updated = await service.update_todo(todo_id, body.title, body.is_done)
    return TodoResponse.model_validate(updated)


@router.delete("/{todo_id}", status_code=204)
@limit_writes
async def delete_todo(
    request: Request,
    todo_id: int,
    service: Annotated[TodoService, Depends(get_todo_service_for_write)],
):
    await service.delete_todo(todo_id)
