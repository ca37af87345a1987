from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError

from ..repositories import TodoRepository, get_repository
from ..schemas import TodoOut, TodoRequestBody

TODO_ADDED = "Todo added!!"

router = APIRouter(
    prefix="/todos",
    tags=["todos"],
)


async def decode_todo_body(request: Request) -> TodoRequestBody:
    """
    Decode the raw request body as JSON whatever its Content-Type.
    """
    body = await request.body()
    try:
        return TodoRequestBody.model_validate_json(body)
    except ValidationError as e:
        raise RequestValidationError(e.errors(), body=body) from e


# PUBLIC_INTERFACE
@router.get(
    "/",
    response_model=List[TodoOut],
    summary="List Todos",
    description="List every todo, newest first.",
    responses={
        200: {"description": "List retrieved successfully"},
        500: {"description": "Storage failure", "content": {"text/plain": {}}},
    },
)
def get_todos(repo: TodoRepository = Depends(get_repository)) -> List[TodoOut]:
    """
    List all todos ordered by creation time, most recent first.
    """
    return [TodoOut(**it) for it in repo.list_all()]  # type: ignore[arg-type]


# PUBLIC_INTERFACE
@router.post(
    "/",
    response_class=PlainTextResponse,
    status_code=status.HTTP_200_OK,
    summary="Create Todo",
    description="Store a new todo. The id and timestamps are assigned by storage.",
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": TodoRequestBody.model_json_schema()}},
        }
    },
    responses={
        200: {"description": "Todo created", "content": {"text/plain": {}}},
        400: {"description": "Malformed request body", "content": {"text/plain": {}}},
        500: {"description": "Storage failure", "content": {"text/plain": {}}},
    },
)
def add_todo(
    payload: TodoRequestBody = Depends(decode_todo_body),
    repo: TodoRepository = Depends(get_repository),
) -> PlainTextResponse:
    """
    Create a new Todo.
    """
    repo.insert(payload.task, payload.completed)
    return PlainTextResponse(TODO_ADDED)
