"""Async client for the task endpoints of the Kanban API."""
from datetime import datetime
from typing import Any, List, Optional

import httpx

from ..config import API_URL
from ..errors import NotFoundError, StorageError, ValidationError
from ..models import TaskStatus
from ..schemas.task import TaskCreate, TaskDeleted, TaskRead, TaskUpdate


def _detail(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    detail = body.get("detail") if isinstance(body, dict) else None
    return str(detail) if detail else response.text or response.reason_phrase


class TaskApi:
    """Thin wrapper around ``httpx.AsyncClient`` speaking the task endpoints.

    HTTP failures come back as the board's own errors: 404 is
    ``NotFoundError``, 400/422 is ``ValidationError``, and anything else,
    including transport errors, is ``StorageError``.

    Usage:
        async with TaskApi() as api:
            tasks = await api.get_tasks()
    """

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        base_url: str = API_URL,
        timeout: float = 30.0,
    ):
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(base_url=base_url, timeout=timeout)

    async def __aenter__(self) -> "TaskApi":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def _request(
        self, method: str, path: str, task_id: Optional[int] = None, **kwargs: Any
    ) -> httpx.Response:
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            raise StorageError(f"{method} {path} failed: {e}") from e

        if response.is_success:
            return response
        if response.status_code == 404 and task_id is not None:
            raise NotFoundError(task_id)
        if response.status_code in (400, 422):
            raise ValidationError(_detail(response))
        raise StorageError(f"{method} {path} returned {response.status_code}: {_detail(response)}")

    async def create_task(
        self,
        title: str,
        description: Optional[str] = None,
        due_date: Optional[datetime] = None,
        status: TaskStatus = TaskStatus.TODO,
    ) -> TaskRead:
        payload = TaskCreate(
            title=title, description=description, due_date=due_date, status=status
        )
        response = await self._request("POST", "/api/tasks", json=payload.model_dump(mode="json"))
        return TaskRead.model_validate(response.json())

    async def get_tasks(self, status: Optional[TaskStatus] = None) -> List[TaskRead]:
        params = {"status": TaskStatus(status).value} if status is not None else None
        response = await self._request("GET", "/api/tasks", params=params)
        return [TaskRead.model_validate(item) for item in response.json()]

    async def get_task(self, task_id: int) -> TaskRead:
        response = await self._request("GET", f"/api/tasks/{task_id}", task_id=task_id)
        return TaskRead.model_validate(response.json())

    async def update_task(self, task_id: int, **fields: Any) -> TaskRead:
        """Send only the keyword arguments given.

        ``update_task(7, description=None)`` clears the description,
        ``update_task(7)`` leaves it untouched.
        """
        task_update = TaskUpdate(**fields)
        response = await self._request(
            "PATCH",
            f"/api/tasks/{task_id}",
            task_id=task_id,
            json=task_update.model_dump(mode="json", exclude_unset=True),
        )
        return TaskRead.model_validate(response.json())

    async def delete_task(self, task_id: int) -> TaskDeleted:
        response = await self._request("DELETE", f"/api/tasks/{task_id}", task_id=task_id)
        return TaskDeleted.model_validate(response.json())
