# tests/test_tasks.py - Task endpoint tests
import pytest
from httpx import AsyncClient

from tasklist.core.limiter import user_limiter
from tests.conftest import get_auth_headers

TASKS = "/api/v1/tasks"


async def _create(client: AsyncClient, headers: dict, title: str = "Buy milk", **extra) -> dict:
    resp = await client.post(TASKS, json={"title": title, **extra}, headers=headers)
    assert resp.status_code == 201, resp.text
    return resp.json()


@pytest.mark.asyncio
async def test_create_task(client: AsyncClient, test_user):
    """User can create a task; it starts active"""
    headers = get_auth_headers(test_user)
    data = await _create(client, headers, "  Buy milk  ", description="Semi-skimmed")
    assert data["title"] == "Buy milk"
    assert data["description"] == "Semi-skimmed"
    assert data["status"] == "active"
    assert data["completed_at"] is None
    assert data["user_id"] == test_user.id


@pytest.mark.asyncio
async def test_requires_authentication(client: AsyncClient):
    resp = await client.get(TASKS)
    assert resp.status_code == 401
    assert resp.json()["detail"] == "Not authenticated"

    resp = await client.get(TASKS, headers={"Authorization": "Bearer not-a-token"})
    assert resp.status_code == 401


@pytest.mark.asyncio
async def test_title_boundary(client: AsyncClient, test_user):
    headers = get_auth_headers(test_user)
    await _create(client, headers, "a" * 200)

    resp = await client.post(TASKS, json={"title": "a" * 201}, headers=headers)
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Task title must be between 1 and 200 characters"


@pytest.mark.asyncio
async def test_complete_and_reactivate_lifecycle(client: AsyncClient, test_user):
    headers = get_auth_headers(test_user)
    task = await _create(client, headers, "Buy milk")

    active = (await client.get(f"{TASKS}/active", headers=headers)).json()
    assert [t["id"] for t in active] == [task["id"]]

    resp = await client.post(f"{TASKS}/{task['id']}/complete", headers=headers)
    assert resp.status_code == 200
    assert resp.json()["status"] == "completed"
    assert resp.json()["completed_at"] is not None

    active = (await client.get(f"{TASKS}/active", headers=headers)).json()
    completed = (await client.get(f"{TASKS}/completed", headers=headers)).json()
    assert active == []
    assert [t["id"] for t in completed] == [task["id"]]

    resp = await client.post(f"{TASKS}/{task['id']}/reactivate", headers=headers)
    assert resp.status_code == 200
    assert resp.json()["status"] == "active"
    assert resp.json()["completed_at"] is None

    active = (await client.get(f"{TASKS}/active", headers=headers)).json()
    completed = (await client.get(f"{TASKS}/completed", headers=headers)).json()
    assert [t["id"] for t in active] == [task["id"]]
    assert completed == []


@pytest.mark.asyncio
async def test_list_is_newest_first(client: AsyncClient, test_user):
    headers = get_auth_headers(test_user)
    first = await _create(client, headers, "First")
    second = await _create(client, headers, "Second")

    resp = await client.get(TASKS, headers=headers)
    assert [t["id"] for t in resp.json()] == [second["id"], first["id"]]


@pytest.mark.asyncio
async def test_update_task(client: AsyncClient, test_user):
    headers = get_auth_headers(test_user)
    task = await _create(client, headers, "Draft")

    resp = await client.patch(f"{TASKS}/{task['id']}", json={"title": " Final "}, headers=headers)
    assert resp.status_code == 200
    assert resp.json()["title"] == "Final"

    resp = await client.patch(f"{TASKS}/{task['id']}", json={"description": "d" * 5001}, headers=headers)
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_soft_delete_keeps_row(client: AsyncClient, test_user):
    headers = get_auth_headers(test_user)
    task = await _create(client, headers)
    await client.post(f"{TASKS}/{task['id']}/complete", headers=headers)

    resp = await client.delete(f"{TASKS}/{task['id']}", headers=headers)
    assert resp.status_code == 200
    assert resp.json()["status"] == "deleted"
    assert resp.json()["completed_at"] is None

    resp = await client.get(f"{TASKS}/{task['id']}", headers=headers)
    assert resp.status_code == 200
    assert resp.json()["status"] == "deleted"

    resp = await client.post(f"{TASKS}/{task['id']}/complete", headers=headers)
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Task has been deleted"

    resp = await client.post(f"{TASKS}/{task['id']}/reactivate", headers=headers)
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Task has been deleted"
    assert (await client.get(f"{TASKS}/{task['id']}", headers=headers)).json()["status"] == "deleted"


@pytest.mark.asyncio
async def test_permanent_delete_removes_row(client: AsyncClient, test_user):
    headers = get_auth_headers(test_user)
    task = await _create(client, headers)

    resp = await client.delete(f"{TASKS}/{task['id']}/permanent", headers=headers)
    assert resp.status_code == 204

    resp = await client.get(f"{TASKS}/{task['id']}", headers=headers)
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Task not found"


@pytest.mark.asyncio
async def test_other_user_cannot_touch_task(client: AsyncClient, test_user, other_user):
    task = await _create(client, get_auth_headers(test_user))
    intruder = get_auth_headers(other_user)
    task_url = f"{TASKS}/{task['id']}"

    attempts = [
        ("GET", task_url, None),
        ("PATCH", task_url, {"title": "Mine now"}),
        ("POST", f"{task_url}/complete", None),
        ("POST", f"{task_url}/reactivate", None),
        ("DELETE", task_url, None),
        ("DELETE", f"{task_url}/permanent", None),
    ]
    for method, url, body in attempts:
        resp = await client.request(method, url, json=body, headers=intruder)
        assert resp.status_code == 403, (method, url)
        assert resp.json()["detail"].startswith("Not authorized to")

    assert (await client.get(TASKS, headers=intruder)).json() == []


@pytest.mark.asyncio
async def test_create_rate_limit(client: AsyncClient, test_user):
    headers = get_auth_headers(test_user)
    for i in range(20):
        await _create(client, headers, f"Task {i}")

    resp = await client.post(TASKS, json={"title": "One too many"}, headers=headers)
    assert resp.status_code == 429
    body = resp.json()
    assert body["retry_after"] > 0
    assert body["detail"].startswith("Rate limit exceeded. Please try again in")
    assert int(resp.headers["Retry-After"]) > 0


def _use_up(limit_name: str, user_id: int) -> None:
    for _ in range(user_limiter.limit_for(limit_name).amount):
        user_limiter.check(limit_name, user_id)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "limit_name, method, suffix, body",
    [
        ("update_task", "PATCH", "", {"title": "Renamed"}),
        ("update_task", "POST", "/complete", None),
        ("update_task", "POST", "/reactivate", None),
        ("delete_task", "DELETE", "", None),
        ("delete_task", "DELETE", "/permanent", None),
    ],
)
async def test_task_mutations_are_rate_limited(client: AsyncClient, test_user, limit_name, method, suffix, body):
    headers = get_auth_headers(test_user)
    task = await _create(client, headers)
    _use_up(limit_name, test_user.id)

    resp = await client.request(method, f"{TASKS}/{task['id']}{suffix}", json=body, headers=headers)
    assert resp.status_code == 429
    assert resp.json()["retry_after"] > 0

    resp = await client.get(f"{TASKS}/{task['id']}", headers=headers)
    assert resp.json()["title"] == "Buy milk"
    assert resp.json()["status"] == "active"
