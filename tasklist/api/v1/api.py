from fastapi import APIRouter

from tasklist.api.v1 import assistant, dashboard, tasks

api_router = APIRouter()
api_router.include_router(tasks.router)
api_router.include_router(assistant.router)
api_router.include_router(dashboard.router)
