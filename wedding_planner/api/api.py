# File: wedding_planner/api/api.py
from fastapi import APIRouter
from wedding_planner.api.endpoints import (
    auth, wedding_profile, events, guests, tasks, budget, vendors, export
)

api_router = APIRouter()

api_router.include_router(
    auth.router,
    prefix="/auth",
    tags=["authentication"]
)

api_router.include_router(
    wedding_profile.router,
    prefix="/wedding-profile",
    tags=["wedding-profile"]
)

api_router.include_router(
    events.router,
    prefix="/events",
    tags=["events"]
)

api_router.include_router(
    guests.router,
    prefix="/guests",
    tags=["guests"]
)

api_router.include_router(
    tasks.router,
    prefix="/tasks",
    tags=["tasks"]
)

api_router.include_router(
    budget.router,
    prefix="/budget",
    tags=["budget"]
)

api_router.include_router(
    vendors.router,
    prefix="/vendors",
    tags=["vendors"]
)

api_router.include_router(
    export.router,
    prefix="/export",
    tags=["export"]
)
