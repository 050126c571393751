"""API v1 router configuration."""

from fastapi import APIRouter

from api.v1.routes.activity import router as activity_router
from api.v1.routes.attributes import router as attributes_router
from api.v1.routes.events import router as events_router
from api.v1.routes.members import router as members_router
from api.v1.routes.planner import router as planner_router

router = APIRouter()
router.include_router(attributes_router)
router.include_router(members_router)
router.include_router(events_router)
router.include_router(planner_router)
router.include_router(activity_router)
