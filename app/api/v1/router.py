from fastapi import APIRouter
from api.v1.routes.locales import router as locales_router
from api.v1.routes.session import router as session_router
from api.v1.routes.team import router as team_router


# Main v1 router (includes all endpoints)
router = APIRouter()
router.include_router(locales_router)
router.include_router(session_router)
router.include_router(team_router)
