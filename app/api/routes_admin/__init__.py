from fastapi import APIRouter
from app.api.routes_admin.admin_routes import router as admin_routes

router = APIRouter(prefix="/admin", tags=["Admin"])
router.include_router(admin_routes)
