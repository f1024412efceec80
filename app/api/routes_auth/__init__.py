from fastapi import APIRouter
from app.api.routes_auth.auth_routes import router as auth_routes

router = APIRouter(prefix="/auth", tags=["Auth"])
router.include_router(auth_routes)
