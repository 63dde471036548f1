"""HTTP routes."""

from fastapi import APIRouter

from jobspark.api.routes import auth, users

api_router = APIRouter()

api_router.include_router(auth.router, tags=["Authentication"])
api_router.include_router(users.router, tags=["Users"])
