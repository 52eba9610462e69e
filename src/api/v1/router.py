# src/api/v1/router.py

from fastapi import APIRouter
from src.api.v1.sorting import router as sorting_router

# Create a main router for API version 1
router = APIRouter()

# Include individual routers for v1 endpoints, applying tags here for clarity
router.include_router(sorting_router, tags=["Sorting"])
