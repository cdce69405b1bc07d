"""
Main API router.
"""

from fastapi import APIRouter
from app.api import categories, dashboard, health, transactions

api_router = APIRouter()

api_router.include_router(health.router)
api_router.include_router(transactions.router)
api_router.include_router(categories.router)
api_router.include_router(dashboard.router)
