"""Aggregate API router for the FastAPI application."""

from fastapi import APIRouter

from patent_catalog.api.routes import catalog

api_router = APIRouter()
api_router.include_router(catalog.router)
