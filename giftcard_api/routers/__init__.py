"""
FastAPI routers grouped by area (public, admin, pages).

Each module exposes an APIRouter included by the application factory.
"""
