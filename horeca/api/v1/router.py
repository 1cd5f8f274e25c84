# horeca/api/v1/router.py
from fastapi import APIRouter
from horeca.api.v1.endpoints import auth, businesses, catalog, menu_items, sales


api_router = APIRouter()

api_router.include_router(auth.router)
api_router.include_router(businesses.router)
api_router.include_router(menu_items.router)
api_router.include_router(catalog.router)
api_router.include_router(sales.router)
