from fastapi import APIRouter

from siteo.api.v1.endpoints import admin, billing, contact, health, public, site


api_router = APIRouter()
api_router.include_router(health.router)
api_router.include_router(public.router)
api_router.include_router(contact.router)
api_router.include_router(admin.router)
api_router.include_router(billing.router)

site_router = APIRouter()
site_router.include_router(site.router)
