from typing import Any

from fastapi import APIRouter

from siteo.core.config import settings


router = APIRouter(tags=['health'])


def _integrations() -> dict[str, bool]:
    return {
        'domain_provider': bool(settings.VERCEL_AUTH_TOKEN and settings.VERCEL_PROJECT_ID),
        'payments': bool(settings.STRIPE_API_KEY),
        'email': bool(settings.RESEND_API_KEY),
        'storage': bool(settings.STORAGE_URL and settings.STORAGE_SERVICE_KEY),
    }


@router.get('/health')
def health() -> dict[str, Any]:
    return {
        'status': 'ok',
        'environment': settings.APP_ENV,
        'canonical_origin': settings.CANONICAL_ORIGIN,
        'integrations': _integrations(),
    }
