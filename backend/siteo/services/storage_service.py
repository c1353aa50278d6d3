from __future__ import annotations

import logging
import time
from urllib.parse import quote

import httpx

from siteo.core.config import settings

logger = logging.getLogger(__name__)

MAX_ASSET_BYTES = 5 * 1024 * 1024


class StorageNotConfiguredError(RuntimeError):
    pass


class StorageUploadError(RuntimeError):
    pass


def asset_path(slug: str, filename: str | None, *, now: float | None = None) -> str:
    """Object key for an agent asset: ``<slug>/<epoch-millis>.<ext>``."""
    ext = (filename or '').rsplit('.', 1)[-1].strip().lower() or 'bin'
    millis = int((time.time() if now is None else now) * 1000)
    return f'{slug}/{millis}.{ext}'


def public_url(path: str) -> str:
    base = (settings.STORAGE_URL or '').rstrip('/')
    return f'{base}/storage/v1/object/public/{settings.STORAGE_BUCKET}/{quote(path)}'


def upload_agent_asset(
    *,
    slug: str,
    filename: str | None,
    content: bytes,
    content_type: str | None,
    client: httpx.Client | None = None,
) -> str:
    """Store an uploaded file in the public asset bucket (upsert) and return its public URL."""
    base = (settings.STORAGE_URL or '').rstrip('/')
    key = (settings.STORAGE_SERVICE_KEY or '').strip()
    if not base or not key:
        raise StorageNotConfiguredError('Asset storage is not configured')

    path = asset_path(slug, filename)
    headers = {
        'Authorization': f'Bearer {key}',
        'apikey': key,
        'Content-Type': content_type or 'application/octet-stream',
        'x-upsert': 'true',
    }

    logger.info('Uploading asset %s (%d bytes)', path, len(content))
    http = client or httpx.Client(timeout=30.0)
    try:
        resp = http.post(
            f'{base}/storage/v1/object/{settings.STORAGE_BUCKET}/{quote(path)}', content=content, headers=headers
        )
    except httpx.HTTPError as exc:
        raise StorageUploadError(f'Storage unreachable: {exc}') from exc
    finally:
        if client is None:
            http.close()

    if not resp.is_success:
        logger.warning('Storage upload failed: %s %s', resp.status_code, resp.text[:500])
        raise StorageUploadError(f'Storage returned HTTP {resp.status_code}')

    url = public_url(path)
    logger.info('Upload success: %s', url)
    return url
