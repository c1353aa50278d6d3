from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from dataclasses import dataclass
from enum import Enum
from typing import Any

import httpx

from siteo.core.config import settings

logger = logging.getLogger(__name__)

LOOKUP_PATH = '/api/public/lookup-domain'


class LookupStatus(str, Enum):
    PENDING = 'pending'
    RESOLVED = 'resolved'
    NOT_FOUND = 'not_found'
    TRANSPORT_ERROR = 'transport_error'


@dataclass(frozen=True)
class LookupResult:
    status: LookupStatus
    slug: str | None = None
    detail: str | None = None

    @classmethod
    def pending(cls) -> LookupResult:
        return cls(status=LookupStatus.PENDING)

    @classmethod
    def resolved(cls, slug: str) -> LookupResult:
        if not slug:
            raise ValueError('Resolved lookup requires a non-empty slug')
        return cls(status=LookupStatus.RESOLVED, slug=slug)

    @classmethod
    def not_found(cls, detail: str | None = None) -> LookupResult:
        return cls(status=LookupStatus.NOT_FOUND, detail=detail)

    @classmethod
    def transport_error(cls, detail: str | None = None) -> LookupResult:
        return cls(status=LookupStatus.TRANSPORT_ERROR, detail=detail)

    @property
    def is_terminal(self) -> bool:
        return self.status != LookupStatus.PENDING


def _extract_slug(data: Any) -> str | None:
    if not isinstance(data, dict):
        return None
    slug = data.get('slug')
    if isinstance(slug, str) and slug.strip():
        return slug.strip()
    return None


class DomainLookupClient:
    """
    Resolve a custom host name to a tenant slug through the public lookup endpoint.

    One call to :meth:`lookup` issues exactly one request. Nothing is retried or
    cached, and every failure is folded into a terminal :class:`LookupResult`
    instead of raised.
    """

    def __init__(self, api_base: str, *, client: httpx.AsyncClient | None = None) -> None:
        self.api_base = api_base.rstrip('/')
        self._client = client or httpx.AsyncClient()
        self._owns_client = client is None

    async def lookup(self, hostname: str) -> LookupResult:
        url = f'{self.api_base}{LOOKUP_PATH}'
        try:
            resp = await self._client.get(url, params={'domain': hostname})
        except httpx.HTTPError as exc:
            logger.warning('Domain lookup failed for %s: %s', hostname, exc)
            return LookupResult.transport_error(str(exc) or exc.__class__.__name__)

        if not resp.is_success:
            logger.warning('Domain lookup for %s returned HTTP %s', hostname, resp.status_code)
            return LookupResult.transport_error(f'HTTP {resp.status_code}')

        try:
            data = resp.json()
        except ValueError as exc:
            logger.warning('Domain lookup for %s returned an unreadable body: %s', hostname, exc)
            return LookupResult.transport_error('Invalid JSON body')

        slug = _extract_slug(data)
        if not slug:
            logger.info('Domain lookup for %s returned no slug', hostname)
            return LookupResult.not_found('Response has no slug')

        logger.info('Resolved %s -> %s', hostname, slug)
        return LookupResult.resolved(slug)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> DomainLookupClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()


async def get_domain_lookup_client() -> AsyncGenerator[DomainLookupClient, None]:
    async with DomainLookupClient(settings.API_BASE_URL) as client:
        yield client
