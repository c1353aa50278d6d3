from __future__ import annotations

from fastapi import HTTPException, Request, status

from siteo.core.config import settings
from siteo.multitenancy.domain_classifier import DomainClassifier


def _get_host(request: Request) -> str | None:
    host = request.headers.get('x-forwarded-host') if settings.TRUST_PROXY_HEADERS else None
    if host:
        return host.split(',')[0].strip()
    return request.headers.get('host')


def get_request_host(request: Request) -> str:
    host = _get_host(request)
    if not host:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail='Missing host header')
    return host


def get_request_hostname(request: Request) -> str:
    return get_request_host(request).split(':', 1)[0].lower()


def get_request_origin(request: Request) -> str:
    scheme = request.url.scheme
    if settings.TRUST_PROXY_HEADERS:
        forwarded_proto = request.headers.get('x-forwarded-proto')
        if forwarded_proto:
            scheme = forwarded_proto.split(',')[0].strip()
    return f'{scheme}://{get_request_host(request).lower()}'


def get_domain_classifier() -> DomainClassifier:
    return DomainClassifier.from_settings(settings)
