from __future__ import annotations

import logging
from collections.abc import Generator
from typing import Any

import httpx
from fastapi import HTTPException, status

from siteo.core.config import settings

logger = logging.getLogger(__name__)


class VercelNotConfiguredError(ValueError):
    pass


class VercelAPIError(Exception):
    def __init__(self, message: str, *, status_code: int, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.details = details or {}


def _parse_body(resp: httpx.Response) -> Any:
    if not resp.text:
        return {}
    try:
        return resp.json()
    except ValueError:
        return None


def _handle_response(resp: httpx.Response, context: str) -> dict[str, Any]:
    logger.info('Vercel %s response: %s %s', context, resp.status_code, resp.text[:200])
    body = _parse_body(resp)

    if not resp.is_success:
        logger.warning('Vercel %s failed: %s %s', context, resp.status_code, resp.text[:2000])
        message = 'Vercel API request failed'
        details: dict[str, Any] = {}
        if isinstance(body, dict) and isinstance(body.get('error'), dict):
            details = body['error']
            message = details.get('message') or message
        elif resp.text:
            message = resp.text
        raise VercelAPIError(message, status_code=resp.status_code, details=details)

    if body is None:
        raise VercelAPIError(f'{context}: unreadable response body', status_code=resp.status_code)
    return body


class VercelClient:
    """Thin wrapper over the project-domain endpoints of the Vercel REST API."""

    def __init__(
        self,
        *,
        auth_token: str,
        project_id: str,
        team_id: str | None = None,
        api_base: str = 'https://api.vercel.com',
        client: httpx.Client | None = None,
    ) -> None:
        self.project_id = project_id
        self.team_id = team_id
        self.api_base = api_base.rstrip('/')
        self._client = client or httpx.Client(timeout=30.0)
        self._headers = {
            'Authorization': f'Bearer {auth_token}',
            'Content-Type': 'application/json',
        }

    @classmethod
    def from_settings(cls) -> VercelClient:
        token = (settings.VERCEL_AUTH_TOKEN or '').strip()
        project_id = (settings.VERCEL_PROJECT_ID or '').strip()
        if not token or not project_id:
            raise VercelNotConfiguredError('Domain provider is not configured')
        return cls(
            auth_token=token,
            project_id=project_id,
            team_id=(settings.VERCEL_TEAM_ID or '').strip() or None,
            api_base=settings.VERCEL_API_BASE,
        )

    def _params(self) -> dict[str, str]:
        params = {'projectId': self.project_id}
        if self.team_id:
            params['teamId'] = self.team_id
        return params

    def _url(self, path: str) -> str:
        return f'{self.api_base}{path}'

    def _send(self, method: str, path: str, context: str, **kwargs: Any) -> httpx.Response:
        try:
            return self._client.request(method, self._url(path), params=self._params(), headers=self._headers, **kwargs)
        except httpx.HTTPError as exc:
            logger.warning('Vercel %s unreachable: %s', context, exc)
            raise VercelAPIError(f'{context}: {exc}', status_code=502) from exc

    def add_domain(self, domain: str) -> dict[str, Any]:
        logger.info('Adding domain %s to project %s', domain, self.project_id)
        resp = self._send('POST', f'/v10/projects/{self.project_id}/domains', 'Add Domain', json={'name': domain})
        return _handle_response(resp, 'Add Domain')

    def get_domain_status(self, domain: str) -> dict[str, Any] | None:
        resp = self._send('GET', f'/v10/projects/{self.project_id}/domains/{domain}', 'Get Domain Status')
        if resp.status_code == 404:
            return None
        return _handle_response(resp, 'Get Domain Status')

    def remove_domain(self, domain: str) -> dict[str, Any]:
        logger.info('Removing domain %s from project %s', domain, self.project_id)
        resp = self._send('DELETE', f'/v10/projects/{self.project_id}/domains/{domain}', 'Remove Domain')
        return _handle_response(resp, 'Remove Domain')

    def verify_domain(self, domain: str) -> dict[str, Any]:
        logger.info('Verifying domain %s', domain)
        resp = self._send('POST', f'/v9/projects/{self.project_id}/domains/{domain}/verify', 'Verify Domain')
        return _handle_response(resp, 'Verify Domain')

    def close(self) -> None:
        self._client.close()


def get_vercel_client() -> Generator[VercelClient, None, None]:
    try:
        client = VercelClient.from_settings()
    except VercelNotConfiguredError as exc:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)) from exc
    try:
        yield client
    finally:
        client.close()
