import uuid

import httpx
import pytest
from fastapi.testclient import TestClient

from siteo.core.config import settings
from siteo.services import storage_service
from tests.conftest import agent_token, auth_header


AGENT_ID = str(uuid.uuid4())
PNG = b'\x89PNG\r\n\x1a\nfake-image'


@pytest.fixture()
def storage_settings(monkeypatch) -> None:
    monkeypatch.setattr(settings, 'STORAGE_URL', 'https://storage.siteo.test/')
    monkeypatch.setattr(settings, 'STORAGE_SERVICE_KEY', 'service-key')


def test_asset_path_uses_slug_and_extension() -> None:
    assert storage_service.asset_path('karyn', 'Headshot.JPG', now=1700000000.5) == 'karyn/1700000000500.jpg'
    assert storage_service.asset_path('karyn', None, now=1.0) == 'karyn/1000.bin'


def test_upload_agent_asset_posts_to_bucket(storage_settings) -> None:
    captured: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        return httpx.Response(200, json={'Key': 'agent-assets/karyn/1.png'})

    with httpx.Client(transport=httpx.MockTransport(handler)) as http:
        url = storage_service.upload_agent_asset(
            slug='karyn', filename='logo.png', content=PNG, content_type='image/png', client=http
        )

    request = captured[0]
    assert request.method == 'POST'
    assert request.url.path.startswith('/storage/v1/object/agent-assets/karyn/')
    assert request.url.path.endswith('.png')
    assert request.headers['authorization'] == 'Bearer service-key'
    assert request.headers['x-upsert'] == 'true'
    assert request.headers['content-type'] == 'image/png'
    assert request.content == PNG
    object_path = request.url.path.removeprefix('/storage/v1/object/agent-assets/')
    assert url == f'https://storage.siteo.test/storage/v1/object/public/agent-assets/{object_path}'


def test_upload_agent_asset_storage_error(storage_settings) -> None:
    with httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(413, text='too big'))) as http:
        with pytest.raises(storage_service.StorageUploadError):
            storage_service.upload_agent_asset(
                slug='karyn', filename='logo.png', content=PNG, content_type='image/png', client=http
            )


def test_upload_agent_asset_unreachable(storage_settings) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError('connection refused', request=request)

    with httpx.Client(transport=httpx.MockTransport(handler)) as http:
        with pytest.raises(storage_service.StorageUploadError):
            storage_service.upload_agent_asset(
                slug='karyn', filename='logo.png', content=PNG, content_type='image/png', client=http
            )


def test_upload_route_returns_public_url(client: TestClient, monkeypatch) -> None:
    calls: list[dict] = []

    def fake_upload(**kwargs):
        calls.append(kwargs)
        return 'https://storage.siteo.test/storage/v1/object/public/agent-assets/karyn/1.png'

    monkeypatch.setattr(storage_service, 'upload_agent_asset', fake_upload)

    response = client.post(
        '/api/admin/upload',
        files={'file': ('logo.png', PNG, 'image/png')},
        headers=auth_header(agent_token(AGENT_ID)),
    )

    assert response.status_code == 200
    assert response.json() == {'url': 'https://storage.siteo.test/storage/v1/object/public/agent-assets/karyn/1.png'}
    assert calls[0]['slug'] == 'karyn'
    assert calls[0]['filename'] == 'logo.png'
    assert calls[0]['content'] == PNG


def test_upload_route_requires_token(client: TestClient) -> None:
    response = client.post('/api/admin/upload', files={'file': ('logo.png', PNG, 'image/png')})
    assert response.status_code == 401


def test_upload_route_without_file(client: TestClient) -> None:
    response = client.post('/api/admin/upload', headers=auth_header(agent_token(AGENT_ID)))
    assert response.status_code == 400
    assert response.json()['detail'] == 'No file uploaded'


def test_upload_route_rejects_non_images(client: TestClient) -> None:
    response = client.post(
        '/api/admin/upload',
        files={'file': ('notes.txt', b'hello', 'text/plain')},
        headers=auth_header(agent_token(AGENT_ID)),
    )
    assert response.status_code == 400


def test_upload_route_without_storage_config(client: TestClient, monkeypatch) -> None:
    monkeypatch.setattr(settings, 'STORAGE_URL', None)

    response = client.post(
        '/api/admin/upload',
        files={'file': ('logo.png', PNG, 'image/png')},
        headers=auth_header(agent_token(AGENT_ID)),
    )

    assert response.status_code == 500
    assert response.json()['detail'] == 'Asset storage is not configured'
