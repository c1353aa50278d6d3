import httpx
from fastapi.testclient import TestClient

from siteo.core.config import settings


def test_admin_on_custom_domain_redirects_to_platform_admin(client: TestClient, stub_lookup, lookup_requests) -> None:
    stub_lookup(httpx.Response(200, json={'slug': 'acme'}))

    response = client.get('/admin', headers={'host': 'acmehomes.com'}, follow_redirects=False)

    assert response.status_code == 307
    assert response.headers['location'] == f'{settings.CANONICAL_ORIGIN}/w/acme/admin'
    assert len(lookup_requests) == 1
    assert lookup_requests[0].url.params['domain'] == 'acmehomes.com'


def test_admin_on_unknown_domain_shows_not_found(client: TestClient, stub_lookup) -> None:
    stub_lookup(httpx.Response(200, json={}))

    response = client.get('/admin', headers={'host': 'unknown-domain.com'}, follow_redirects=False)

    assert response.status_code == 404
    assert 'Admin Not Found' in response.text


def test_admin_when_lookup_service_is_down_shows_not_found(client: TestClient, stub_lookup) -> None:
    stub_lookup(httpx.ConnectError('connection refused'))

    response = client.get('/admin', headers={'host': 'acmehomes.com'}, follow_redirects=False)

    assert response.status_code == 404
    assert 'Admin Not Found' in response.text


def test_admin_on_platform_host_skips_lookup(client: TestClient, stub_lookup, lookup_requests) -> None:
    stub_lookup(httpx.Response(200, json={'slug': 'acme'}))

    for host in ('localhost:5173', 'siteo.io', 'www.siteo.io'):
        response = client.get('/admin', headers={'host': host}, follow_redirects=False)
        assert response.status_code == 204

    assert lookup_requests == []


def test_admin_on_canonical_origin_does_not_loop(client: TestClient, stub_lookup, monkeypatch) -> None:
    monkeypatch.setattr(settings, 'CANONICAL_ORIGIN', 'http://acmehomes.com')
    stub_lookup(httpx.Response(200, json={'slug': 'acme'}))

    response = client.get('/admin', headers={'host': 'acmehomes.com'}, follow_redirects=False)

    assert response.status_code == 204


def test_site_route_for_custom_domain(client: TestClient, stub_lookup) -> None:
    stub_lookup(httpx.Response(200, json={'slug': 'acme'}))

    response = client.get('/site', headers={'host': 'acmehomes.com'})

    assert response.status_code == 200
    assert response.json() == {'kind': 'website', 'slug': 'acme', 'hostname': 'acmehomes.com'}


def test_site_route_for_unmapped_domain(client: TestClient, stub_lookup) -> None:
    stub_lookup(httpx.Response(404, json={'detail': 'Domain not found'}))

    response = client.get('/site', headers={'host': 'nobody.example'})

    assert response.json()['kind'] == 'not_found'


def test_site_route_for_platform_host(client: TestClient, stub_lookup, lookup_requests) -> None:
    stub_lookup(httpx.Response(200, json={'slug': 'acme'}))

    response = client.get('/site', headers={'host': 'siteo.io'})

    assert response.json() == {'kind': 'dashboard', 'slug': None, 'hostname': 'siteo.io'}
    assert lookup_requests == []
