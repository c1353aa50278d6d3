from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse, Response

from siteo.core.config import settings
from siteo.multitenancy.deps import get_domain_classifier, get_request_hostname, get_request_origin
from siteo.multitenancy.domain_classifier import DomainClassifier, HostClassification
from siteo.multitenancy.domain_redirect import DomainAdminRedirect, RedirectState, route_site
from siteo.schemas.domain import SiteRouteOut
from siteo.services.domain_lookup_service import DomainLookupClient, LookupResult, get_domain_lookup_client


router = APIRouter(tags=['site'])


@router.get('/admin', response_class=HTMLResponse)
async def admin_entry(
    request: Request,
    classifier: DomainClassifier = Depends(get_domain_classifier),
    lookup_client: DomainLookupClient = Depends(get_domain_lookup_client),
) -> Response:
    targets: list[str] = []
    controller = DomainAdminRedirect(
        hostname=get_request_hostname(request),
        current_origin=get_request_origin(request),
        classifier=classifier,
        lookup_client=lookup_client,
        canonical_origin=settings.CANONICAL_ORIGIN,
        navigate=targets.append,
    )
    state = await controller.run()

    if state == RedirectState.REDIRECTING:
        return RedirectResponse(targets[-1], status_code=status.HTTP_307_TEMPORARY_REDIRECT)
    if state == RedirectState.NOT_FOUND_DISPLAY:
        return HTMLResponse(controller.render() or '', status_code=status.HTTP_404_NOT_FOUND)
    # Platform host or already canonical: the regular admin page takes over.
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get('/site', response_model=SiteRouteOut)
async def site_route(
    request: Request,
    classifier: DomainClassifier = Depends(get_domain_classifier),
    lookup_client: DomainLookupClient = Depends(get_domain_lookup_client),
) -> SiteRouteOut:
    hostname = get_request_hostname(request)
    classification = classifier.classify(hostname)

    result = LookupResult.pending()
    if classification == HostClassification.TENANT_CUSTOM_DOMAIN:
        result = await lookup_client.lookup(hostname)

    route = route_site(classification, result)
    return SiteRouteOut(kind=route.kind, slug=route.slug, hostname=hostname)
