from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Protocol
from urllib.parse import quote

from siteo.multitenancy.domain_classifier import DomainClassifier, HostClassification
from siteo.services.domain_lookup_service import LookupResult, LookupStatus

logger = logging.getLogger(__name__)


LOADING_HTML = (
    '<div class="min-h-screen bg-slate-950 flex items-center justify-center">'
    '<div class="w-10 h-10 border-2 border-slate-800 border-t-indigo-500 rounded-full animate-spin"></div>'
    '</div>'
)

ADMIN_NOT_FOUND_HTML = (
    '<div class="min-h-screen bg-slate-950 text-white flex flex-col items-center justify-center p-4 text-center">'
    '<h1 class="text-3xl font-bold mb-4">Admin Not Found</h1>'
    '<p class="text-slate-400">The admin panel for this domain could not be located.</p>'
    '</div>'
)


class RedirectState(str, Enum):
    LOADING = 'loading'
    DECIDING = 'deciding'
    REDIRECTING = 'redirecting'
    NOT_FOUND_DISPLAY = 'not_found_display'
    INACTIVE = 'inactive'


@dataclass(frozen=True)
class RedirectDecision:
    action: str  # no_action | redirect | show_not_found
    url: str | None = None

    @classmethod
    def no_action(cls) -> RedirectDecision:
        return cls(action='no_action')

    @classmethod
    def redirect(cls, url: str) -> RedirectDecision:
        return cls(action='redirect', url=url)

    @classmethod
    def show_not_found(cls) -> RedirectDecision:
        return cls(action='show_not_found')


class SupportsLookup(Protocol):
    async def lookup(self, hostname: str) -> LookupResult:
        ...


def admin_url(canonical_origin: str, slug: str) -> str:
    return f'{canonical_origin.rstrip("/")}/w/{quote(slug, safe="")}/admin'


def _same_origin(left: str, right: str) -> bool:
    return left.rstrip('/').lower() == right.rstrip('/').lower()


def decide_redirect(
    classification: HostClassification,
    result: LookupResult,
    *,
    current_origin: str,
    canonical_origin: str,
) -> RedirectDecision:
    if classification == HostClassification.PLATFORM:
        return RedirectDecision.no_action()

    if result.status == LookupStatus.RESOLVED and result.slug:
        if _same_origin(current_origin, canonical_origin):
            return RedirectDecision.no_action()
        return RedirectDecision.redirect(admin_url(canonical_origin, result.slug))

    if result.status in (LookupStatus.NOT_FOUND, LookupStatus.TRANSPORT_ERROR):
        return RedirectDecision.show_not_found()

    return RedirectDecision.no_action()


class DomainAdminRedirect:
    """
    Send visitors of a tenant's custom domain to the tenant's admin panel on the platform origin.

    The controller moves through a single state enumeration:

    - ``LOADING``: initial state, before classification.
    - ``INACTIVE``: platform host, or already on the canonical origin.
    - ``DECIDING``: custom domain, lookup in flight.
    - ``REDIRECTING``: ``navigate`` was called with the admin URL.
    - ``NOT_FOUND_DISPLAY``: lookup reported not-found or failed.

    At most one lookup is issued per instance. Once :meth:`teardown` has been
    called, a lookup that completes later is ignored.
    """

    def __init__(
        self,
        *,
        hostname: str,
        current_origin: str,
        classifier: DomainClassifier,
        lookup_client: SupportsLookup,
        canonical_origin: str,
        navigate: Callable[[str], None],
    ) -> None:
        self.hostname = hostname
        self.current_origin = current_origin
        self.classifier = classifier
        self.lookup_client = lookup_client
        self.canonical_origin = canonical_origin
        self.navigate = navigate

        self.state = RedirectState.LOADING
        self.classification: HostClassification | None = None
        self.result = LookupResult.pending()
        self.decision: RedirectDecision | None = None
        self._started = False
        self._torn_down = False

    @property
    def torn_down(self) -> bool:
        return self._torn_down

    def teardown(self) -> None:
        self._torn_down = True

    def _transition(self, state: RedirectState) -> None:
        logger.debug('Domain redirect %s: %s -> %s', self.hostname, self.state.value, state.value)
        self.state = state

    async def run(self) -> RedirectState:
        if self._started:
            return self.state
        self._started = True

        self.classification = self.classifier.classify(self.hostname)
        if self.classification == HostClassification.PLATFORM:
            self.decision = RedirectDecision.no_action()
            self._transition(RedirectState.INACTIVE)
            return self.state

        self._transition(RedirectState.DECIDING)
        result = await self.lookup_client.lookup(self.hostname)
        if self._torn_down:
            logger.debug('Ignoring lookup result for %s after teardown', self.hostname)
            return self.state

        self.result = result
        self.decision = decide_redirect(
            self.classification,
            result,
            current_origin=self.current_origin,
            canonical_origin=self.canonical_origin,
        )

        if self.decision.action == 'redirect' and self.decision.url:
            self._transition(RedirectState.REDIRECTING)
            self.navigate(self.decision.url)
        elif self.decision.action == 'show_not_found':
            logger.warning(
                'Admin not found for custom domain %s (%s: %s)', self.hostname, result.status.value, result.detail
            )
            self._transition(RedirectState.NOT_FOUND_DISPLAY)
        else:
            self._transition(RedirectState.INACTIVE)
        return self.state

    def render(self) -> str | None:
        if self.state in (RedirectState.LOADING, RedirectState.DECIDING):
            return LOADING_HTML
        if self.state == RedirectState.NOT_FOUND_DISPLAY:
            return ADMIN_NOT_FOUND_HTML
        return None


@dataclass(frozen=True)
class SiteRoute:
    kind: str  # website | not_found | dashboard
    slug: str | None = None


def route_site(classification: HostClassification, result: LookupResult) -> SiteRoute:
    if result.status == LookupStatus.RESOLVED and result.slug:
        return SiteRoute(kind='website', slug=result.slug)
    if classification == HostClassification.TENANT_CUSTOM_DOMAIN and result.status in (
        LookupStatus.NOT_FOUND,
        LookupStatus.TRANSPORT_ERROR,
    ):
        return SiteRoute(kind='not_found')
    return SiteRoute(kind='dashboard')
