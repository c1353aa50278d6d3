from siteo.schemas.checkout import (
    CancelSubscriptionRequest,
    CheckoutSessionRequest,
    CheckoutSessionResponse,
    ContactRequest,
    ContactResponse,
)
from siteo.schemas.common import SuccessResponse
from siteo.schemas.domain import DomainCreate, DomainLookupOut, SiteRouteOut

__all__ = [
    'CancelSubscriptionRequest',
    'CheckoutSessionRequest',
    'CheckoutSessionResponse',
    'ContactRequest',
    'ContactResponse',
    'DomainCreate',
    'DomainLookupOut',
    'SiteRouteOut',
    'SuccessResponse',
]
