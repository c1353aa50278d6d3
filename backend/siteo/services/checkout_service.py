from __future__ import annotations

import logging

import stripe
from sqlalchemy.orm import Session

from siteo.core.config import settings
from siteo.services import agent_service

logger = logging.getLogger(__name__)


class CheckoutNotConfiguredError(ValueError):
    pass


class LeadNotFoundError(LookupError):
    pass


class SubscriptionNotFoundError(ValueError):
    pass


def _configure_stripe() -> None:
    if not settings.STRIPE_API_KEY:
        logger.error('Stripe checkout requested without STRIPE_API_KEY')
        raise CheckoutNotConfiguredError('Payment system not configured (Missing Key)')
    stripe.api_key = settings.STRIPE_API_KEY


def create_checkout_session(db: Session, *, lead_id: str, return_url: str) -> str:
    _configure_stripe()
    if not settings.STRIPE_PRICE_ID:
        raise CheckoutNotConfiguredError('Payment system not configured (Missing Price)')

    lead = agent_service.get_agent(db, lead_id)
    if not lead:
        raise LeadNotFoundError('Lead not found')

    logger.info('Creating checkout session for lead %s (%s)', lead.full_name, lead_id)
    session = stripe.checkout.Session.create(
        mode='subscription',
        payment_method_types=['card'],
        line_items=[{'price': settings.STRIPE_PRICE_ID, 'quantity': 1}],
        success_url=f'{return_url}?session_id={{CHECKOUT_SESSION_ID}}&success=true',
        cancel_url=f'{return_url}?canceled=true',
        metadata={
            'leadId': str(lead.id),
            'slug': lead.website_slug or '',
            'type': 'subscription_activation',
        },
        customer_email=lead.primary_email,
    )
    return session.url


def cancel_subscription(db: Session, *, lead_id: str) -> None:
    """Cancel at period end; the lead keeps access until the paid period runs out."""
    _configure_stripe()

    lead = agent_service.get_agent(db, lead_id)
    if not lead:
        raise LeadNotFoundError('Lead not found')
    if not lead.stripe_subscription_id:
        raise SubscriptionNotFoundError('No active subscription found')

    logger.info('Canceling subscription for %s: %s', lead.full_name, lead.stripe_subscription_id)
    stripe.Subscription.modify(lead.stripe_subscription_id, cancel_at_period_end=True)
    agent_service.mark_subscription_canceling(db, lead)
