import logging

import stripe
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from siteo.db.session import get_db
from siteo.schemas.checkout import (
    CancelSubscriptionRequest,
    CheckoutSessionRequest,
    CheckoutSessionResponse,
)
from siteo.schemas.common import SuccessResponse
from siteo.services import checkout_service


logger = logging.getLogger(__name__)

router = APIRouter(prefix='/stripe', tags=['stripe'])


@router.post('/create-checkout-session', response_model=CheckoutSessionResponse)
def create_checkout_session(
    payload: CheckoutSessionRequest,
    db: Session = Depends(get_db),
) -> CheckoutSessionResponse:
    if not payload.lead_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail='Missing leadId')

    try:
        url = checkout_service.create_checkout_session(db, lead_id=payload.lead_id, return_url=payload.return_url)
    except checkout_service.LeadNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except checkout_service.CheckoutNotConfiguredError as exc:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)) from exc
    except stripe.StripeError as exc:
        logger.error('Error creating checkout session: %s', exc)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)) from exc
    return CheckoutSessionResponse(url=url)


@router.post('/cancel-subscription', response_model=SuccessResponse)
def cancel_subscription(
    payload: CancelSubscriptionRequest,
    db: Session = Depends(get_db),
) -> SuccessResponse:
    if not payload.lead_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail='Missing leadId')

    try:
        checkout_service.cancel_subscription(db, lead_id=payload.lead_id)
    except checkout_service.LeadNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except checkout_service.SubscriptionNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except checkout_service.CheckoutNotConfiguredError as exc:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)) from exc
    except stripe.StripeError as exc:
        db.rollback()
        logger.error('Cancel subscription error: %s', exc)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)) from exc

    db.commit()
    return SuccessResponse(message='Subscription will be canceled at end of billing period')
