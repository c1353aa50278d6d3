from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from siteo.db.session import get_db
from siteo.schemas.checkout import ContactRequest, ContactResponse
from siteo.services import agent_service, email_service


router = APIRouter(tags=['contact'])


@router.post('/contact', response_model=ContactResponse)
def submit_contact(payload: ContactRequest, db: Session = Depends(get_db)) -> ContactResponse:
    agent = agent_service.get_agent(db, payload.agent_id)
    if not agent:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail='Agent not found')
    if not agent.primary_email:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail='Agent has no contact email')

    try:
        message_id = email_service.send_contact_email(
            agent_email=agent.primary_email,
            visitor_name=payload.name,
            visitor_email=str(payload.email),
            visitor_phone=payload.phone,
            message=payload.message,
        )
    except email_service.EmailNotConfiguredError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc
    except email_service.EmailDeliveryError as exc:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)) from exc

    return ContactResponse(success=True, id=message_id or None)
