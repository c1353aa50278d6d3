import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from siteo.db.session import get_db
from siteo.schemas.domain import DomainLookupOut
from siteo.services import agent_service


logger = logging.getLogger(__name__)

router = APIRouter(prefix='/public', tags=['public'])


@router.get('/lookup-domain', response_model=DomainLookupOut)
def lookup_domain(domain: str | None = None, db: Session = Depends(get_db)) -> DomainLookupOut:
    domain = (domain or '').strip().lower()
    if not domain:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail='Domain is required')

    logger.info('Looking up domain: %s', domain)
    try:
        agent = agent_service.find_by_custom_domain(db, domain)
    except SQLAlchemyError as exc:
        logger.error('Domain lookup error for %s: %s', domain, exc)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail='Lookup failed') from exc

    if not agent or not agent.website_slug:
        logger.info('Domain not found: %s', domain)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail='Domain not found')

    if not agent.website_published:
        logger.info('Domain found but site not published: %s', domain)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail='Website not published')

    logger.info('Resolved %s -> %s', domain, agent.website_slug)
    return DomainLookupOut(slug=agent.website_slug)
