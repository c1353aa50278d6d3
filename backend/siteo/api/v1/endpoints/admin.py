import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, File, HTTPException, UploadFile, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from siteo.api.deps import AgentPrincipal, get_current_agent
from siteo.db.session import get_db
from siteo.schemas.common import SuccessResponse
from siteo.schemas.domain import DomainCreate
from siteo.services import agent_service, storage_service
from siteo.services.vercel_service import VercelAPIError, VercelClient, get_vercel_client


logger = logging.getLogger(__name__)

router = APIRouter(prefix='/admin', tags=['admin'])


def _provider_error(exc: VercelAPIError) -> JSONResponse:
    # Forward verification challenges and similar details untouched.
    if exc.details:
        return JSONResponse(status_code=exc.status_code or status.HTTP_400_BAD_REQUEST, content=exc.details)
    raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc))


@router.get('/config')
def get_config(
    db: Session = Depends(get_db),
    agent: AgentPrincipal = Depends(get_current_agent),
) -> dict[str, Any]:
    config = agent_service.get_website_config(db, agent.agent_id)
    if config is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail='Agent not found')
    return config


@router.patch('/config', response_model=SuccessResponse)
def update_config(
    updates: dict[str, Any] = Body(...),
    db: Session = Depends(get_db),
    agent: AgentPrincipal = Depends(get_current_agent),
) -> SuccessResponse:
    logger.info('Updating config for %s: %s', agent.slug, sorted(updates))
    merged = agent_service.merge_website_config(db, agent.agent_id, updates)
    if merged is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail='Agent not found')
    db.commit()
    return SuccessResponse()


@router.post('/domains')
def add_domain(
    payload: DomainCreate,
    _: AgentPrincipal = Depends(get_current_agent),
    vercel: VercelClient = Depends(get_vercel_client),
) -> Any:
    try:
        return vercel.add_domain(payload.domain)
    except VercelAPIError as exc:
        logger.warning('Add domain error: %s', exc)
        return _provider_error(exc)


@router.get('/domains/{domain}')
def get_domain_status(
    domain: str,
    _: AgentPrincipal = Depends(get_current_agent),
    vercel: VercelClient = Depends(get_vercel_client),
) -> Any:
    try:
        result = vercel.get_domain_status(domain.strip().lower())
    except VercelAPIError as exc:
        logger.warning('Get domain error: %s', exc)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)) from exc
    if result is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail='Domain not found')
    return result


@router.post('/domains/{domain}/verify')
def verify_domain(
    domain: str,
    _: AgentPrincipal = Depends(get_current_agent),
    vercel: VercelClient = Depends(get_vercel_client),
) -> Any:
    try:
        return vercel.verify_domain(domain.strip().lower())
    except VercelAPIError as exc:
        logger.warning('Verify domain error: %s', exc)
        return _provider_error(exc)


@router.delete('/domains/{domain}')
def remove_domain(
    domain: str,
    _: AgentPrincipal = Depends(get_current_agent),
    vercel: VercelClient = Depends(get_vercel_client),
) -> Any:
    try:
        return vercel.remove_domain(domain.strip().lower())
    except VercelAPIError as exc:
        logger.warning('Remove domain error: %s', exc)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)) from exc


@router.post('/upload')
def upload_asset(
    file: UploadFile | None = File(None),
    agent: AgentPrincipal = Depends(get_current_agent),
) -> dict[str, str]:
    if file is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail='No file uploaded')
    if file.content_type and not file.content_type.lower().startswith('image/'):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail='Only image uploads are supported.')

    content = file.file.read()
    if not content:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail='Empty file.')
    if len(content) > storage_service.MAX_ASSET_BYTES:
        raise HTTPException(status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, detail='File too large (max 5MB).')

    logger.info('Upload request received for: %s', agent.slug)
    try:
        url = storage_service.upload_agent_asset(
            slug=agent.slug,
            filename=file.filename,
            content=content,
            content_type=file.content_type,
        )
    except storage_service.StorageNotConfiguredError as exc:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)) from exc
    except storage_service.StorageUploadError as exc:
        logger.warning('Upload error: %s', exc)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)) from exc
    return {'url': url}
