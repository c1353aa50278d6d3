from __future__ import annotations

from typing import Any
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from siteo.models.agent import ScrapedAgent


def _parse_uuid(value: str | UUID) -> UUID | None:
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except ValueError:
        return None


def find_by_custom_domain(db: Session, domain: str) -> ScrapedAgent | None:
    return db.scalar(
        select(ScrapedAgent).where(ScrapedAgent.website_config.contains({'custom_domain': domain})).limit(1)
    )


def get_agent(db: Session, agent_id: str | UUID) -> ScrapedAgent | None:
    parsed = _parse_uuid(agent_id)
    if parsed is None:
        return None
    return db.scalar(select(ScrapedAgent).where(ScrapedAgent.id == parsed))


def get_website_config(db: Session, agent_id: str | UUID) -> dict[str, Any] | None:
    agent = get_agent(db, agent_id)
    if not agent:
        return None
    return dict(agent.website_config or {})


def merge_website_config(db: Session, agent_id: str | UUID, updates: dict[str, Any]) -> dict[str, Any] | None:
    agent = get_agent(db, agent_id)
    if not agent:
        return None
    # Reassign so the JSONB column is flagged dirty.
    agent.website_config = {**(agent.website_config or {}), **updates}
    db.flush()
    return dict(agent.website_config)


def mark_subscription_canceling(db: Session, agent: ScrapedAgent) -> None:
    agent.subscription_status = 'canceling'
    db.flush()
