import uuid
from datetime import datetime

from sqlalchemy import Boolean, DateTime, Index, String, Text, UniqueConstraint, func
from sqlalchemy.dialects.postgresql import JSONB, UUID
from sqlalchemy.orm import Mapped, mapped_column

from siteo.db.base_class import Base


class ScrapedAgent(Base):
    __tablename__ = 'scraped_agents'
    __table_args__ = (
        UniqueConstraint('website_slug', name='uq_scraped_agents_website_slug'),
        UniqueConstraint('source_url', name='uq_scraped_agents_source_url'),
    )

    id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    full_name: Mapped[str] = mapped_column(String(200), nullable=False)
    brokerage: Mapped[str | None] = mapped_column(String(200), nullable=True)
    source_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    primary_email: Mapped[str | None] = mapped_column(String(320), nullable=True)
    primary_phone: Mapped[str | None] = mapped_column(String(50), nullable=True)

    website_slug: Mapped[str | None] = mapped_column(String(63), nullable=True, index=True)
    website_published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    # Holds theme/content settings and the agent's `custom_domain`.
    website_config: Mapped[dict] = mapped_column(JSONB, nullable=False, default=dict)

    stripe_subscription_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    subscription_status: Mapped[str | None] = mapped_column(String(30), nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now()
    )


Index('ix_scraped_agents_website_config', ScrapedAgent.website_config, postgresql_using='gin')
