#!/usr/bin/env python3
import argparse

from sqlalchemy import select

from siteo.db.base import Base
from siteo.db.session import SessionLocal, engine
from siteo.models.agent import ScrapedAgent


DEMO_SLUG = 'demo-agent'


def seed_demo(domain: str) -> None:
    db = SessionLocal()
    try:
        agent = db.scalar(select(ScrapedAgent).where(ScrapedAgent.website_slug == DEMO_SLUG))
        if not agent:
            agent = ScrapedAgent(full_name='Demo Agent', website_slug=DEMO_SLUG, primary_email='demo@example.com')
            db.add(agent)
        agent.website_published = True
        agent.website_config = {**(agent.website_config or {}), 'custom_domain': domain}
        db.commit()
    finally:
        db.close()


def main() -> int:
    parser = argparse.ArgumentParser(description='Create database tables for local development.')
    parser.add_argument('--demo-domain', help='Also seed a published demo agent mapped to this custom domain.')
    args = parser.parse_args()

    Base.metadata.create_all(bind=engine)
    print('Tables created.')

    if args.demo_domain:
        seed_demo(args.demo_domain.strip().lower())
        print(f'Seeded {DEMO_SLUG} -> {args.demo_domain}')
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
