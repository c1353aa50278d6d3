from siteo.services import (
    agent_service,
    checkout_service,
    domain_lookup_service,
    email_service,
    storage_service,
    vercel_service,
)

__all__ = [
    'agent_service',
    'checkout_service',
    'domain_lookup_service',
    'email_service',
    'storage_service',
    'vercel_service',
]
