from siteo.db.base_class import Base
from siteo.models.agent import ScrapedAgent


__all__ = [
    'Base',
    'ScrapedAgent',
]
