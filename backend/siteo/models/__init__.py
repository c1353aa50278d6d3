from siteo.models.agent import ScrapedAgent

__all__ = [
    'ScrapedAgent',
]
