from pydantic import BaseModel, field_validator


class DomainLookupOut(BaseModel):
    slug: str


class DomainCreate(BaseModel):
    domain: str

    @field_validator('domain')
    @classmethod
    def normalize_domain(cls, value: str) -> str:
        value = value.strip().lower()
        if not value:
            raise ValueError('Domain is required')
        return value


class SiteRouteOut(BaseModel):
    kind: str
    slug: str | None = None
    hostname: str
