import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from siteo.api.v1.router import api_router, site_router
from siteo.core.config import settings


logging.basicConfig(level=logging.INFO, format='%(asctime)s %(levelname)s %(name)s: %(message)s')


app = FastAPI(
    title='Siteo API',
    version='0.1.0',
    openapi_url='/api/openapi.json',
    docs_url='/api/docs',
    redoc_url='/api/redoc',
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=['*'],
    allow_headers=['*'],
)

# Public clients call `<api-base>/api/public/lookup-domain`, so routers sit under /api.
app.include_router(api_router, prefix='/api')
app.include_router(site_router)


@app.get('/')
def root() -> dict[str, str]:
    return {'service': 'siteo-api', 'status': 'running'}
