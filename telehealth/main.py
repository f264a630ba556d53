import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from telehealth.core import config
from telehealth.routes import schedule_routes

logging.basicConfig(level=config.LOG_LEVEL)

app = FastAPI()

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ALLOW_ORIGINS,
    allow_credentials=config.CORS_ALLOW_CREDENTIALS,
    allow_methods=['*'],
    allow_headers=['*'],
)

logger = logging.getLogger(__name__)


@app.on_event('startup')
def check_configuration() -> None:
    try:
        config.validate_runtime_config()
    except RuntimeError:
        logger.exception('Invalid scheduling configuration. Check APP_ENV and SCHEDULE_FIXED_NOW.')
        raise


@app.get('/')
def root():
    return {'status': 'Scheduling API Running'}


app.include_router(schedule_routes.router, prefix='/schedule')
