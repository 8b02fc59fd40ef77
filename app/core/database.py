import motor.motor_asyncio
from beanie import init_beanie
from app.core.config import settings

from app.models.actor import Actor
from app.models.midia import Midia
import logging
logger = logging.getLogger(__name__)

DOCUMENT_MODELS = [
    Actor,
    Midia,
]


async def init_db():
    client = motor.motor_asyncio.AsyncIOMotorClient(settings.mongo_uri)
    await init_beanie(
        database=client.get_default_database(),
        document_models=DOCUMENT_MODELS,
    )
    logger.info('Connection to MongoDB established and Beanie initialized.')
    return client
