from contextlib import asynccontextmanager
import logging

from app.core.config.scoring import get_scoring_config

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    # Fail at startup, not on the first request, if config/scoring.yaml is broken.
    config = get_scoring_config()
    logger.info("scoring_config_loaded sections=%s", sorted(config))
    yield
