import logging
from contextlib import asynccontextmanager

from app.core.endpoint_rate_limit import init_endpoint_rate_limit
from app.core.scoring import get_scoring_config

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    config = get_scoring_config()
    logger.info("scoring_config_loaded sections=%s", sorted(config))
    init_endpoint_rate_limit()
    yield
    logger.info("planner_api_shutdown title=%s", app.title)
