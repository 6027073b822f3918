import asyncio
import logging
import os
import sys

from services.fractals import REQUIRED_ACHIEVEMENTS, fractal_ids
from services.gw2_api import Gw2ApiError, Gw2Client
from utils.config import BOT_CONFIG_PATH, HELLO_IMAGE_PATH, ConfigError, load_credentials

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def check_config():
    try:
        credentials = load_credentials(BOT_CONFIG_PATH)
        logger.info(f"Config is valid! Client ID: {credentials.client_id}")
        return True
    except ConfigError as e:
        logger.error(f"Config check failed: {e}")
        return False


def check_image():
    if os.path.isfile(HELLO_IMAGE_PATH):
        logger.info(f"Hello image found at {HELLO_IMAGE_PATH}")
        return True
    logger.error(f"Hello image is missing: {HELLO_IMAGE_PATH}")
    return False


async def check_gw2_api(client=None):
    client = client or Gw2Client()
    try:
        dailies = await client.fetch_dailies()
        ids = fractal_ids(dailies)
        logger.info(f"Dailies endpoint is working! {len(ids)} fractal dailies")

        achievements = await client.fetch_achievements(ids)
        if len(achievements) < REQUIRED_ACHIEVEMENTS:
            logger.warning(
                f"Achievements endpoint returned {len(achievements)} fractals, "
                f"!fractals needs {REQUIRED_ACHIEVEMENTS}"
            )
            return False

        logger.info("Achievements endpoint is working!")
        return True
    except Gw2ApiError as e:
        logger.error(f"Could not reach the GW2 API: {e}")
        return False


async def main():
    logger.info("Checking services...")

    config_ok = check_config()
    image_ok = check_image()
    api_ok = await check_gw2_api()

    if config_ok and image_ok and api_ok:
        logger.info("All services are running correctly!")
        return 0

    logger.error("Some services are not running correctly!")
    if not config_ok:
        logger.error("Config file is not usable!")
    if not image_ok:
        logger.error("!hello will fail to attach its image!")
    if not api_ok:
        logger.error("GW2 API is not responding properly!")
    return 1


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
