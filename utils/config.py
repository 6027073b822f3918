import logging
import os
import tomllib
from pathlib import Path
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, ValidationError

load_dotenv()

PROJECT_ROOT = Path(__file__).resolve().parent.parent


def log_level(name: str) -> int:
    """Map a level name to its number, unknown names fall back to INFO"""
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


# Credentials file (client_id, client_secret, bot_token)
BOT_CONFIG_PATH = os.getenv('BOT_CONFIG_PATH', 'config.toml')

# Guild Wars 2 API
GW2_API_BASE = os.getenv('GW2_API_BASE', 'https://api.guildwars2.com/v2')

# Image attached to the !hello reply
HELLO_IMAGE_PATH = os.getenv('HELLO_IMAGE_PATH', str(PROJECT_ROOT / 'assets' / 'hello.png'))

LOG_LEVEL = log_level(os.getenv('LOG_LEVEL', 'INFO'))


class ConfigError(Exception):
    """Base class for errors raised while loading the credentials file"""


class ConfigIOError(ConfigError):
    pass


class ConfigParseError(ConfigError):
    pass


class Credentials(BaseModel):
    model_config = ConfigDict(frozen=True)

    client_id: StrictInt = Field(ge=0, le=2 ** 64 - 1)
    client_secret: StrictStr
    bot_token: StrictStr


def load_credentials(path=BOT_CONFIG_PATH) -> Credentials:
    """Read and parse the TOML credentials file"""
    try:
        with open(path, encoding='utf-8') as f:
            contents = f.read()
    except OSError as e:
        raise ConfigIOError(f"Could not read config file {path}: {e}") from e

    try:
        return Credentials.model_validate(tomllib.loads(contents))
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML in {path}: {e}") from e
    except ValidationError as e:
        raise ConfigParseError(f"Invalid config in {path}: {e}") from e
