"""Configuration management for the mealcart application."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

from mealcart.utilities.constants import DEFAULT_TARGET_SERVINGS

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = _env_flag('DEBUG', 'False')
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO').upper()

# Shopping list generation
TARGET_SERVINGS: Final[float] = float(os.getenv('TARGET_SERVINGS', str(DEFAULT_TARGET_SERVINGS)))
# Keep user-added items when a week's list is regenerated
PRESERVE_MANUAL_ITEMS: Final[bool] = _env_flag('PRESERVE_MANUAL_ITEMS', 'True')

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = Path(os.getenv('MEALCART_DATA_DIR', str(BASE_DIR / 'data'))).resolve()
