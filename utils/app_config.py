"""Pre-DB bootstrap configuration. Zero imports from the rest of the app.

Stores user preferences that must be known before opening the DB (e.g. db_folder).
Config lives in ~/.front_counter/config.json to avoid a bootstrapping problem.
"""
import json
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".front_counter"
CONFIG_FILE = CONFIG_DIR / "config.json"
DB_ENV_VAR = "FRONT_COUNTER_DB"


def load_config(config_file: Path = CONFIG_FILE) -> dict:
    """Returns {} on missing or corrupt file, never raises."""
    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable config %s: %s", config_file, e)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(config: dict, config_file: Path = CONFIG_FILE) -> None:
    """Creates the config dir if needed; atomic write via .tmp + os.replace()."""
    config_file.parent.mkdir(parents=True, exist_ok=True)
    tmp = config_file.with_suffix(".tmp")
    try:
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(config, f, indent=2)
        os.replace(tmp, config_file)
    except OSError as e:
        logger.error("Could not save config %s: %s", config_file, e)
        tmp.unlink(missing_ok=True)


def get_db_folder(config_file: Path = CONFIG_FILE) -> str | None:
    """Return config["db_folder"] or None if not set."""
    return load_config(config_file).get("db_folder")


def set_db_folder(path: str | None, config_file: Path = CONFIG_FILE) -> None:
    """Update db_folder in config and save."""
    config = load_config(config_file)
    if path is None:
        config.pop("db_folder", None)
    else:
        config["db_folder"] = path
    save_config(config, config_file)


def get_db_path_override() -> str | None:
    """Explicit DB file path from the environment, if any."""
    return os.environ.get(DB_ENV_VAR) or None
