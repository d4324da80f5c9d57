import os
from pathlib import Path

import yaml

PROJECT_ROOT = Path(__file__).resolve().parents[2]
CONFIG_PATH = PROJECT_ROOT / "config" / "family_site.yml"

DATA_DIR_ENV = "FAMILY_SITE_DATA_DIR"


class SiteConfig:
    def __init__(self, data):
        self.paths = data.get("paths", {}) or {}
        self.logging = data.get("logging", {}) or {}
        self.debug = data.get("debug", False)

    @property
    def data_dir(self) -> Path:
        """Data directory, with the environment override taking precedence."""
        raw = os.environ.get(DATA_DIR_ENV) or self.paths.get("data_dir") or "data"
        path = Path(raw)
        if not path.is_absolute():
            path = PROJECT_ROOT / path
        return path


def load_config() -> 'SiteConfig':
    if not CONFIG_PATH.exists():
        raise FileNotFoundError(f"Config file not found: {CONFIG_PATH}")

    with open(CONFIG_PATH, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return SiteConfig(data)

_config_cache = None

def get_config() -> 'SiteConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache
