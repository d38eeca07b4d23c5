import yaml
from pathlib import Path

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "craft_beer.yml"

DEFAULT_RESOURCE = "beer-data.txt"
DEFAULT_ENCODING = "utf-8"


class CBConfig:
    def __init__(self, data):
        self.paths = data.get("paths") or {}
        self.data = data.get("data") or {}
        self.logging = data.get("logging") or {}
        self.debug = bool(data.get("debug", False))

    @property
    def resource(self) -> str:
        return self.data.get("resource") or DEFAULT_RESOURCE

    @property
    def encoding(self) -> str:
        return self.data.get("encoding") or DEFAULT_ENCODING


def load_config(path: Path = CONFIG_PATH) -> 'CBConfig':
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return CBConfig(data)

_config_cache = None

def get_config() -> 'CBConfig':
    global _config_cache
    if _config_cache is None:
        # Installed without the project tree: run on built-in defaults.
        _config_cache = load_config(CONFIG_PATH) if CONFIG_PATH.exists() else CBConfig({})
    return _config_cache
