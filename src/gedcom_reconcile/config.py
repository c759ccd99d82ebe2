import yaml
from pathlib import Path

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "gedcom_reconcile.yml"

class GRConfig:
    def __init__(self, data):
        self.paths = data.get("paths", {})
        self.logging = data.get("logging", {})
        self.parsing = data.get("parsing", {})
        self.matching = data.get("matching", {})
        self.debug = data.get("debug", False)

    def close_scopes(self, override=None):
        if override is not None:
            return override
        return bool(self.parsing.get("close_scopes", False))

    def key_options(self, strict_place=None):
        """Build comparison-key options from the ``matching`` section."""
        from gedcom_reconcile.matching.keys import KeyOptions

        if strict_place is None:
            strict_place = bool(self.matching.get("strict_place", False))
        return KeyOptions(
            delimiter=str(self.matching.get("key_delimiter", "|")),
            strict_place=strict_place,
        )

def load_config(path=None) -> 'GRConfig':
    config_path = Path(path) if path is not None else CONFIG_PATH
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return GRConfig(data)

_config_cache = None

def get_config() -> 'GRConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache
