from __future__ import annotations
import json, os
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Callable, List
from pokecards.core.logging import logger, LEVELS

SETTINGS_FILENAME = ".pokecards_settings.json"
DEFAULT_API_URL = "https://pokeapi.co/api/v2/"

ENV_API_URL = "POKECARDS_API_URL"
ENV_LOG_LEVEL = "POKECARDS_LOG_LEVEL"

@dataclass
class SettingsData:
    log_level: str = "INFO"        # DEBUG / INFO / WARN / ERROR
    debug: bool = False            # Keep INFO logging visible while the UI runs
    api_base_url: str = DEFAULT_API_URL
    page_offset: int = 0           # First catalog entry fetched
    page_limit: int = 10           # Catalog page size
    request_timeout: float = 10.0  # Seconds per HTTP request
    fetch_workers: int = 8         # Parallel detail fetches for the catalog

    def normalize(self):
        if self.log_level not in LEVELS:
            self.log_level = "INFO"
        if not isinstance(self.api_base_url, str) or not self.api_base_url.strip():
            self.api_base_url = DEFAULT_API_URL
        if not self.api_base_url.endswith("/"):
            self.api_base_url += "/"
        if not isinstance(self.page_offset, int) or self.page_offset < 0:
            self.page_offset = 0
        if not isinstance(self.page_limit, int) or not 1 <= self.page_limit <= 100:
            self.page_limit = 10
        if not isinstance(self.request_timeout, (int, float)) or self.request_timeout <= 0:
            self.request_timeout = 10.0
        if not isinstance(self.fetch_workers, int) or not 1 <= self.fetch_workers <= 32:
            self.fetch_workers = 8

    def apply_env(self, environ=None):
        env = os.environ if environ is None else environ
        url = env.get(ENV_API_URL)
        if url:
            self.api_base_url = url
        lvl = env.get(ENV_LOG_LEVEL)
        if lvl:
            self.log_level = lvl.upper()
        self.normalize()

class Settings:
    def __init__(self, data: SettingsData, path: Path):
        self.data = data
        self.path = path
        self._listeners: List[Callable[[SettingsData], None]] = []

    @classmethod
    def _resolve_path(cls) -> Path:
        home = Path(os.path.expanduser("~"))
        if home.is_dir() and os.access(home, os.W_OK):
            return home / SETTINGS_FILENAME
        return Path.cwd() / SETTINGS_FILENAME

    @classmethod
    def load(cls, path: Path | None = None) -> "Settings":
        path = path or cls._resolve_path()
        if path.exists():
            try:
                raw = json.loads(path.read_text(encoding="utf-8"))
                # Backfill missing fields, ignore unknown ones
                field_names = {f.name for f in fields(SettingsData)}
                data_kwargs = {name: raw[name] for name in field_names if name in raw}
                data = SettingsData(**data_kwargs)
                data.normalize()
                logger.debug("SettingsLoaded", path=str(path))
                return cls(data, path)
            except (OSError, ValueError, TypeError) as e:
                logger.warn("SettingsParseFailedUsingDefaults", path=str(path), error=str(e))
        data = SettingsData()
        data.normalize()
        return cls(data, path)

    def save(self):
        try:
            self.path.write_text(json.dumps(asdict(self.data), indent=2), encoding="utf-8")
            logger.debug("SettingsSaved", path=str(self.path))
        except OSError as e:
            logger.error("SettingsSaveFailed", error=str(e))

    def on_change(self, fn: Callable[[SettingsData], None]):
        self._listeners.append(fn)

    def update(self, **changes):
        for name, value in changes.items():
            if not hasattr(self.data, name):
                raise AttributeError(f"Unknown setting '{name}'")
            setattr(self.data, name, value)
        self.data.normalize()
        self.save()
        self._notify()

    def _notify(self):
        for fn in self._listeners:
            fn(self.data)
