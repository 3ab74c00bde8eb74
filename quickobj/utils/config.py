"""
Простой загрузчик/сохранитель настроек загрузчика в формате JSON.
Если файл не задан или не найден – используются значения по‑умолчанию.
"""

import copy
import json
from pathlib import Path
from quickobj.utils.logger import logger

DEFAULT_CONFIG = {
    "obj_extensions": [".obj"],
    "mtl_extensions": [".mtl"],
    "load_materials": True,
    "strict_faces": True,
    "unnamed_group": "unnamed",
    "unnamed_material": "none",
    "encoding": "utf-8",
    "log_level": "INFO",
}


class Config:
    """Настройки одного экземпляра `Loader`."""

    def __init__(self, path: str = None, **overrides):
        self.path = Path(path) if path else None
        self.data = copy.deepcopy(DEFAULT_CONFIG)
        self._load()
        self.data.update(overrides)

    def _load(self):
        if self.path is None:
            return
        if self.path.is_file():
            try:
                with self.path.open("r", encoding="utf-8") as f:
                    loaded = json.load(f)
                if not isinstance(loaded, dict):
                    raise ValueError(f"expected a JSON object, got {type(loaded).__name__}")
                self.data.update(loaded)
                logger.info(f"[Config] Loaded configuration from {self.path}")
            except (OSError, ValueError) as exc:
                logger.error(f"[Config] Failed to read config: {exc}")
                self.data = copy.deepcopy(DEFAULT_CONFIG)
        else:
            logger.info(f"[Config] No config file at {self.path} – using defaults.")

    def save(self):
        if self.path is None:
            logger.error("[Config] Unable to save config: no path set")
            return
        try:
            with self.path.open("w", encoding="utf-8") as f:
                json.dump(self.data, f, indent=4)
            logger.info("[Config] Configuration saved.")
        except OSError as exc:
            logger.error(f"[Config] Unable to save config: {exc}")

    def __getitem__(self, key):
        return self.data.get(key, DEFAULT_CONFIG.get(key))

    def __setitem__(self, key, value):
        self.data[key] = value

    def get(self, key, default=None):
        return self.data.get(key, default)
