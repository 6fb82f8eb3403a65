"""
Простой загрузчик/сохранитель конфигурации в формате JSON.
Если файл не найден – используются настройки по‑умолчанию
(файл пишется только явным вызовом save()).
"""

import copy
import json
from pathlib import Path
from obj2webgl.utils.logger import logger

DEFAULT_CONFIG = {
    "index_format": "uint16",      # "uint16" (WebGL 1) или "uint32"
    "log_level": "INFO",
    "emit": {"header": True},
}

INDEX_FORMATS = ("uint16", "uint32")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Config:
    """Singleton‑подобный объект конфигурации."""
    _instance = None

    def __new__(cls, path: str = "obj2webgl.json"):
        if cls._instance is None or cls._instance.path != Path(path):
            cls._instance = super().__new__(cls)
            cls._instance.path = Path(path)
            cls._instance._load()
        return cls._instance

    @classmethod
    def reset(cls):
        """Забыть текущий экземпляр (нужно тестам и CLI с --config)."""
        cls._instance = None

    def _load(self):
        if self.path.is_file():
            try:
                with self.path.open("r", encoding="utf-8") as f:
                    self.data = json.load(f)
                logger.info(f"[Config] Loaded configuration from {self.path}.")
            except (OSError, ValueError) as exc:
                logger.error(f"[Config] Failed to read config: {exc}")
                self.data = copy.deepcopy(DEFAULT_CONFIG)
        else:
            logger.debug(f"[Config] No config file {self.path} – using defaults.")
            self.data = copy.deepcopy(DEFAULT_CONFIG)

        self._validate()

    def _validate(self):
        """Неверные значения заменяются значениями по‑умолчанию."""
        if not isinstance(self.data, dict):
            logger.warning(f"[Config] {self.path} is not a JSON object – using defaults.")
            self.data = copy.deepcopy(DEFAULT_CONFIG)
            return

        fmt = self.data.get("index_format", DEFAULT_CONFIG["index_format"])
        if fmt not in INDEX_FORMATS:
            logger.warning(f"[Config] Unknown index_format '{fmt}', falling back to uint16.")
            self.data["index_format"] = "uint16"

        level = self.data.get("log_level", DEFAULT_CONFIG["log_level"])
        if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
            logger.warning(f"[Config] Unknown log_level {level!r}, falling back to INFO.")
            self.data["log_level"] = DEFAULT_CONFIG["log_level"]

        emit = self.data.get("emit", DEFAULT_CONFIG["emit"])
        if not isinstance(emit, dict):
            logger.warning(f"[Config] 'emit' must be an object, got {emit!r} – using defaults.")
            self.data["emit"] = copy.deepcopy(DEFAULT_CONFIG["emit"])

    def save(self):
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

    @property
    def wide_indices(self) -> bool:
        return self["index_format"] == "uint32"
