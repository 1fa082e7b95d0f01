"""Configuration helpers for the closet recommender app."""

from dataclasses import dataclass
from pathlib import Path
import os
from typing import Optional

DEFAULT_DB_PATH = "data/closet.db"


@dataclass
class ClosetConfig:
    """Configuration values for the closet app.

    Engine tunables (no-repeat window, result count and the per-slot caps used
    before Cartesian expansion) live here next to the storage and weather
    settings so a deployment can adjust them without code changes.
    """

    wardrobe_db_path: str = DEFAULT_DB_PATH
    default_latitude: Optional[float] = None
    default_longitude: Optional[float] = None
    weather_timeout_seconds: float = 5.0
    days_no_repeat: int = 2
    max_results: int = 3
    candidate_cap: int = 5
    outerwear_cap: int = 3
    environment: str | None = None

    @classmethod
    def from_env(cls) -> "ClosetConfig":
        """Build a config from environment variables or an environment YAML file.

        Environment specific YAML lives in ``config/environments/<env>.yaml`` by
        default and is merged with environment variables, which take precedence.
        """

        env_name = os.getenv("APP_ENV")
        config_path = os.getenv("APP_CONFIG_PATH")
        config_dir = Path(os.getenv("CLOSET_CONFIG_DIR", "config/environments"))
        yaml_config: dict = {}

        if config_path:
            path = Path(config_path)
        elif env_name:
            path = config_dir / f"{env_name}.yaml"
        else:
            path = None

        if path and path.exists():
            yaml_config = cls._load_yaml_config(path)

        def get_value(key: str, default: Optional[str] = None) -> Optional[str]:
            env_key = key.upper()
            return os.getenv(env_key, yaml_config.get(key, default))

        def get_float(key: str) -> Optional[float]:
            raw = get_value(key)
            return float(raw) if raw not in (None, "") else None

        return cls(
            wardrobe_db_path=str(get_value("wardrobe_db_path", DEFAULT_DB_PATH) or DEFAULT_DB_PATH),
            default_latitude=get_float("default_latitude"),
            default_longitude=get_float("default_longitude"),
            weather_timeout_seconds=float(get_value("weather_timeout_seconds", "5.0") or 5.0),
            days_no_repeat=int(get_value("days_no_repeat", "2") or 2),
            max_results=int(get_value("max_results", "3") or 3),
            candidate_cap=int(get_value("candidate_cap", "5") or 5),
            outerwear_cap=int(get_value("outerwear_cap", "3") or 3),
            environment=env_name,
        )

    @staticmethod
    def _load_yaml_config(path: Path) -> dict:
        """Parse a minimal YAML/INI-style config without external dependencies."""

        config: dict[str, str] = {}
        for line in path.read_text().splitlines():
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue
            if ":" not in stripped:
                continue
            key, raw_value = stripped.split(":", 1)
            value = raw_value.strip()
            if (value.startswith("\"") and value.endswith("\"")) or (
                value.startswith("'") and value.endswith("'")
            ):
                value = value[1:-1]
            config[key.strip()] = value
        return config
