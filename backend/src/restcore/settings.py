from __future__ import annotations

from dataclasses import dataclass, field
import os
from pathlib import Path

_PACKAGE_DIR = Path(__file__).resolve().parent


def _load_local_env_file() -> None:
    """Load variables from .env when present, without overriding exported ones."""
    env_path = Path('.env')
    if not env_path.exists():
        return

    for raw_line in env_path.read_text(encoding='utf-8').splitlines():
        line = raw_line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, value = line.split('=', 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        os.environ.setdefault(key, value)


_load_local_env_file()


@dataclass(frozen=True)
class NamespaceSettings:
    models: str = "restcore.resources.models"
    entities: str = "restcore.resources.entities"
    default_entity: str = "restcore.data.entity.Entity"
    controllers: str = "restcore.resources.controllers."


@dataclass(frozen=True)
class ApplicationSettings:
    entities_dir: Path = _PACKAGE_DIR / "resources" / "entities"


@dataclass(frozen=True)
class Settings:
    app_name: str
    app_version: str
    debug: bool
    database_url: str
    namespaces: NamespaceSettings = field(default_factory=NamespaceSettings)
    application: ApplicationSettings = field(default_factory=ApplicationSettings)


def load_settings() -> Settings:
    defaults = NamespaceSettings()
    return Settings(
        app_name=os.getenv("APP_NAME", "restcore"),
        app_version=os.getenv("APP_VERSION", "0.1.0"),
        debug=os.getenv("APP_DEBUG", "false").lower() in {"1", "true", "yes"},
        database_url=os.getenv("DATABASE_URL", "sqlite://"),
        namespaces=NamespaceSettings(
            models=os.getenv("RESTCORE_MODELS_NAMESPACE", defaults.models),
            entities=os.getenv("RESTCORE_ENTITIES_NAMESPACE", defaults.entities),
            default_entity=os.getenv("RESTCORE_DEFAULT_ENTITY", defaults.default_entity),
            controllers=os.getenv("RESTCORE_CONTROLLERS_NAMESPACE", defaults.controllers),
        ),
        application=ApplicationSettings(
            entities_dir=Path(os.getenv("RESTCORE_ENTITIES_DIR", str(ApplicationSettings().entities_dir))),
        ),
    )
