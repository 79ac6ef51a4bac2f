from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

from restcore.settings import NamespaceSettings, load_settings


def test_load_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("RESTCORE_MODELS_NAMESPACE", "RESTCORE_ENTITIES_DIR", "DATABASE_URL"):
        monkeypatch.delenv(name, raising=False)

    settings = load_settings()

    assert settings.namespaces == NamespaceSettings()
    assert settings.database_url == "sqlite://"
    assert settings.application.entities_dir.name == "entities"


def test_load_settings_reads_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("RESTCORE_MODELS_NAMESPACE", "shop.models")
    monkeypatch.setenv("RESTCORE_DEFAULT_ENTITY", "shop.entity.BaseEntity")
    monkeypatch.setenv("RESTCORE_ENTITIES_DIR", str(tmp_path))
    monkeypatch.setenv("APP_DEBUG", "yes")

    settings = load_settings()

    assert settings.namespaces.models == "shop.models"
    assert settings.namespaces.default_entity == "shop.entity.BaseEntity"
    assert settings.application.entities_dir == tmp_path
    assert settings.debug is True


def test_settings_are_immutable() -> None:
    settings = load_settings()

    with pytest.raises(FrozenInstanceError):
        settings.namespaces.models = "other"  # type: ignore[misc]
