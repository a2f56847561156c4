# === FILE: health_probe/config.py ===
"""
Модуль для загрузки и валидации конфигурации HealthProbe.
Используется Pydantic для описания схемы и проверки данных.

Без файла конфигурации действуют значения по умолчанию: локальный
Selenium hub и страница /health локального сервиса.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, List, Literal, Union

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    HttpUrl,
    field_validator,
    model_validator,
)

DEFAULT_HUB_URL = "http://localhost:4444/wd/hub"
DEFAULT_TARGET_URL = "http://localhost:3000/health"


class ProbeConfig(BaseModel):
    """Конфигурация одного запуска проверки."""
    model_config = ConfigDict(extra="forbid", frozen=True, validate_default=True)

    hub_url: HttpUrl = Field(
        DEFAULT_HUB_URL, description="Адрес WebDriver-сервиса (Selenium Grid / standalone)."
    )
    target_url: HttpUrl = Field(
        DEFAULT_TARGET_URL, description="Страница, текст которой проверяется."
    )
    browser: Literal["chrome"] = Field("chrome", description="Запрашиваемый браузер.")
    headless_args: List[str] = Field(
        default_factory=lambda: ["--headless=new"],
        description="Аргументы командной строки браузера.",
    )

    @field_validator("hub_url", mode="before")
    def _strip_trailing_slash(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.rstrip("/")
        return v

    @model_validator(mode="after")
    def _check_headless_args(self) -> ProbeConfig:
        blank = [arg for arg in self.headless_args if not arg.strip()]
        if blank:
            raise ValueError("headless_args не может содержать пустые строки")
        return self

    @property
    def hub(self) -> str:
        """hub_url без завершающего слеша (HttpUrl его добавляет к пустому пути)."""
        return str(self.hub_url).rstrip("/")

    @property
    def target(self) -> str:
        return str(self.target_url)


# значения по умолчанию поставляются вместе с пакетом, рабочий каталог не учитывается
_DEFAULT_CFG = Path(__file__).with_name("default.yaml")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Неправильный YAML в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень YAML должен быть mapping, получено {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Неправильный JSON в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень JSON должен быть mapping, получено {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None] = None) -> ProbeConfig:
    """
    Читает YAML или JSON и возвращает проверенный объект ProbeConfig.

    Если path не задан, читает default.yaml из пакета; если его нет, возвращает
    значения по умолчанию. Явно указанный, но несуществующий файл
    приводит к FileNotFoundError.
    """
    if path is None:
        if not _DEFAULT_CFG.is_file():
            return ProbeConfig()
        path_obj = _DEFAULT_CFG
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Неподдерживаемый формат конфига: {suffix}")

    return ProbeConfig(**data)


def override_config(config: ProbeConfig, **overrides: Any) -> ProbeConfig:
    """Возвращает копию config с заменёнными полями (None игнорируется), с повторной валидацией."""
    update = {k: v for k, v in overrides.items() if v is not None}
    if not update:
        return config
    data = config.model_dump(mode="json")
    data.update(update)
    return ProbeConfig(**data)
