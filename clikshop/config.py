"""Application configuration."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

try:
    import tomllib
except ModuleNotFoundError:
    tomllib = None


@dataclass
class TelegramConfig:
    name: str = ""
    chat_id: int = 0
    token: str = ""


@dataclass
class TranslatorConfig:
    folder_id: str = ""
    oauth_token: str = ""


@dataclass
class PingLinks:
    massimo_dutti: list[str] = field(default_factory=list)
    hm: list[str] = field(default_factory=list)
    zara: list[str] = field(default_factory=list)
    sneaksup: list[str] = field(default_factory=list)
    trendyol: list[str] = field(default_factory=list)


@dataclass
class Config:
    telegram: TelegramConfig = field(default_factory=TelegramConfig)
    translator: TranslatorConfig = field(default_factory=TranslatorConfig)
    ping_links: PingLinks = field(default_factory=PingLinks)
    proxy: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Config:
        telegram = data.get("telegram") or {}
        translator = data.get("translator") or {}
        links = (data.get("updater") or {}).get("ping_links") or {}
        return cls(
            telegram=TelegramConfig(
                name=telegram.get("name", ""),
                chat_id=int(telegram.get("chat_id", 0) or 0),
                token=telegram.get("token", ""),
            ),
            translator=TranslatorConfig(
                folder_id=translator.get("folder_id", ""),
                oauth_token=translator.get("oauth_token", ""),
            ),
            ping_links=PingLinks(
                massimo_dutti=list(links.get("massimo_dutti") or []),
                hm=list(links.get("hm") or []),
                zara=list(links.get("zara") or []),
                sneaksup=list(links.get("sneaksup") or []),
                trendyol=list(links.get("trendyol") or []),
            ),
            proxy=list(data.get("proxy") or []),
        )


def _load_yaml(text: str) -> Any:
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ValueError(f"invalid YAML configuration: {exc}") from exc


def _load_toml(text: str) -> Any:
    if tomllib is None:
        raise ValueError("TOML configuration needs Python 3.11 or newer")
    try:
        return tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise ValueError(f"invalid TOML configuration: {exc}") from exc


def _decode(path: Path, text: str) -> Any:
    suffix = path.suffix.lower()
    if suffix == ".json":
        return json.loads(text)
    if suffix in (".yaml", ".yml"):
        return _load_yaml(text)
    if suffix == ".toml":
        return _load_toml(text)
    try:
        return json.loads(text)
    except ValueError:
        return _load_yaml(text)


def parse_config(path: str | Path) -> Config:
    """Load configuration from a JSON, YAML or TOML file; a missing file gives defaults."""
    path = Path(path)
    if not path.exists():
        return Config()
    data = _decode(path, path.read_text(encoding="utf-8"))
    if data is None:
        return Config()
    if not isinstance(data, dict):
        raise ValueError(f"configuration in {path} is not a mapping")
    return Config.from_dict(data)