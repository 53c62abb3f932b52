"""Exchange rates from the Central Bank of Russia daily feed."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import requests

DAILY_URL = "https://www.cbr-xml-daily.ru/daily_json.js"
_TIMEOUT = 30


@dataclass(frozen=True)
class Currency:
    """One currency entry of the daily feed."""

    id: str = ""
    num_code: str = ""
    char_code: str = ""
    nominal: int = 0
    name: str = ""
    value: float = 0.0
    previous: float = 0.0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Currency:
        data = data or {}
        return cls(
            id=data.get("ID", ""),
            num_code=data.get("NumCode", ""),
            char_code=data.get("CharCode", ""),
            nominal=int(data.get("Nominal", 0) or 0),
            name=data.get("Name", ""),
            value=float(data.get("Value", 0.0) or 0.0),
            previous=float(data.get("Previous", 0.0) or 0.0),
        )


def _decode(payload: bytes | str | Mapping[str, Any]) -> Mapping[str, Any]:
    if isinstance(payload, Mapping):
        return payload
    data = json.loads(payload)
    if not isinstance(data, Mapping):
        raise ValueError("exchange rate feed is not a JSON object")
    return data


def parse_lira(payload: bytes | str | Mapping[str, Any]) -> float:
    """Roubles per one Turkish lira from a daily feed document (quoted per 10 lira)."""
    valutes = _decode(payload).get("Valute") or {}
    return Currency.from_dict(valutes.get("TRY")).value / 10


class CentralBank:
    """Client for the daily exchange rate feed."""

    def __init__(self, session: requests.Session | None = None, url: str = DAILY_URL) -> None:
        self.session = session or requests.Session()
        self.url = url

    def lira(self) -> float:
        """Fetch the feed and return the rouble price of one lira."""
        response = self.session.get(self.url, timeout=_TIMEOUT)
        return parse_lira(response.content)