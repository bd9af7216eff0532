# This file loads list records for admin screens from local JSON exports.
# It exists so the dashboard can run without a backend while the list-view engine stays data-source agnostic.
# Missing or malformed files yield an empty list and a log line rather than a failed page.
# Records are returned as plain dictionaries; screens only read them through field extractors.

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

LOGGER = logging.getLogger("dashboard_admin.data")


class JsonRecordStore:
    def __init__(self, *, data_dir: Path) -> None:
        self.data_dir = data_dir

    def path_for(self, screen_key: str) -> Path:
        return self.data_dir / f"{screen_key}.json"

    def load_records(self, screen_key: str) -> list[dict[str, Any]]:
        path = self.path_for(screen_key)
        if not path.exists():
            LOGGER.info("no record file for %s at %s", screen_key, path)
            return []
        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            LOGGER.warning("could not read %s: %s", path, exc)
            return []

        if isinstance(payload, dict):
            payload = payload.get("data", [])
        if not isinstance(payload, list):
            LOGGER.warning("%s does not contain a list of records", path)
            return []
        return [row for row in payload if isinstance(row, dict)]
