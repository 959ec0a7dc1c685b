from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Mapping


@dataclass
class TelemetryService:
    path: Path

    def log(self, event_type: str, payload: Mapping[str, object]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        rec = {
            "ts": datetime.now(tz=timezone.utc).isoformat(),
            "type": event_type,
            "payload": dict(payload),
        }
        with self.path.open("a", encoding="utf-8") as f:
            f.write(json.dumps(rec, ensure_ascii=False) + "\n")

    def on_game_event(self, event: Mapping[str, object]) -> None:
        """Engine listener: records completions and new records."""
        etype = event.get("type")
        if etype == "GAME_COMPLETED":
            self.log("game_completed", {k: v for k, v in event.items() if k != "type"})
        elif etype == "NEW_BEST_TIME":
            self.log("new_best_time", {k: v for k, v in event.items() if k != "type"})
