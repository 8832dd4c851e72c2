import json
from dataclasses import dataclass
from datetime import date
from typing import Any

REQUEST_KEY_SERVICE = "service"
REQUEST_KEY_BODY = "body"
REQUEST_KEY_DATE = "date"

# Consumer type the worker fleet routes on.
SERVICE = "FitBitWorker"


@dataclass(frozen=True)
class DispatchRequest:
    """Request message asking the FitBit worker to process one day."""

    date: date
    service: str = SERVICE

    @classmethod
    def for_date(cls, day: date) -> "DispatchRequest":
        return cls(date=day)

    def to_dict(self) -> dict[str, Any]:
        return {
            REQUEST_KEY_SERVICE: self.service,
            REQUEST_KEY_BODY: {REQUEST_KEY_DATE: self.date.isoformat()},
        }

    def to_json(self) -> str:
        """Compact JSON wire form."""
        return json.dumps(self.to_dict(), separators=(",", ":"))
