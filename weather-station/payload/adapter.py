# payload/adapter.py
from abc import ABC, abstractmethod
from datetime import datetime, timezone
import json

from mvc.model import WeatherStation


class IPayloadAdapter(ABC):
    """Converts the station's current measurements into a transport payload (str)."""
    @abstractmethod
    def to_text(self, station: WeatherStation) -> str:
        ...


class WeatherJsonAdapter(IPayloadAdapter):
    """
    Builds the JSON clients consume:
      {
        "ts": "...Z",
        "temperature": ..., "humidity": ..., "pressure": ...
      }
    Options:
      - round_ndigits: optional rounding to keep float noise out of the payload
    """
    def __init__(self, round_ndigits: int | None = None) -> None:
        self.round_ndigits = round_ndigits

    def _num(self, v: float) -> float:
        if self.round_ndigits is not None:
            v = round(float(v), self.round_ndigits)
        return float(v)

    def to_text(self, station: WeatherStation) -> str:
        payload = {
            "ts": datetime.now(timezone.utc).replace(tzinfo=None).isoformat() + "Z",
            "temperature": self._num(station.temperature),
            "humidity": self._num(station.humidity),
            "pressure": self._num(station.pressure),
        }
        return json.dumps(payload, separators=(",", ":"))  # compact
