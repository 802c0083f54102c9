import json
from datetime import datetime

from mvc.model import WeatherStation
from payload.adapter import WeatherJsonAdapter


def _station(t, h, p):
    station = WeatherStation()
    station.set_measurements(t, h, p)
    return station


def test_payload_shape():
    text = WeatherJsonAdapter().to_text(_station(25.0, 65.0, 30.4))
    payload = json.loads(text)

    assert set(payload) == {"ts", "temperature", "humidity", "pressure"}
    assert (payload["temperature"], payload["humidity"], payload["pressure"]) == (25.0, 65.0, 30.4)
    assert payload["ts"].endswith("Z")
    datetime.fromisoformat(payload["ts"][:-1])
    assert " " not in text


def test_rounding():
    payload = json.loads(WeatherJsonAdapter(round_ndigits=2).to_text(_station(21.23456, 64.999, 1013.251)))

    assert payload["temperature"] == 21.23
    assert payload["humidity"] == 65.0
    assert payload["pressure"] == 1013.25
