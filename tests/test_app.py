import pytest
from absl import flags

from app import FLAGS, READINGS, main, replay_interval, run_demo
from mvc.model import WeatherStation
from mvc.view import CurrentConditionsDisplay, ForecastDisplay, StatisticsDisplay, WORSENING, IMPROVING


def test_demo_scenario(capsys):
    station = WeatherStation()
    current = CurrentConditionsDisplay("Current Conditions Display")
    stats = StatisticsDisplay("Statistics Display")
    forecast = ForecastDisplay("Forecast Display")
    for display in (current, stats, forecast):
        station.attach(display)

    run_demo(station, current)

    # detached after the third reading
    assert (current.temperature, current.humidity) == (22.0, 90.0)
    assert stats.temperatures == [r[0] for r in READINGS]
    assert stats.stats() == (25.5, 28.0, 22.0)
    assert forecast.forecast() == IMPROVING
    assert station.observers == (stats, forecast)

    out = capsys.readouterr().out
    assert out.count("[Current Conditions Display]") == 3
    assert out.count("[Statistics Display]") == 4
    assert f"Forecast: {WORSENING}" in out


@pytest.fixture
def parse_flags():
    yield lambda *args: FLAGS(["weather-station", *args])
    FLAGS.unparse_flags()


@pytest.mark.parametrize("arg", ["--hz=0", "--hz=-5", "--port=0", "--port=70000", "--interval=-1"])
def test_bad_flag_values_are_rejected(parse_flags, arg):
    with pytest.raises(flags.IllegalFlagValueError):
        parse_flags(arg)


@pytest.mark.parametrize(
    "args, expected",
    [
        ((), 0.0),
        (("--mode=json",), 0.0),
        (("--mode=websocket",), 1.0),
        (("--mode=websocket", "--interval=0.25"), 0.25),
    ],
)
def test_replay_interval_default_depends_on_mode(parse_flags, args, expected):
    parse_flags(*args)

    assert replay_interval() == expected


def test_main_json_mode_prints_payloads(parse_flags, capsys):
    parse_flags("--mode=json")

    main(["weather-station"])

    out = capsys.readouterr().out
    assert out.count("[JSON View] ") == 4
    assert out.count("[Current Conditions Display]") == 3
    assert '"temperature":28.0' in out


def test_main_console_mode_has_no_json(parse_flags, capsys):
    parse_flags()

    main(["weather-station"])

    out = capsys.readouterr().out
    assert "[JSON View]" not in out
    assert out.count("[Statistics Display]") == 4
