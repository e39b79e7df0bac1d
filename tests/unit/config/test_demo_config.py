import pytest
from pydantic import ValidationError

from perfclock.config.config_loader import ConfigLoader, load_config
from perfclock.config.configs import DEFAULT_RULES, ClockConfig, DemoConfig, FizzBuzzConfig


def test_defaults():
    config = DemoConfig()
    assert config.clock.source == "host"
    assert config.fizzbuzz.start == 1
    assert config.fizzbuzz.stop == 100
    assert config.fizzbuzz.rules == DEFAULT_RULES


def test_stop_before_start_rejected():
    with pytest.raises(ValidationError):
        FizzBuzzConfig(start=5, stop=4)


def test_non_positive_divisor_rejected():
    with pytest.raises(ValidationError):
        FizzBuzzConfig(rules=((0, "Zero"),))


def test_unknown_clock_source_rejected():
    with pytest.raises(ValidationError):
        ClockConfig(source="gps")


def test_load_config_from_toml(tmp_path):
    path = tmp_path / "demo.toml"
    path.write_text(
        '[clock]\nsource = "wall"\n\n'
        '[fizzbuzz]\nstart = 1\nstop = 15\nrules = [[2, "Foo"], [7, "Bar"]]\n',
        encoding="utf-8",
    )

    config = load_config(path)

    assert config.clock.source == "wall"
    assert config.fizzbuzz.stop == 15
    assert config.fizzbuzz.rules == ((2, "Foo"), (7, "Bar"))


def test_load_config_rejects_unknown_keys(tmp_path):
    path = tmp_path / "demo.toml"
    path.write_text("[clock]\nresolution = 2\n", encoding="utf-8")
    with pytest.raises(ValidationError):
        load_config(path)


def test_missing_file_raises(tmp_path):
    loader = ConfigLoader(base_dir=str(tmp_path))
    with pytest.raises(FileNotFoundError):
        loader.load("missing.toml")
