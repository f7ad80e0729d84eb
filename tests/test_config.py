"""Tests for machine configuration."""

import pytest
from omegaconf import OmegaConf
from chip8vm import MachineConfig, load_config


def test_defaults():
    config = load_config()
    assert config.cycles_per_tick == 1
    assert config.timer_decrements_per_tick == 1
    assert config.seed == 0
    assert config.log_level == "WARNING"


def test_partial_dict():
    config = load_config({"cycles_per_tick": 11, "log_level": "debug"})
    assert isinstance(config, MachineConfig)
    assert config.cycles_per_tick == 11
    assert config.timer_decrements_per_tick == 1
    assert config.log_level == "DEBUG"


def test_dictconfig():
    config = load_config(OmegaConf.create({"seed": 42}))
    assert config.seed == 42


def test_from_rates():
    assert MachineConfig.from_rates(700, 60).cycles_per_tick == 11
    assert MachineConfig.from_rates(30, 60).cycles_per_tick == 1


@pytest.mark.parametrize("fps", [0, -60])
def test_from_rates_rejects_fps(fps):
    with pytest.raises(ValueError):
        MachineConfig.from_rates(700, fps)


@pytest.mark.parametrize("cfg", [
    {"cycles_per_tick": 0},
    {"timer_decrements_per_tick": -1},
    {"log_level": "LOUD"},
    {"cycles_per_tick": "fast"},
    {"unknown_key": 1},
])
def test_invalid(cfg):
    with pytest.raises(ValueError):
        load_config(cfg)
