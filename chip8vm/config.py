"""Machine configuration.

Execution rate and timer rate are decoupled: a host that calls ``tick`` once
per 60 Hz frame and wants the usual ~700 instructions per second would use
``MachineConfig.from_rates(700, 60)``.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Union

from omegaconf import DictConfig, OmegaConf
from omegaconf.errors import OmegaConfBaseException

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class MachineConfig:
    """Tick policy and ambient settings for a :class:`~chip8vm.machine.Machine`.

    Attributes:
        cycles_per_tick: Instruction cycles executed by each ``tick`` call
        timer_decrements_per_tick: Timer advances performed after the cycles of each tick
        seed: Seed for the random source used by CXNN
        log_level: Console log level of the machine logger
    """
    cycles_per_tick: int = 1
    timer_decrements_per_tick: int = 1
    seed: int = 0
    log_level: str = "WARNING"

    @classmethod
    def from_rates(cls, instruction_frequency: int = 700, fps: int = 60, **kwargs) -> "MachineConfig":
        """Build a config that runs ``instruction_frequency`` instructions per second at ``fps`` ticks per second."""
        if fps < 1:
            raise ValueError(f"fps must be >= 1, got {fps}")
        return load_config({"cycles_per_tick": max(1, instruction_frequency // fps), **kwargs})


ConfigLike = Union[None, MachineConfig, DictConfig, Mapping[str, Any]]


def _validate(config: MachineConfig) -> MachineConfig:
    if config.cycles_per_tick < 1:
        raise ValueError(f"cycles_per_tick must be >= 1, got {config.cycles_per_tick}")
    if config.timer_decrements_per_tick < 0:
        raise ValueError(
            f"timer_decrements_per_tick must be >= 0, got {config.timer_decrements_per_tick}"
        )
    level = config.log_level.upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"log_level must be one of {LOG_LEVELS}, got {config.log_level!r}")
    config.log_level = level
    return config


def load_config(cfg: ConfigLike = None) -> MachineConfig:
    """Merge ``cfg`` onto the defaults and validate the result.

    Args:
        cfg: ``None`` for defaults, a ``MachineConfig``, or a dict / ``DictConfig``
            holding a subset of its fields

    Returns:
        Validated MachineConfig

    Raises:
        ValueError: on unknown keys, wrongly typed values or out-of-range values
    """
    if cfg is None:
        return MachineConfig()

    schema = OmegaConf.structured(MachineConfig)
    try:
        merged = OmegaConf.merge(schema, cfg)
        config = OmegaConf.to_object(merged)
    except OmegaConfBaseException as e:
        raise ValueError(f"invalid machine config: {e}") from e
    return _validate(config)
