"""Host-facing CHIP-8 machine.

The host owns the loop: it constructs a :class:`Machine`, loads a program,
then calls :meth:`Machine.tick` on its own cadence and forwards key events
through :meth:`Machine.set_key` between ticks::

    machine = Machine(MachineConfig.from_rates(700, 60))
    machine.load(rom_bytes)
    while running:
        pixels = machine.tick()       # 2048 values, index = y * 64 + x
        render(pixels)
        if machine.sound_active():
            beep()
"""

import enum
from typing import Optional

import jax
import jax.numpy as jnp
from tqdm import tqdm

from chip8vm.config import ConfigLike, load_config
from chip8vm.display import snapshot
from chip8vm.emulator import load_rom, step
from chip8vm.errors import Chip8Error, HaltedError
from chip8vm.keypad import set_key
from chip8vm.logging import MachineLogger
from chip8vm.state import EmulatorState, create_state
from chip8vm.timers import advance_timers, sound_active


class MachineStatus(enum.Enum):
    """Lifecycle of a machine."""
    UNINITIALIZED = "uninitialized"
    READY = "ready"
    HALTED = "halted"


class Machine:
    """A single CHIP-8 machine exclusively owned by its host.

    Attributes:
        config: Tick policy and ambient settings
        logger: Console logger for lifecycle events
        state: Last fully applied emulator state
        status: Current lifecycle status
        cycles: Instruction cycles completed since the last load
        last_error: Error that halted the machine, if any
    """

    def __init__(self, config: ConfigLike = None, logger: Optional[MachineLogger] = None):
        self.config = load_config(config)
        self.logger = logger or MachineLogger(log_level=self.config.log_level)
        self.state: EmulatorState = create_state(self._rng())
        self.status = MachineStatus.UNINITIALIZED
        self.cycles = 0
        self.last_error: Optional[Chip8Error] = None

    def _rng(self) -> jax.Array:
        return jax.random.PRNGKey(self.config.seed)

    @property
    def halted(self) -> bool:
        return self.status is MachineStatus.HALTED

    def load(self, image: bytes) -> None:
        """Reset every component and load ``image`` at 0x200.

        Raises:
            OversizeImage: if ``image`` is longer than 3584 bytes; the machine is left as it was.
            TypeError, ValueError: if ``image`` is not a sequence of byte values; likewise.
        """
        image = bytes(image)
        self.state = load_rom(self.state, image, rng=self._rng())
        self.status = MachineStatus.READY
        self.cycles = 0
        self.last_error = None
        self.logger.log_load(len(image))

    def tick(self) -> jnp.ndarray:
        """Run one host tick and return the display snapshot.

        Executes ``config.cycles_per_tick`` instruction cycles, then advances
        the timers ``config.timer_decrements_per_tick`` times. Cycles that
        completed before a failure stay committed.

        Raises:
            HaltedError: if no program is loaded or a previous tick failed.
            Chip8Error: the executor error that halted the machine during this tick.
        """
        if self.status is not MachineStatus.READY:
            if self.status is MachineStatus.UNINITIALIZED:
                raise HaltedError("no program loaded")
            raise HaltedError(f"machine halted by {type(self.last_error).__name__}; load a program to restart")

        debug = self.logger.is_enabled_for("DEBUG")
        for _ in range(self.config.cycles_per_tick):
            try:
                state, instruction = step(self.state)
            except Chip8Error as e:
                self.status = MachineStatus.HALTED
                self.last_error = e
                self.logger.log_halt(e, self.state)
                raise
            if debug:
                self.logger.log_instruction(int(self.state.pc), instruction)
            self.state = state
            self.cycles += 1

        for _ in range(self.config.timer_decrements_per_tick):
            self.state = advance_timers(self.state)

        return self.snapshot()

    def run(self, n_ticks: int, show_progress: bool = False) -> jnp.ndarray:
        """Tick ``n_ticks`` times without a host loop and return the final snapshot."""
        ticks = range(n_ticks)
        if show_progress:
            ticks = tqdm(ticks, desc="chip8vm", unit="tick")
        pixels = self.snapshot()
        for _ in ticks:
            pixels = self.tick()
        return pixels

    def set_key(self, index: int, pressed: bool) -> None:
        """Press or release key ``index`` (0x0-0xF).

        Raises:
            InvalidKeyIndex: if ``index`` is outside 0-15.
        """
        self.state = set_key(self.state, index, pressed)

    def sound_active(self) -> bool:
        """Whether the sound timer is running."""
        return sound_active(self.state)

    def snapshot(self) -> jnp.ndarray:
        """Display of the last fully applied state, 2048 values of 0 or 1."""
        return snapshot(self.state)

    def memory(self) -> jnp.ndarray:
        """The 4096 bytes of memory."""
        return self.state.memory
