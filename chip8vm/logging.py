"""Console logging for the CHIP-8 machine.

Lines look like ``[    0.42s][   ERROR][chip8vm] Machine halted: ...``. Only
program loads, halts and (at DEBUG) every executed opcode are logged.
"""

import sys
import time
from typing import Optional

from chip8vm.config import LOG_LEVELS
from chip8vm.state import EmulatorState
from chip8vm.stack import depth

_COLORS = {
    "DEBUG": "\033[36m",
    "INFO": "\033[32m",
    "WARNING": "\033[33m",
    "ERROR": "\033[31m",
    "CRITICAL": "\033[35m",
}
_RESET = "\033[0m"


def format_registers(state: EmulatorState) -> str:
    """One-line summary of registers, timers and stack depth."""
    registers = " ".join(f"V{i:X}={int(v):02X}" for i, v in enumerate(state.V.tolist()))
    return (
        f"PC={int(state.pc):03X} I={int(state.I):03X} SP={depth(state.stack)} "
        f"DT={int(state.delay_timer)} ST={int(state.sound_timer)} {registers}"
    )


class MachineLogger:
    """Levelled console logger for machine lifecycle events.

    Args:
        name: Tag printed on every line
        log_level: Lowest level printed, one of DEBUG, INFO, WARNING, ERROR, CRITICAL
        use_colors: Colour the level tag when stdout is a terminal
        show_timestamps: Prefix lines with seconds since the logger was created
    """

    def __init__(
        self,
        name: str = "chip8vm",
        log_level: str = "WARNING",
        use_colors: bool = True,
        show_timestamps: bool = True,
    ):
        self.name = name
        self.threshold = LOG_LEVELS.index(log_level.upper())
        self.use_colors = use_colors and hasattr(sys.stdout, "isatty") and sys.stdout.isatty()
        self.show_timestamps = show_timestamps
        self.start_time = time.time()

    def is_enabled_for(self, level: str) -> bool:
        """Whether messages at ``level`` would be printed."""
        return LOG_LEVELS.index(level) >= self.threshold

    def log(self, level: str, message: str):
        """Print ``message`` if ``level`` passes the threshold."""
        if not self.is_enabled_for(level):
            return
        tag = f"[{level:>8s}]"
        if self.use_colors:
            tag = f"{_COLORS[level]}{tag}{_RESET}"
        timestamp = f"[{time.time() - self.start_time:8.2f}s]" if self.show_timestamps else ""
        print(f"{timestamp}{tag}[{self.name}] {message}", flush=True)

    def log_load(self, size: int):
        """Log a successful program load."""
        self.log("INFO", f"Loaded {size}-byte program at 0x200")

    def log_halt(self, error: Exception, state: Optional[EmulatorState] = None):
        """Log the error that halted the machine and, if given, the last committed registers."""
        self.log("ERROR", f"Machine halted: {type(error).__name__}: {error}")
        if state is not None:
            self.log("ERROR", f"  {format_registers(state)}")

    def log_instruction(self, address: int, instruction: int):
        self.log("DEBUG", f"{address:03X}: {instruction:04X}")
