"""CHIP-8 virtual machine package."""

from chip8vm.state import EmulatorState, create_state
from chip8vm.emulator import execute, load_rom, fetch, step
from chip8vm.decode import DecodedInstruction, Form, decode
from chip8vm.constants import *
from chip8vm.errors import (
    Chip8Error, MemoryOutOfBounds, StackOverflow, StackUnderflow,
    UnknownInstruction, OversizeImage, InvalidKeyIndex, HaltedError,
)
from chip8vm.config import MachineConfig, load_config
from chip8vm.machine import Machine, MachineStatus

__all__ = [
    "EmulatorState",
    "create_state",
    "fetch",
    "execute",
    "step",
    "load_rom",
    "DecodedInstruction",
    "Form",
    "decode",
    "PROGRAM_START",
    "FONT_START",
    "SCREEN_WIDTH",
    "SCREEN_HEIGHT",
    "MAX_PROGRAM_SIZE",
    "Chip8Error",
    "MemoryOutOfBounds",
    "StackOverflow",
    "StackUnderflow",
    "UnknownInstruction",
    "OversizeImage",
    "InvalidKeyIndex",
    "HaltedError",
    "MachineConfig",
    "load_config",
    "Machine",
    "MachineStatus",
]
