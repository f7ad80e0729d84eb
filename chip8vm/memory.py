"""Bounds-checked CHIP-8 memory access."""

from typing import Sequence

import jax.numpy as jnp
from chip8vm.constants import MEMORY_SIZE
from chip8vm.errors import MemoryOutOfBounds
from chip8vm.state import EmulatorState


def check_range(address: int, length: int = 1) -> None:
    """Raise MemoryOutOfBounds unless [address, address + length) fits in memory."""
    address = int(address)
    if address < 0 or address >= MEMORY_SIZE:
        raise MemoryOutOfBounds(address)
    end = address + length - 1
    if end >= MEMORY_SIZE:
        raise MemoryOutOfBounds(end)


def read_byte(state: EmulatorState, address: int) -> int:
    """Read one byte."""
    check_range(address)
    return int(state.memory[int(address)])


def write_byte(state: EmulatorState, address: int, value: int) -> EmulatorState:
    """Write one byte, truncated to 8 bits."""
    check_range(address)
    return state.replace(memory=state.memory.at[int(address)].set(int(value) & 0xFF))


def read_block(state: EmulatorState, address: int, length: int) -> jnp.ndarray:
    """Read ``length`` consecutive bytes starting at ``address``."""
    if length <= 0:
        return jnp.zeros(0, dtype=jnp.uint8)
    check_range(address, length)
    start = int(address)
    return state.memory[start:start + length]


def write_block(state: EmulatorState, address: int, values: Sequence[int] | jnp.ndarray) -> EmulatorState:
    """Write a block of bytes starting at ``address``."""
    values = jnp.asarray(values, dtype=jnp.uint8)
    if values.size == 0:
        return state
    check_range(address, values.size)
    start = int(address)
    return state.replace(memory=state.memory.at[start:start + values.size].set(values))
