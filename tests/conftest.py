"""Test configuration and fixtures for CHIP-8 machine tests."""

import pytest
import jax.numpy as jnp
from chip8vm import create_state, Machine, MachineConfig


@pytest.fixture
def fresh_state():
    """Provide a fresh emulator state for each test."""
    return create_state()


@pytest.fixture
def machine():
    """Provide a machine with the default one-cycle-per-tick policy."""
    return Machine(MachineConfig())


def setup_sprite_in_memory(state, address, sprite_bytes):
    """Helper to put sprite data in memory."""
    return state.replace(
        memory=state.memory.at[address:address+len(sprite_bytes)].set(
            jnp.array(sprite_bytes, dtype=jnp.uint8)
        )
    )


def assemble(*instructions):
    """Helper to turn 16-bit opcodes into a big-endian program image."""
    return b"".join(op.to_bytes(2, "big") for op in instructions)
