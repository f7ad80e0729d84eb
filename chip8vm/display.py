"""CHIP-8 display buffer operations."""

import jax.numpy as jnp
from chip8vm.state import EmulatorState
from chip8vm.constants import SCREEN_WIDTH, SCREEN_HEIGHT, SPRITE_WIDTH, FLAG_REGISTER

# Shift amounts that pick out each column of a sprite row, leftmost pixel first
_COLUMN_SHIFTS = jnp.arange(SPRITE_WIDTH - 1, -1, -1)


def clear(state: EmulatorState) -> EmulatorState:
    """Turn every pixel off."""
    return state.replace(display=jnp.zeros_like(state.display))


def sprite_bits(rows: jnp.ndarray) -> jnp.ndarray:
    """Expand sprite bytes of shape (n,) into a boolean (n, 8) bit grid."""
    rows = jnp.asarray(rows, dtype=jnp.uint8)
    return ((rows[:, None] >> _COLUMN_SHIFTS[None, :]) & 1).astype(jnp.bool_)


def draw_sprite(state: EmulatorState, x: int, y: int, rows: jnp.ndarray) -> EmulatorState:
    """XOR sprite rows onto the display at (x, y) and set VF on collision.

    Coordinates wrap around both screen edges pixel by pixel. VF becomes 1 if
    any pixel that was on is turned off, 0 otherwise.
    """
    bits = sprite_bits(rows)
    if bits.shape[0] == 0:
        return state.replace(V=state.V.at[FLAG_REGISTER].set(0))

    cols = (int(x) + jnp.arange(SPRITE_WIDTH)) % SCREEN_WIDTH
    lines = (int(y) + jnp.arange(bits.shape[0])) % SCREEN_HEIGHT
    index = (cols[None, :], lines[:, None])

    current = state.display[index]
    collision = jnp.any(current & bits)

    return state.replace(
        display=state.display.at[index].set(current ^ bits),
        V=state.V.at[FLAG_REGISTER].set(jnp.astype(collision, jnp.uint8)),
    )


def snapshot(state: EmulatorState) -> jnp.ndarray:
    """Row-major copy of the display as 2048 values of 0 or 1 (index = y * 64 + x)."""
    return jnp.astype(state.display.T, jnp.uint8).reshape(-1)
