"""CHIP-8 delay and sound timers."""

import jax.numpy as jnp
from chip8vm.state import EmulatorState


def _decrement(timer: jnp.ndarray) -> jnp.ndarray:
    # uint8 subtraction would wrap, so floor in a wider type first
    return jnp.astype(jnp.maximum(jnp.astype(timer, jnp.int32) - 1, 0), jnp.uint8)


def advance_timers(state: EmulatorState) -> EmulatorState:
    """Decrement both timers by one, stopping at zero."""
    return state.replace(
        delay_timer=_decrement(state.delay_timer),
        sound_timer=_decrement(state.sound_timer),
    )


def sound_active(state: EmulatorState) -> bool:
    """Whether the host should be playing the tone."""
    return bool(state.sound_timer > 0)
