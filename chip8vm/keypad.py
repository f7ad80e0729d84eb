"""CHIP-8 hexadecimal keypad."""

import operator

import jax.numpy as jnp
from chip8vm.constants import NUM_KEYS
from chip8vm.errors import InvalidKeyIndex
from chip8vm.state import EmulatorState


def _key_index(index) -> int:
    if isinstance(index, bool):
        raise InvalidKeyIndex(index)
    try:
        key = operator.index(index)
    except TypeError:
        raise InvalidKeyIndex(index) from None
    if not 0 <= key < NUM_KEYS:
        raise InvalidKeyIndex(index)
    return key


def set_key(state: EmulatorState, index: int, pressed: bool) -> EmulatorState:
    """Set key ``index`` (0x0-0xF) pressed or released."""
    key = _key_index(index)
    return state.replace(keypad=state.keypad.at[key].set(bool(pressed)))


def is_pressed(state: EmulatorState, index: int) -> bool:
    """Whether key ``index`` is down. Only the low nibble of ``index`` is used."""
    return bool(state.keypad[int(index) & 0xF])


def first_pressed(state: EmulatorState) -> int | None:
    """Lowest-numbered key that is down, or None."""
    if not bool(jnp.any(state.keypad)):
        return None
    return int(jnp.argmax(state.keypad))
