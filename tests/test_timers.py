"""Tests for delay and sound timers."""

import jax.numpy as jnp
from chip8vm import execute
from chip8vm.timers import advance_timers, sound_active


def test_timers_count_down_to_zero(fresh_state):
    state = execute(fresh_state, 0x6005)  # V0 = 5
    state = execute(state, 0xF015)  # delay = 5
    state = execute(state, 0xF018)  # sound = 5

    for expected in (4, 3, 2, 1, 0):
        state = advance_timers(state)
        assert state.delay_timer == expected
        assert state.sound_timer == expected


def test_timers_floor_at_zero(fresh_state):
    state = advance_timers(fresh_state)
    state = advance_timers(state)

    assert state.delay_timer == 0
    assert state.sound_timer == 0
    assert state.delay_timer.dtype == jnp.uint8


def test_timers_are_independent(fresh_state):
    state = fresh_state.replace(
        delay_timer=jnp.astype(3, jnp.uint8),
        sound_timer=jnp.astype(1, jnp.uint8),
    )
    state = advance_timers(state)

    assert state.delay_timer == 2
    assert state.sound_timer == 0


def test_sound_active(fresh_state):
    assert not sound_active(fresh_state)

    state = execute(fresh_state, 0x6002)
    state = execute(state, 0xF018)  # sound = 2
    assert sound_active(state)

    state = advance_timers(advance_timers(state))
    assert not sound_active(state)
