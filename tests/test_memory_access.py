"""Tests for bounds-checked memory access."""

import jax.numpy as jnp
import pytest
from chip8vm import MemoryOutOfBounds
from chip8vm.constants import FONT_DATA, FONT_START
from chip8vm.memory import read_byte, write_byte, read_block, write_block


class TestByteAccess:
    """Test single-byte reads and writes."""

    @pytest.mark.parametrize("address", [0x000, 0x1FF, 0x200, 0x7A5, 0xFFF])
    def test_write_then_read(self, fresh_state, address):
        state = write_byte(fresh_state, address, 0xA7)
        assert read_byte(state, address) == 0xA7

    def test_write_truncates_to_byte(self, fresh_state):
        state = write_byte(fresh_state, 0x300, 0x1FF)
        assert read_byte(state, 0x300) == 0xFF

    @pytest.mark.parametrize("address", [-1, 0x1000, 0xFFFF])
    def test_read_out_of_bounds(self, fresh_state, address):
        with pytest.raises(MemoryOutOfBounds) as excinfo:
            read_byte(fresh_state, address)
        assert excinfo.value.address == address

    @pytest.mark.parametrize("address", [-1, 0x1000])
    def test_write_out_of_bounds(self, fresh_state, address):
        with pytest.raises(MemoryOutOfBounds):
            write_byte(fresh_state, address, 1)

    def test_failed_write_leaves_memory(self, fresh_state):
        with pytest.raises(MemoryOutOfBounds):
            write_byte(fresh_state, 0x1000, 1)
        assert jnp.sum(fresh_state.memory[0x200:]) == 0


class TestBlockAccess:
    """Test multi-byte reads and writes."""

    def test_font_is_preloaded(self, fresh_state):
        block = read_block(fresh_state, FONT_START, len(FONT_DATA))
        assert jnp.array_equal(block, FONT_DATA)

    def test_write_block_at_end_of_memory(self, fresh_state):
        state = write_block(fresh_state, 0xFFD, [1, 2, 3])
        assert read_block(state, 0xFFD, 3).tolist() == [1, 2, 3]

    def test_block_crossing_end_of_memory(self, fresh_state):
        with pytest.raises(MemoryOutOfBounds) as excinfo:
            write_block(fresh_state, 0xFFE, [1, 2, 3])
        assert excinfo.value.address == 0x1000

        with pytest.raises(MemoryOutOfBounds):
            read_block(fresh_state, 0xFFF, 2)

    def test_empty_block(self, fresh_state):
        assert read_block(fresh_state, 0x200, 0).size == 0
        assert write_block(fresh_state, 0x200, []) is fresh_state
