"""Main CHIP-8 emulator execution engine."""

from typing import Callable

import jax
import jax.numpy as jnp
from chip8vm.state import EmulatorState, create_state
from chip8vm.decode import DecodedInstruction, Form, decode
from chip8vm.constants import PROGRAM_START, MAX_PROGRAM_SIZE
from chip8vm.errors import OversizeImage
from chip8vm.memory import check_range, write_block
from chip8vm.instructions.system import execute_clear_screen, execute_return
from chip8vm.instructions.control_flow import (
    execute_jump, execute_call, execute_skip_if_equal_immediate,
    execute_skip_if_not_equal_immediate, execute_skip_if_equal_register,
    execute_skip_if_not_equal_register, execute_jump_with_offset,
    execute_skip_if_key_pressed, execute_skip_if_key_not_pressed,
)
from chip8vm.instructions.alu import execute_alu_operation
from chip8vm.instructions.memory import execute_set, execute_add, execute_set_index, execute_random
from chip8vm.instructions.display import execute_display
from chip8vm.instructions.misc import (
    execute_get_delay_timer, execute_wait_for_key, execute_set_delay_timer,
    execute_set_sound_timer, execute_add_to_index, execute_font_character,
    execute_bcd_conversion, execute_store_registers, execute_load_registers,
)

Handler = Callable[[EmulatorState, DecodedInstruction], EmulatorState]

HANDLERS: dict[Form, Handler] = {
    Form.CLEAR_SCREEN: execute_clear_screen,
    Form.RETURN: execute_return,
    Form.JUMP: execute_jump,
    Form.CALL: execute_call,
    Form.SKIP_EQ_IMM: execute_skip_if_equal_immediate,
    Form.SKIP_NE_IMM: execute_skip_if_not_equal_immediate,
    Form.SKIP_EQ_REG: execute_skip_if_equal_register,
    Form.LOAD_IMM: execute_set,
    Form.ADD_IMM: execute_add,
    Form.MOVE: execute_alu_operation,
    Form.OR: execute_alu_operation,
    Form.AND: execute_alu_operation,
    Form.XOR: execute_alu_operation,
    Form.ADD_REG: execute_alu_operation,
    Form.SUB_XY: execute_alu_operation,
    Form.SHIFT_RIGHT: execute_alu_operation,
    Form.SUB_YX: execute_alu_operation,
    Form.SHIFT_LEFT: execute_alu_operation,
    Form.SKIP_NE_REG: execute_skip_if_not_equal_register,
    Form.LOAD_INDEX: execute_set_index,
    Form.JUMP_OFFSET: execute_jump_with_offset,
    Form.RANDOM: execute_random,
    Form.DRAW: execute_display,
    Form.SKIP_KEY_PRESSED: execute_skip_if_key_pressed,
    Form.SKIP_KEY_NOT_PRESSED: execute_skip_if_key_not_pressed,
    Form.LOAD_DELAY: execute_get_delay_timer,
    Form.WAIT_KEY: execute_wait_for_key,
    Form.SET_DELAY: execute_set_delay_timer,
    Form.SET_SOUND: execute_set_sound_timer,
    Form.ADD_INDEX: execute_add_to_index,
    Form.FONT_CHAR: execute_font_character,
    Form.BCD: execute_bcd_conversion,
    Form.STORE_REGS: execute_store_registers,
    Form.LOAD_REGS: execute_load_registers,
}

_missing = set(Form) - set(HANDLERS)
if _missing:
    raise RuntimeError(f"no handler for instruction forms: {sorted(f.name for f in _missing)}")


def execute(state: EmulatorState, instruction: int) -> EmulatorState:
    """Execute single CHIP-8 instruction.

    Raises:
        UnknownInstruction: if ``instruction`` matches no instruction form.
        MemoryOutOfBounds, StackOverflow, StackUnderflow: from the instruction itself.
    """
    decoded_instruction = decode(instruction)
    return HANDLERS[decoded_instruction.form](state, decoded_instruction)


def _pack_u16(high: jnp.uint8, low: jnp.uint8) -> int:
    """Pack two bytes into a 16-bit opcode."""
    return (int(high) << 8) | int(low)


def fetch(state: EmulatorState) -> tuple[EmulatorState, int]:
    """Fetch next instruction from memory and advance PC past it."""
    pc = int(state.pc)
    check_range(pc, 2)
    instruction = _pack_u16(state.memory[pc], state.memory[pc + 1])
    return state.replace(pc=state.pc + 2), instruction


def step(state: EmulatorState) -> tuple[EmulatorState, int]:
    """Run one fetch-decode-execute cycle, returning the new state and the opcode run."""
    state, instruction = fetch(state)
    return execute(state, instruction), instruction


def load_rom(state: EmulatorState, rom_data: bytes, rng: jax.Array = None) -> EmulatorState:
    """Reset the machine and load ROM data into memory starting at 0x200.

    The previous ``state`` is only consulted for its random key when ``rng``
    is not given; everything else is rebuilt from scratch.

    Raises:
        OversizeImage: if the image does not fit in the program region.
    """
    rom_data = bytes(rom_data)
    if len(rom_data) > MAX_PROGRAM_SIZE:
        raise OversizeImage(len(rom_data), MAX_PROGRAM_SIZE)
    new_state = create_state(state.rng if rng is None else rng)
    rom_array = jnp.array(list(rom_data), dtype=jnp.uint8)
    new_state = write_block(new_state, PROGRAM_START, rom_array)
    return new_state.replace(pc=jnp.astype(PROGRAM_START, jnp.uint16))
