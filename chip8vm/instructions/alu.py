"""CHIP-8 ALU operations (8xxx)."""

import jax.numpy as jnp
from chip8vm.state import EmulatorState
from chip8vm.decode import DecodedInstruction, Form
from chip8vm.constants import FLAG_REGISTER


def alu_set(vx: int, vy: int) -> tuple[int, None]:
    """8XY0 - Set: VX = VY."""
    return vy, None


def alu_or(vx: int, vy: int) -> tuple[int, None]:
    """8XY1 - Binary OR: VX |= VY."""
    return vx | vy, None


def alu_and(vx: int, vy: int) -> tuple[int, None]:
    """8XY2 - Binary AND: VX &= VY."""
    return vx & vy, None


def alu_xor(vx: int, vy: int) -> tuple[int, None]:
    """8XY3 - Logical XOR: VX ^= VY."""
    return vx ^ vy, None


def alu_add(vx: int, vy: int) -> tuple[int, int]:
    """8XY4 - Add: VX += VY, set carry flag."""
    result = jnp.astype(vx, jnp.int32) + vy
    carry = jnp.astype(result > 255, jnp.uint8)
    return jnp.astype(result & 0xFF, jnp.uint8), carry


def alu_sub_xy(vx: int, vy: int) -> tuple[int, int]:
    """8XY5 - Subtract: VX -= VY, VF = 1 when no borrow."""
    borrow_flag = jnp.astype(vx >= vy, jnp.uint8)
    result = (vx - vy) & 0xFF
    return result, borrow_flag


def alu_shift_right(vx: int, vy: int) -> tuple[int, int]:
    """8XY6 - Shift right: VX >>= 1, VF = bit shifted out."""
    shifted_bit = vx & 1
    result = vx >> 1
    return result, shifted_bit


def alu_shift_left(vx: int, vy: int) -> tuple[int, int]:
    """8XYE - Shift left: VX <<= 1, VF = bit shifted out."""
    shifted_bit = (vx & 0x80) >> 7
    result = (vx << 1) & 0xFF
    return result, shifted_bit


def alu_sub_yx(vx: int, vy: int) -> tuple[int, int]:
    """8XY7 - Subtract: VX = VY - VX, VF = 1 when no borrow."""
    borrow_flag = jnp.astype(vy >= vx, jnp.uint8)
    result = (vy - vx) & 0xFF
    return result, borrow_flag


ALU_OPERATIONS = {
    Form.MOVE: alu_set,
    Form.OR: alu_or,
    Form.AND: alu_and,
    Form.XOR: alu_xor,
    Form.ADD_REG: alu_add,
    Form.SUB_XY: alu_sub_xy,
    Form.SHIFT_RIGHT: alu_shift_right,
    Form.SUB_YX: alu_sub_yx,
    Form.SHIFT_LEFT: alu_shift_left,
}


def execute_alu_operation(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """8XYN - ALU operations dispatcher."""
    vx = state.V[instruction.x]
    vy = state.V[instruction.y]

    result, vf = ALU_OPERATIONS[instruction.form](vx, vy)

    # Flag is written last so it wins when X is F
    new_V = state.V.at[instruction.x].set(jnp.astype(result, jnp.uint8))
    if vf is not None:
        new_V = new_V.at[FLAG_REGISTER].set(jnp.astype(vf, jnp.uint8))
    return state.replace(V=new_V)
