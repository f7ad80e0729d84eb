"""CHIP-8 display instructions."""

from chip8vm.state import EmulatorState
from chip8vm.decode import DecodedInstruction
from chip8vm.display import draw_sprite
from chip8vm.memory import read_block


def execute_display(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """DXYN - Draw sprite at (VX, VY) with height N."""
    rows = read_block(state, state.I, instruction.n)
    return draw_sprite(state, state.V[instruction.x], state.V[instruction.y], rows)
