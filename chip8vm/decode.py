"""CHIP-8 instruction decoding."""

import enum

from chex import dataclass

from chip8vm.errors import UnknownInstruction


class Form(enum.Enum):
    """Closed set of CHIP-8 instruction forms."""
    CLEAR_SCREEN = "00E0"
    RETURN = "00EE"
    JUMP = "1NNN"
    CALL = "2NNN"
    SKIP_EQ_IMM = "3XNN"
    SKIP_NE_IMM = "4XNN"
    SKIP_EQ_REG = "5XY0"
    LOAD_IMM = "6XNN"
    ADD_IMM = "7XNN"
    MOVE = "8XY0"
    OR = "8XY1"
    AND = "8XY2"
    XOR = "8XY3"
    ADD_REG = "8XY4"
    SUB_XY = "8XY5"
    SHIFT_RIGHT = "8XY6"
    SUB_YX = "8XY7"
    SHIFT_LEFT = "8XYE"
    SKIP_NE_REG = "9XY0"
    LOAD_INDEX = "ANNN"
    JUMP_OFFSET = "BNNN"
    RANDOM = "CXNN"
    DRAW = "DXYN"
    SKIP_KEY_PRESSED = "EX9E"
    SKIP_KEY_NOT_PRESSED = "EXA1"
    LOAD_DELAY = "FX07"
    WAIT_KEY = "FX0A"
    SET_DELAY = "FX15"
    SET_SOUND = "FX18"
    ADD_INDEX = "FX1E"
    FONT_CHAR = "FX29"
    BCD = "FX33"
    STORE_REGS = "FX55"
    LOAD_REGS = "FX65"


# Forms fully determined by the first nibble
_BY_OPCODE = {
    0x1: Form.JUMP,
    0x2: Form.CALL,
    0x3: Form.SKIP_EQ_IMM,
    0x4: Form.SKIP_NE_IMM,
    0x6: Form.LOAD_IMM,
    0x7: Form.ADD_IMM,
    0xA: Form.LOAD_INDEX,
    0xB: Form.JUMP_OFFSET,
    0xC: Form.RANDOM,
    0xD: Form.DRAW,
}

_SYSTEM = {0x00E0: Form.CLEAR_SCREEN, 0x00EE: Form.RETURN}

_ALU = {
    0x0: Form.MOVE,
    0x1: Form.OR,
    0x2: Form.AND,
    0x3: Form.XOR,
    0x4: Form.ADD_REG,
    0x5: Form.SUB_XY,
    0x6: Form.SHIFT_RIGHT,
    0x7: Form.SUB_YX,
    0xE: Form.SHIFT_LEFT,
}

_KEY = {0x9E: Form.SKIP_KEY_PRESSED, 0xA1: Form.SKIP_KEY_NOT_PRESSED}

_MISC = {
    0x07: Form.LOAD_DELAY,
    0x0A: Form.WAIT_KEY,
    0x15: Form.SET_DELAY,
    0x18: Form.SET_SOUND,
    0x1E: Form.ADD_INDEX,
    0x29: Form.FONT_CHAR,
    0x33: Form.BCD,
    0x55: Form.STORE_REGS,
    0x65: Form.LOAD_REGS,
}


@dataclass(frozen=True)
class DecodedInstruction:
    """Decoded CHIP-8 instruction with extracted operands."""
    raw: int
    form: Form
    opcode: int  # First nibble
    x: int       # Second nibble (VX register)
    y: int       # Third nibble (VY register)
    n: int       # Fourth nibble (4-bit immediate)
    nn: int      # Last byte (8-bit immediate)
    nnn: int     # Last 12 bits (12-bit address)


def classify(instruction: int) -> Form:
    """Return the instruction form of a 16-bit opcode.

    Raises:
        UnknownInstruction: if the bit pattern matches no form.
    """
    opcode = (instruction & 0xF000) >> 12
    n = instruction & 0x000F
    nn = instruction & 0x00FF

    if opcode in _BY_OPCODE:
        return _BY_OPCODE[opcode]

    form = None
    if opcode == 0x0:
        form = _SYSTEM.get(instruction)
    elif opcode == 0x5 and n == 0:
        form = Form.SKIP_EQ_REG
    elif opcode == 0x9 and n == 0:
        form = Form.SKIP_NE_REG
    elif opcode == 0x8:
        form = _ALU.get(n)
    elif opcode == 0xE:
        form = _KEY.get(nn)
    elif opcode == 0xF:
        form = _MISC.get(nn)

    if form is None:
        raise UnknownInstruction(instruction)
    return form


def decode(instruction: int) -> DecodedInstruction:
    """Decode 16-bit instruction into components."""
    instruction = int(instruction) & 0xFFFF
    return DecodedInstruction(
        raw=instruction,
        form=classify(instruction),
        opcode=(instruction & 0xF000) >> 12,
        x=(instruction & 0x0F00) >> 8,
        y=(instruction & 0x00F0) >> 4,
        n=instruction & 0x000F,
        nn=instruction & 0x00FF,
        nnn=instruction & 0x0FFF
    )
