"""CHIP-8 machine errors.

Executor errors (memory, stack, decode) are fatal and halt the machine.
Validation errors reject a single host call and leave the machine untouched.
"""


class Chip8Error(Exception):
    """Base class for every error raised by the machine."""


class MemoryOutOfBounds(Chip8Error):
    """Memory access outside 0x000-0xFFF."""

    def __init__(self, address: int):
        self.address = address
        super().__init__(f"memory access out of bounds at 0x{address:X}")


class StackOverflow(Chip8Error):
    """Call made with a full stack."""

    def __init__(self, depth: int):
        self.depth = depth
        super().__init__(f"stack overflow (depth {depth})")


class StackUnderflow(Chip8Error):
    """Return made with an empty stack."""

    def __init__(self):
        super().__init__("stack underflow (return with empty stack)")


class UnknownInstruction(Chip8Error):
    """Opcode that matches no instruction form."""

    def __init__(self, opcode: int):
        self.opcode = opcode
        super().__init__(f"unknown instruction 0x{opcode:04X}")


class OversizeImage(Chip8Error, ValueError):
    """Program image larger than the program region."""

    def __init__(self, size: int, limit: int):
        self.size = size
        self.limit = limit
        super().__init__(f"program image is {size} bytes, limit is {limit}")


class InvalidKeyIndex(Chip8Error, ValueError):
    """Key index outside 0x0-0xF."""

    def __init__(self, index):
        self.index = index
        super().__init__(f"invalid key index {index!r}, expected 0-15")


class HaltedError(Chip8Error):
    """Tick requested while the machine is not ready."""
