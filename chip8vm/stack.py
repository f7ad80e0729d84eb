"""CHIP-8 stack operations."""

import jax.numpy as jnp
from chip8vm.constants import ADDRESS_MASK, STACK_SIZE
from chip8vm.errors import StackOverflow, StackUnderflow
from chip8vm.state import StackState


def depth(stack: StackState) -> int:
    """Number of return addresses currently held."""
    return int(stack.pointer)


def push(stack: StackState, address: jnp.ndarray) -> StackState:
    """Push address onto stack."""
    pointer = depth(stack)
    if pointer >= STACK_SIZE:
        raise StackOverflow(pointer)
    masked_address = jnp.astype(address, jnp.uint16) & ADDRESS_MASK
    new_data = stack.data.at[pointer].set(masked_address)
    return stack.replace(data=new_data, pointer=pointer + 1)


def pop(stack: StackState) -> tuple[StackState, jnp.ndarray]:
    """Pop address from stack."""
    if depth(stack) == 0:
        raise StackUnderflow()
    new_pointer = depth(stack) - 1
    popped_address = stack.data[new_pointer]
    new_data = stack.data.at[new_pointer].set(0)
    return stack.replace(data=new_data, pointer=new_pointer), popped_address
