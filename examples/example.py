"""Headless host loop: draws the sixteen font digits and prints the screen as text."""

import time

from chip8vm import Machine, MachineConfig

# V0 = digit, V1 = x, V2 = y; draw each digit then stop on a self-jump
PROGRAM = bytes([
    0x60, 0x00,  # 200: V0 = 0
    0x61, 0x01,  # 202: V1 = 1
    0x62, 0x02,  # 204: V2 = 2
    0xF0, 0x29,  # 206: I = font(V0)
    0xD1, 0x25,  # 208: draw 5 rows at (V1, V2)
    0x70, 0x01,  # 20A: V0 += 1
    0x71, 0x06,  # 20C: V1 += 6
    0x30, 0x08,  # 20E: skip if V0 == 8
    0x12, 0x16,  # 210: jump 216
    0x61, 0x01,  # 212: V1 = 1
    0x72, 0x08,  # 214: V2 += 8, second line for digits 8-F
    0x30, 0x10,  # 216: skip if V0 == 16
    0x12, 0x06,  # 218: jump 206
    0x12, 0x1A,  # 21A: jump 21A
])


def to_text(pixels) -> str:
    rows = pixels.reshape(32, 64).tolist()
    return "\n".join("".join("#" if p else "." for p in row) for row in rows)


if __name__ == "__main__":
    machine = Machine(MachineConfig.from_rates(700, 60, log_level="INFO"))
    machine.load(PROGRAM)

    start = time.time()
    pixels = machine.run(30, show_progress=True)
    print("Execution time (s):", time.time() - start)
    print("Cycles:", machine.cycles)
    print(to_text(pixels))
