# src/chip8_core/instructions/display.py
"""
スプライト描画命令(DXYN)の実装。
"""
from typing import TYPE_CHECKING

from chip8_core.core.snapshot import Operation
from chip8_core.core.state import DISPLAY_HEIGHT, DISPLAY_WIDTH, FLAG_REGISTER
from .base import advance, read_byte

if TYPE_CHECKING:
    from chip8_core.core.cpu import Chip8Cpu

SPRITE_WIDTH = 8

# @intent:responsibility Iから始まるNバイトのスプライトを(VX, VY)にXOR合成します。
# @intent:post-condition 既に点灯していたピクセルを消した場合はVF=1、それ以外はVF=0。
#                       座標は両軸とも表示サイズで折り返します。高さ0でもPCは進みます。
def execute_draw(cpu: "Chip8Cpu", op: Operation) -> None:
    state = cpu.state
    x_origin = state.v[op.x]
    y_origin = state.v[op.y]
    height = op.n
    sprite = [read_byte(state, state.i + row) for row in range(height)]

    collision = 0
    for row, bits in enumerate(sprite):
        dy = (y_origin + row) % DISPLAY_HEIGHT
        for col in range(SPRITE_WIDTH):
            if bits & (0x80 >> col) == 0:
                continue
            dx = (x_origin + col) % DISPLAY_WIDTH
            index = dy * DISPLAY_WIDTH + dx
            if state.display[index]:
                collision = 1
            state.display[index] ^= 1

    state.v[FLAG_REGISTER] = collision
    cpu.host.render()
    advance(state)
