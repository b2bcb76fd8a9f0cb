# tests/instructions/test_misc.py
"""
FXNN 命令の単体テスト。
"""
import unittest

import pytest

from chip8_core.core.state import GLYPH_SIZE

class TestMiscInstructions(unittest.TestCase):
    @pytest.fixture(autouse=True)
    def _attach(self, cpu, host, run_program):
        self.cpu = cpu
        self.host = host
        self.state = cpu.get_state()
        self.run_program = run_program

    def test_get_delay(self):
        self.cpu.timers.set_delay(0x3C)
        self.run_program([0xF407])
        self.assertEqual(self.state.v[4], 0x3C)
        self.assertEqual(self.state.pc, 0x202)

    def test_set_delay_and_sound(self):
        self.state.v[1] = 0x20
        self.state.v[2] = 0x05
        self.run_program([0xF115, 0xF218])
        self.assertEqual(self.cpu.timers.get_delay(), 0x20)
        self.assertEqual(self.cpu.timers.get_sound(), 0x05)
        self.assertEqual(self.state.pc, 0x204)

    def test_wait_key_stalls_until_pressed(self):
        snapshots = self.run_program([0xF30A], cycles=3)
        self.assertTrue(all(s.stalled for s in snapshots))
        self.assertEqual(self.state.pc, 0x200)
        self.assertEqual(self.state.v[3], 0)

        self.host.pressed.add(0x7)
        snapshot = self.cpu.step()
        self.assertFalse(snapshot.stalled)
        self.assertEqual(self.state.pc, 0x202)
        self.assertEqual(self.state.v[3], 0x7)

    def test_wait_key_picks_lowest_pressed_key(self):
        self.host.pressed.update({0xC, 0x4, 0x9})
        self.run_program([0xF30A])
        self.assertEqual(self.state.v[3], 0x4)

    def test_wait_key_scans_in_ascending_order(self):
        self.run_program([0xF30A])
        self.assertEqual(self.host.key_queries, list(range(16)))

    def test_add_index(self):
        self.state.i = 0x2FF
        self.state.v[0xF] = 0
        self.state.v[6] = 0x02
        self.run_program([0xF61E])
        self.assertEqual(self.state.i, 0x301)
        self.assertEqual(self.state.v[0xF], 0)

    def test_add_index_beyond_address_space(self):
        self.state.i = 0xFFF
        self.state.v[6] = 0x01
        self.run_program([0xF61E])
        self.assertEqual(self.state.i, 0x1000)

    def test_font_address(self):
        self.state.v[2] = 0xA
        self.run_program([0xF229])
        self.assertEqual(self.state.i, 0xA * GLYPH_SIZE)

    def test_font_address_uses_low_nibble(self):
        self.state.v[2] = 0x1B
        self.run_program([0xF229])
        self.assertEqual(self.state.i, 0xB * GLYPH_SIZE)

    def test_store_bcd(self):
        self.state.v[5] = 254
        self.state.i = 0x300
        self.run_program([0xF533])
        self.assertEqual(list(self.state.memory[0x300:0x303]), [2, 5, 4])
        self.assertEqual(self.state.i, 0x300)

    def test_store_bcd_single_digit(self):
        self.state.v[5] = 7
        self.state.i = 0x300
        self.run_program([0xF533])
        self.assertEqual(list(self.state.memory[0x300:0x303]), [0, 0, 7])

    def test_store_registers(self):
        self.state.v[0:4] = bytes([1, 2, 3, 4])
        self.state.v[4] = 0x55
        self.state.i = 0x400
        self.run_program([0xF355])
        self.assertEqual(list(self.state.memory[0x400:0x405]), [1, 2, 3, 4, 0])
        self.assertEqual(self.state.i, 0x400)

    def test_load_registers(self):
        self.state.memory[0x400:0x403] = bytes([9, 8, 7])
        self.state.v[3] = 0x55
        self.state.i = 0x400
        self.run_program([0xF265])
        self.assertEqual(list(self.state.v[0:4]), [9, 8, 7, 0x55])
        self.assertEqual(self.state.i, 0x400)

    def test_store_registers_wraps_address(self):
        self.state.v[0:2] = bytes([0xAB, 0xCD])
        self.state.i = 0xFFF
        self.run_program([0xF155])
        self.assertEqual(self.state.memory[0xFFF], 0xAB)
        self.assertEqual(self.state.memory[0x000], 0xCD)
