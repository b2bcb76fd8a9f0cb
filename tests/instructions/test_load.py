# tests/instructions/test_load.py
"""
ロード命令(6XNN, 7XNN, ANNN, CXNN)の単体テスト。
"""
import unittest

import pytest

class TestLoadInstructions(unittest.TestCase):
    @pytest.fixture(autouse=True)
    def _attach(self, cpu, host, run_program):
        self.host = host
        self.state = cpu.get_state()
        self.run_program = run_program

    def test_load_imm(self):
        self.run_program([0x6C7F])
        self.assertEqual(self.state.v[0xC], 0x7F)
        self.assertEqual(self.state.pc, 0x202)

    def test_add_imm_wraps_without_flag(self):
        self.state.v[0xF] = 0x55
        self.run_program([0x61FF, 0x7102])
        self.assertEqual(self.state.v[1], 0x01)
        self.assertEqual(self.state.v[0xF], 0x55)
        self.assertEqual(self.state.pc, 0x204)

    def test_load_index(self):
        self.run_program([0xA2F0])
        self.assertEqual(self.state.i, 0x2F0)

    def test_random_masks_host_value(self):
        self.host.random_value = 0x1234
        self.run_program([0xC30F])
        # (0x1234 mod 256) & 0x0F
        self.assertEqual(self.state.v[3], 0x04)
        self.assertEqual(self.state.pc, 0x202)

    def test_random_with_zero_mask(self):
        self.host.random_value = 0xFF
        self.run_program([0xC300])
        self.assertEqual(self.state.v[3], 0)
