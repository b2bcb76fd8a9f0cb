# tests/instructions/test_skip.py
"""
条件スキップ命令(3XNN, 4XNN, 5XY0, 9XY0, EX9E, EXA1)の単体テスト。
"""
import unittest

import pytest

class TestSkipInstructions(unittest.TestCase):
    @pytest.fixture(autouse=True)
    def _attach(self, cpu, host, run_program):
        self.host = host
        self.state = cpu.get_state()
        self.run_program = run_program

    def test_skip_eq_imm(self):
        self.state.v[2] = 0x33
        self.run_program([0x3233])
        self.assertEqual(self.state.pc, 0x204)

    def test_skip_eq_imm_not_taken(self):
        self.state.v[2] = 0x32
        self.run_program([0x3233])
        self.assertEqual(self.state.pc, 0x202)

    def test_skip_ne_imm(self):
        self.state.v[2] = 0x32
        self.run_program([0x4233])
        self.assertEqual(self.state.pc, 0x204)

    def test_skip_ne_imm_not_taken(self):
        self.state.v[2] = 0x33
        self.run_program([0x4233])
        self.assertEqual(self.state.pc, 0x202)

    def test_skip_eq_reg(self):
        self.state.v[1] = 7
        self.state.v[2] = 7
        self.run_program([0x5120])
        self.assertEqual(self.state.pc, 0x204)

    def test_skip_eq_reg_ignores_low_nibble(self):
        self.state.v[1] = 7
        self.state.v[2] = 7
        self.run_program([0x5121])
        self.assertEqual(self.state.pc, 0x204)

    def test_skip_ne_reg(self):
        self.state.v[1] = 7
        self.state.v[2] = 8
        self.run_program([0x9120])
        self.assertEqual(self.state.pc, 0x204)

    def test_skip_ne_reg_not_taken(self):
        self.state.v[1] = 7
        self.state.v[2] = 7
        self.run_program([0x9120])
        self.assertEqual(self.state.pc, 0x202)

    def test_skip_if_key_pressed(self):
        self.state.v[5] = 0xA
        self.host.pressed.add(0xA)
        self.run_program([0xE59E])
        self.assertEqual(self.state.pc, 0x204)
        self.assertEqual(self.host.key_queries, [0xA])

    def test_skip_if_key_pressed_not_taken(self):
        self.state.v[5] = 0xA
        self.run_program([0xE59E])
        self.assertEqual(self.state.pc, 0x202)

    def test_skip_if_key_not_pressed(self):
        self.state.v[5] = 0x3
        self.run_program([0xE5A1])
        self.assertEqual(self.state.pc, 0x204)

    def test_skip_if_key_not_pressed_not_taken(self):
        self.state.v[5] = 0x3
        self.host.pressed.add(0x3)
        self.run_program([0xE5A1])
        self.assertEqual(self.state.pc, 0x202)
