# tests/loader/test_loader.py
"""
chip8_core.loader.loaderモジュールの単体テスト。
生バイナリとIntel HEXのロード機能を検証します。
"""
import pytest

from chip8_core.core.state import FONTSET, PROGRAM_START
from chip8_core.loader.loader import IntelHexLoader, RomLoader

# @intent:test_suite プログラムローダー機能の検証。

class TestRomLoader:
    """
    RomLoaderの単体テスト。
    """

    def test_load_binary_image(self, cpu, tmp_path):
        rom = tmp_path / "pong.ch8"
        rom.write_bytes(bytes([0x6A, 0x02, 0x6B, 0x0C]))

        assert RomLoader().load_rom(rom, cpu) == 4
        assert bytes(cpu.state.memory[PROGRAM_START:PROGRAM_START + 4]) == bytes([0x6A, 0x02, 0x6B, 0x0C])
        assert bytes(cpu.state.memory[:80]) == FONTSET

    def test_load_accepts_str_path(self, cpu, tmp_path):
        rom = tmp_path / "one.ch8"
        rom.write_bytes(b"\x00\xE0")
        assert RomLoader().load_rom(str(rom), cpu) == 2

    def test_oversized_image_is_rejected_before_loading(self, cpu, tmp_path):
        rom = tmp_path / "huge.ch8"
        rom.write_bytes(bytes([0xFF]) * 3585)

        with pytest.raises(ValueError, match="3584"):
            RomLoader().load_rom(rom, cpu)
        assert not any(cpu.state.memory[PROGRAM_START:])

    def test_missing_file_raises(self, cpu, tmp_path):
        with pytest.raises(FileNotFoundError):
            RomLoader().load_rom(tmp_path / "missing.ch8", cpu)

    def test_hex_suffix_delegates_to_intel_hex(self, cpu, tmp_path):
        hex_file = tmp_path / "prog.HEX"
        hex_file.write_text(":020200006A058D\n:00000001FF\n")

        assert RomLoader().load_rom(hex_file, cpu) == 2
        assert cpu.state.memory[0x200] == 0x6A
        assert cpu.state.memory[0x201] == 0x05


class TestIntelHexLoader:
    """
    IntelHexLoaderの単体テスト。
    """

    def test_parse_simple_records(self):
        image = IntelHexLoader().parse("""
        :020200006A058D
        :00000001FF
        """)
        assert image == {0x200: 0x6A, 0x201: 0x05}

    def test_load_fills_gaps_with_zero(self, cpu, tmp_path):
        hex_file = tmp_path / "gap.hex"
        hex_file.write_text(
            ":020200006A058D ; LD VA, 0x05\n"
            ":020204001200E6 ; JP 0x200\n"
            ":00000001FF\n"
        )
        cpu.state.memory[0x202] = 0x99

        assert IntelHexLoader().load_intel_hex(hex_file, cpu) == 6
        assert list(cpu.state.memory[0x200:0x206]) == [0x6A, 0x05, 0x00, 0x00, 0x12, 0x00]

    def test_records_after_eof_are_ignored(self):
        image = IntelHexLoader().parse(":020200006A058D\n:00000001FF\n:020204001200E6\n")
        assert image == {0x200: 0x6A, 0x201: 0x05}

    def test_empty_file_loads_nothing(self, cpu, tmp_path):
        hex_file = tmp_path / "empty.hex"
        hex_file.write_text(":00000001FF\n")
        assert IntelHexLoader().load_intel_hex(hex_file, cpu) == 0

    def test_checksum_mismatch(self):
        with pytest.raises(ValueError, match="Checksum mismatch on line 1"):
            IntelHexLoader().parse(":020200006A0500\n")

    def test_address_below_program_area(self):
        with pytest.raises(ValueError, match="outside the program area"):
            IntelHexLoader().parse(":01010000AA54\n")

    def test_too_short_record(self):
        with pytest.raises(ValueError, match="Too short"):
            IntelHexLoader().parse(":0000\n")

    def test_invalid_hex_digits(self):
        with pytest.raises(ValueError, match="Invalid hex digits"):
            IntelHexLoader().parse(":02020000ZZ058D\n")

    def test_unknown_record_type(self):
        # type 0x06 with checksum (0x100 - 0x06) & 0xFF
        with pytest.raises(ValueError, match="Unknown Intel HEX record type 06"):
            IntelHexLoader().parse(":00000006FA\n")
