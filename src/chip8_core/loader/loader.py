# src/chip8_core/loader/loader.py
"""
プログラムローダーモジュール。
生のバイナリイメージ(.ch8)と Intel HEX 形式のロードをサポートします。
"""
import logging
from pathlib import Path
from typing import Dict, Union

from chip8_core.core.cpu import Chip8Cpu
from chip8_core.core.state import MAX_PROGRAM_SIZE, MEMORY_SIZE, PROGRAM_START

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

HEX_SUFFIXES = (".hex", ".ihx")

class IntelHexLoader:
    """
    Intel HEX形式のファイルを解析し、0x200以降のプログラムイメージとしてCPUにロードするローダー。
    """
    def load_intel_hex(self, file_path: PathLike, cpu: Chip8Cpu) -> int:
        with open(file_path, 'r') as f:
            image = self.parse(f.read())

        if not image:
            code = b""
        else:
            end = max(image) + 1
            code = bytes(image.get(addr, 0) for addr in range(PROGRAM_START, end))
        cpu.load_code(code)
        logger.info("Loaded %d bytes from Intel HEX %s", len(code), file_path)
        return len(code)

    # @intent:responsibility HEXテキストを解析し、アドレスからバイト値への辞書を返します。
    # @intent:post-condition 全てのデータバイトは 0x200-0xFFF の範囲にあります。範囲外はValueError。
    def parse(self, text: str) -> Dict[int, int]:
        image: Dict[int, int] = {}
        base_address = 0x0000

        for line_num, line in enumerate(text.splitlines(), 1):
            comment_start = line.find(';')
            if comment_start != -1:
                line = line[:comment_start]
            line = line.strip()
            if not line or not line.startswith(':'):
                continue

            if len(line) < 11:
                raise ValueError(f"Invalid Intel HEX record format on line {line_num}: Too short - {line}")

            try:
                data_length = int(line[1:3], 16)
                address_field = int(line[3:7], 16)
                record_type = int(line[7:9], 16)
                data_part = bytes.fromhex(line[9:-2])
                checksum_field = int(line[-2:], 16)
            except ValueError as e:
                raise ValueError(f"Invalid hex digits on line {line_num}: {line}") from e

            if len(data_part) != data_length:
                raise ValueError(f"Data length mismatch on line {line_num}")

            checksum_sum = data_length + (address_field >> 8) + (address_field & 0xFF) + record_type + sum(data_part)
            calculated_checksum = (~checksum_sum + 1) & 0xFF
            if calculated_checksum != checksum_field:
                raise ValueError(f"Checksum mismatch on line {line_num}: Calculated {calculated_checksum:02X}, Expected {checksum_field:02X}")

            if record_type == 0x00:
                for offset, byte_data in enumerate(data_part):
                    address = base_address + address_field + offset
                    if not PROGRAM_START <= address < MEMORY_SIZE:
                        raise ValueError(f"Address {address:#06x} on line {line_num} is outside the program area")
                    image[address] = byte_data
            elif record_type == 0x01:
                break
            elif record_type == 0x02:
                base_address = int.from_bytes(data_part, "big") << 4
            elif record_type == 0x04:
                base_address = int.from_bytes(data_part, "big") << 16
            elif record_type in (0x03, 0x05):
                # Start address records carry no data for the image
                pass
            else:
                raise ValueError(f"Unknown Intel HEX record type {record_type:02X} on line {line_num}")

        return image

# @intent:responsibility ディスク上のプログラムイメージを読み込み、CPUのメモリに配置します。
class RomLoader:
    """
    生バイナリのプログラムイメージを読み込むローダー。
    拡張子が .hex / .ihx の場合は IntelHexLoader に委譲します。
    """
    def __init__(self):
        self._hex_loader = IntelHexLoader()

    # @intent:pre-condition ファイルサイズは3584バイト以下である必要があります。
    # @intent:post-condition サイズ超過の場合はメモリに触れずにValueErrorを送出します。
    def load_rom(self, file_path: PathLike, cpu: Chip8Cpu) -> int:
        """
        ファイルを読み込んで0x200以降にロードし、ロードしたバイト数を返します。
        """
        path = Path(file_path)
        if path.suffix.lower() in HEX_SUFFIXES:
            return self._hex_loader.load_intel_hex(path, cpu)

        code = path.read_bytes()
        if len(code) > MAX_PROGRAM_SIZE:
            raise ValueError(
                f"Program image {path.name} is {len(code)} bytes; the maximum is {MAX_PROGRAM_SIZE} bytes."
            )
        cpu.load_code(code)
        logger.info("Loaded %d bytes from %s", len(code), path)
        return len(code)
