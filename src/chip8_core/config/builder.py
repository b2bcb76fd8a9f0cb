import logging
from typing import Optional

from chip8_core.core.cpu import Chip8Cpu
from chip8_core.core.host import HostInterface
from chip8_core.loader.loader import RomLoader
from .models import MachineConfig

logger = logging.getLogger(__name__)

# @intent:responsibility 設定（Config）に基づいてCPUを生成し、ホストと接続してプログラムをロードします。
class MachineBuilder:
    def __init__(self, rom_loader: Optional[RomLoader] = None):
        self._rom_loader = rom_loader or RomLoader()

    def build_machine(self, config: MachineConfig, host: HostInterface) -> Chip8Cpu:
        cpu = Chip8Cpu(host)

        if config.rom_path is not None:
            self._rom_loader.load_rom(config.rom_path, cpu)
        else:
            logger.warning("No program image configured; memory above 0x200 is empty")

        return cpu
