from dataclasses import dataclass
from enum import IntEnum

SYNC_PATTERN = b'\x00\xFF\xFF\xFF\xFF\xFF\xFF\xFF\xFF\xFF\xFF\x00'

RAW_SECTOR_SIZE = 2352
PREMASTER_DATA_SECTOR_SIZE = 2056
SUBHEADER_SIZE = 8

# Sectors before LBA 0 on a disc
LEAD_IN_SECTORS = 150
FRAMES_PER_SECOND = 75
SECONDS_PER_MINUTE = 60


class TrackMode(IntEnum):
    DataMode2Form1 = 2
    Audio = 4


class SectorOffset(IntEnum):
    Sync = 0x000
    Header = 0x00C
    Mode = 0x00F
    SubHeader = 0x010
    UserData = 0x018
    Edc = 0x818
    EccP = 0x81C
    EccQ = 0x8C8
    End = 0x930


@dataclass
class Track:
    num: int = 0
    mode: int = TrackMode.DataMode2Form1
    start: int = 0
    end: int = 0
    pregap: int = 0

    @property
    def is_audio(self) -> bool:
        return self.mode == TrackMode.Audio

    @property
    def sectors(self) -> int:
        return self.end - self.start + 1

    @property
    def unit_size(self) -> int:
        return RAW_SECTOR_SIZE if self.is_audio else PREMASTER_DATA_SECTOR_SIZE

    @property
    def payload_size(self) -> int:
        return self.sectors * self.unit_size

    @property
    def type_name(self) -> str:
        return "AUDIO" if self.is_audio else "MODE2"
