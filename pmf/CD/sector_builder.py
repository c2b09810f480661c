from typing import Tuple

from pmf.CD.cd_types import (
    TrackMode, SectorOffset, SYNC_PATTERN, RAW_SECTOR_SIZE,
    PREMASTER_DATA_SECTOR_SIZE, LEAD_IN_SECTORS,
    FRAMES_PER_SECOND, SECONDS_PER_MINUTE
)
from pmf.CD.cd_checksums import CdChecksums
from pmf.CD.ecc import ReedSolomonParity


def lba_to_msf(lba: int) -> Tuple[int, int, int]:
    return (lba // (SECONDS_PER_MINUTE * FRAMES_PER_SECOND),
            (lba // FRAMES_PER_SECOND) % SECONDS_PER_MINUTE,
            lba % FRAMES_PER_SECOND)


def to_bcd(value: int) -> int:
    return ((value // 10) << 4) | (value % 10)


def swap_audio_endianness(buffer: bytes) -> bytearray:
    # 16-bit samples, swap each byte pair
    buffer = bytes(buffer)
    swapped = bytearray(len(buffer))
    swapped[0::2] = buffer[1::2]
    swapped[1::2] = buffer[0::2]
    return swapped


class SectorBuilder:
    """Assembles raw 2352 byte sectors from premaster payload units."""

    def __init__(self, checksums: CdChecksums = None, parity: ReedSolomonParity = None):
        self._checksums = checksums or CdChecksums()
        self._parity = parity or ReedSolomonParity()

    @staticmethod
    def disc_msf(lba: int) -> Tuple[int, int, int]:
        return lba_to_msf(lba + LEAD_IN_SECTORS)

    def reconstruct_prefix(self, sector: bytearray, mode: int, lba: int) -> None:
        # Sync
        sector[SectorOffset.Sync:SectorOffset.Header] = SYNC_PATTERN

        minute, second, frame = self.disc_msf(lba)
        sector[0x00C] = to_bcd(minute)
        sector[0x00D] = to_bcd(second)
        sector[0x00E] = to_bcd(frame)

        # Mode
        sector[SectorOffset.Mode] = mode

    def reconstruct_ecc(self, sector: bytearray) -> None:
        edc = self._checksums.edc_bytes(sector[SectorOffset.SubHeader:SectorOffset.Edc])
        sector[SectorOffset.Edc:SectorOffset.EccP] = edc

        sector[SectorOffset.EccP:SectorOffset.EccQ] = self._parity.p_parity(
            bytes(sector[SectorOffset.Header:SectorOffset.EccP]))
        sector[SectorOffset.EccQ:SectorOffset.End] = self._parity.q_parity(
            bytes(sector[SectorOffset.Header:SectorOffset.EccQ]))

    def build_pregap_sector(self, mode: int, lba: int) -> bytearray:
        sector = bytearray(RAW_SECTOR_SIZE)
        if mode == TrackMode.Audio:
            # Digital silence
            return sector
        self.reconstruct_prefix(sector, mode, lba)
        return sector

    def build_data_sector(self, unit: bytes, lba: int) -> bytearray:
        if len(unit) != PREMASTER_DATA_SECTOR_SIZE:
            raise ValueError(f"Data sector needs {PREMASTER_DATA_SECTOR_SIZE} bytes, got {len(unit)}")

        sector = bytearray(RAW_SECTOR_SIZE)
        self.reconstruct_prefix(sector, TrackMode.DataMode2Form1, lba)

        # Subheader and user data are passed through unchanged
        sector[SectorOffset.SubHeader:SectorOffset.Edc] = unit
        self.reconstruct_ecc(sector)
        return sector

    @staticmethod
    def build_audio_sector(unit: bytes, swap_bytes: bool = False) -> bytearray:
        if len(unit) != RAW_SECTOR_SIZE:
            raise ValueError(f"Audio sector needs {RAW_SECTOR_SIZE} bytes, got {len(unit)}")

        if swap_bytes:
            return swap_audio_endianness(unit)
        return bytearray(unit)
