# cd_checksums.py

from dataclasses import dataclass
from typing import Tuple

import logging
logger = logging.getLogger(__name__)

# x^32 + x^31 + x^16 + x^15 + x^4 + x^3 + x + 1, bit reversed
EDC_POLY = 0xD8018001


@dataclass(frozen=True)
class EdcTable:
    poly: int
    entries: Tuple[int, ...]

    @classmethod
    def build(cls, poly: int = EDC_POLY) -> 'EdcTable':
        entries = []
        for i in range(256):
            edc = i
            for _ in range(8):
                edc = (edc >> 1) ^ (poly if (edc & 1) else 0)
            entries.append(edc)

        logger.debug(f"Built EDC table for polynomial 0x{poly:08X}")
        return cls(poly=poly, entries=tuple(entries))


DEFAULT_EDC_TABLE = EdcTable.build()


class CdChecksums:
    def __init__(self, table: EdcTable = DEFAULT_EDC_TABLE):
        self._edc_table = table.entries

    def compute_edc(self, src: bytes, edc: int = 0) -> int:
        table = self._edc_table
        for b in src:
            edc = (edc >> 8) ^ table[(edc ^ b) & 0xFF]
        return edc

    def edc_bytes(self, src: bytes) -> bytes:
        return self.compute_edc(src).to_bytes(4, byteorder='little')
