import os
from typing import BinaryIO, List
from pmf.CD.cd_types import Track, RAW_SECTOR_SIZE, PREMASTER_DATA_SECTOR_SIZE
from pmf.CD.sector_builder import SectorBuilder
from pmf.errors import TruncatedInputError, UnconsumedInputError, ImageIOError
from .structs import EncoderConfig
from .utilities import msf_string

import logging
logger = logging.getLogger(__name__)


class PayloadCursor:
    """Forward-only reader over the premaster payload."""

    def __init__(self, payload: bytes):
        self._payload = memoryview(payload)
        self._offset = 0

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def remaining(self) -> int:
        return len(self._payload) - self._offset

    def take(self, size: int) -> memoryview:
        end = self._offset + size
        if end > len(self._payload):
            raise TruncatedInputError(
                f"Payload truncated: need {end} bytes, only {len(self._payload)} available",
                needed=end, available=len(self._payload))
        chunk = self._payload[self._offset:end]
        self._offset = end
        return chunk


class SectorEncoder:
    def __init__(self, config: EncoderConfig = None, builder: SectorBuilder = None):
        self.config = config or EncoderConfig()
        self.builder = builder or SectorBuilder()

    def encode(self, payload: bytes, tracks: List[Track], out: BinaryIO) -> int:
        '''
        writes every track's pregap and payload sectors to out in disc order
        returns the number of sectors written
        '''
        cursor = PayloadCursor(payload)
        written = 0

        for track in tracks:
            logger.info(f"Writing Track {track.num} Type {track.type_name} "
                        f"({msf_string(track.start)}) Sectors {track.start}-{track.end}")
            written += self._write_pregap(track, out)
            written += self._write_track(track, cursor, out)

        if cursor.remaining:
            raise UnconsumedInputError(f"Payload not fully consumed: {cursor.remaining} bytes remaining",
                                       remaining=cursor.remaining)
        return written

    def _write_pregap(self, track: Track, out: BinaryIO) -> int:
        first_lba = track.start - track.pregap
        for s in range(track.pregap):
            out.write(self.builder.build_pregap_sector(track.mode, first_lba + s))
        return track.pregap

    def _write_track(self, track: Track, cursor: PayloadCursor, out: BinaryIO) -> int:
        for lba in range(track.start, track.end + 1):
            if track.is_audio:
                sector = self.builder.build_audio_sector(cursor.take(RAW_SECTOR_SIZE), self.config.audio_msb)
            else:
                sector = self.builder.build_data_sector(cursor.take(PREMASTER_DATA_SECTOR_SIZE), lba)
            out.write(sector)
        return track.sectors


def write_bin(payload: bytes, tracks: List[Track], out_path: str, config: EncoderConfig = None,
              encoder: SectorEncoder = None) -> int:
    encoder = encoder or SectorEncoder(config)

    try:
        with open(out_path, 'wb', buffering=RAW_SECTOR_SIZE * 64) as f:
            written = encoder.encode(payload, tracks, f)
            f.flush()
            os.fsync(f.fileno())
    except OSError as e:
        _discard(out_path)
        raise ImageIOError(f"Failed to write {out_path}: {e}", out_path) from e
    except BaseException:
        # includes KeyboardInterrupt during a long encode
        _discard(out_path)
        raise

    print(f"Wrote BIN image: {out_path}")
    return written


def _discard(path: str) -> None:
    # a partial image is never valid
    try:
        os.remove(path)
        logger.debug(f"Removed partial image {path}")
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.warning(f"Could not remove partial image {path}: {e}")
