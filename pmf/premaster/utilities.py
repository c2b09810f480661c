from typing import List, Tuple
from pmf.CD.cd_types import Track
from pmf.CD.sector_builder import lba_to_msf
from .constants import *


def msf_string(lba: int) -> str:
    minute, second, frame = lba_to_msf(lba)
    return f"{minute:02d}:{second:02d}:{frame:02d}"


def expected_payload_size(tracks: List[Track]) -> int:
    return sum(track.payload_size for track in tracks)


def split_premaster_path(path: str) -> str:
    '''
    strips the descriptor and payload extensions so that any of
    game.pmf.ff, game.pmf or game resolve to the same base path
    '''
    base = path
    if base.lower().endswith(DESCRIPTOR_EXTENSION):
        base = base[:-len(DESCRIPTOR_EXTENSION)]
    if base.lower().endswith(PREMASTER_EXTENSION):
        base = base[:-len(PREMASTER_EXTENSION)]
    return base


def premaster_paths(base: str) -> Tuple[str, str]:
    payload_path = base + PREMASTER_EXTENSION
    return payload_path, payload_path + DESCRIPTOR_EXTENSION


def output_paths(base: str) -> Tuple[str, str]:
    return base + BIN_EXTENSION, base + CUE_EXTENSION
