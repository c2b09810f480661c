from dataclasses import dataclass
from typing import List
from pmf.CD.cd_types import Track
from pmf.premaster_filter import PremasterFilter
from pmf.errors import ImageIOError
from .descriptor import read_descriptor
from .validate import validate_tracks
from .structs import EncoderConfig
from .write import write_bin
from .cue import write_cue

import logging
logger = logging.getLogger(__name__)


@dataclass
class ConversionResult:
    bin_path: str
    cue_path: str
    tracks: List[Track]
    sectors: int


def convert(path: str) -> ConversionResult:
    '''
    converts <base>.pmf + <base>.pmf.ff into <base>.bin + <base>.cue
    the descriptor is fully validated against the payload before
    the image file is created
    '''
    premaster = PremasterFilter(path)
    if not premaster.identify():
        raise ImageIOError(f"Premaster pair not found for {premaster.base_path} "
                           f"(need {premaster.payload_path} and {premaster.descriptor_path})",
                           premaster.payload_path)

    logger.debug(f"Input format: {premaster.name}")
    payload = premaster.read_payload()
    logger.debug(f"Read {len(payload)} payload bytes from {premaster.payload_path}")

    descriptor = read_descriptor(premaster.descriptor_path)
    tracks = validate_tracks(descriptor, len(payload))
    config = EncoderConfig.from_descriptor(descriptor)

    sectors = write_bin(payload, tracks, premaster.bin_path, config)
    write_cue(tracks, premaster.cue_path, premaster.bin_path)

    return ConversionResult(bin_path=premaster.bin_path, cue_path=premaster.cue_path,
                            tracks=tracks, sectors=sectors)
