import re
from typing import Iterable
from pmf.CD.cd_types import Track
from pmf.errors import ImageIOError
from .structs import PremasterDescriptor
from .constants import *

import logging
logger = logging.getLogger(__name__)


def parse_descriptor(lines: Iterable[str]) -> PremasterDescriptor:
    '''
    reads the track list of a premaster descriptor (.pmf.ff)
    tracks are only collected after the %START_OF_ADDED_TRACK_DATA marker,
    lines in that section which are not four integers are skipped
    '''
    descriptor = PremasterDescriptor()
    in_section = False

    regex_byte_order = re.compile(REGEX_AUDIO_BYTE_ORDER)
    regex_track_count = re.compile(REGEX_NUMBER_OF_TRACKS)
    regex_start = re.compile(REGEX_START_OF_TRACKS)
    regex_track = re.compile(REGEX_TRACK)

    for line_number, line in enumerate(lines, 1):
        line = line.strip()
        if not line:
            continue

        bm = regex_byte_order.match(line)
        if bm:
            descriptor.audio_msb = bm.group('order') == AUDIO_MSB
            logger.debug(f"Audio byte order: {bm.group('order') or 'unset'}")
            continue

        cm = regex_track_count.match(line)
        if cm:
            descriptor.declared_tracks = int(cm.group('count')) if cm.group('count') else 0
            continue

        if regex_start.match(line):
            in_section = True
            continue

        if not in_section:
            continue

        tm = regex_track.match(line)
        if not tm:
            logger.debug(f"Skipping malformed track line {line_number}: {line}")
            descriptor.skipped_lines += 1
            continue

        descriptor.tracks.append(Track(
            num=int(tm.group('num')),
            mode=int(tm.group('mode')),
            start=int(tm.group('start')),
            end=int(tm.group('end'))
        ))

    logger.debug(f"Parsed {len(descriptor.tracks)} tracks, {descriptor.declared_tracks} declared")
    return descriptor


def read_descriptor(path: str) -> PremasterDescriptor:
    try:
        with open(path, 'r', encoding='utf-8', errors='replace') as f:
            return parse_descriptor(f)
    except OSError as e:
        raise ImageIOError(f"Failed to read {path}: {e}", path) from e
