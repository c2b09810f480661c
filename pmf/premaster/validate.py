from typing import List
from pmf.CD.cd_types import Track, TrackMode
from pmf.errors import ParseError, ValidationError
from .structs import PremasterDescriptor
from .utilities import expected_payload_size

import logging
logger = logging.getLogger(__name__)


def validate_tracks(descriptor: PremasterDescriptor, payload_length: int) -> List[Track]:
    '''
    checks the parsed track table against itself and against the payload size,
    fills in each track's pregap and returns the table ready for encoding
    nothing here touches the output files
    '''
    tracks = descriptor.tracks

    if not tracks:
        raise ParseError("No tracks found in descriptor")

    if descriptor.declared_tracks > 0 and len(tracks) != descriptor.declared_tracks:
        raise ParseError(f"Track count mismatch: expected {descriptor.declared_tracks}, found {len(tracks)}")

    for i, track in enumerate(tracks):
        if track.mode not in (TrackMode.DataMode2Form1, TrackMode.Audio):
            raise ValidationError(f"Track {track.num} has invalid mode {track.mode}")
        track.mode = TrackMode(track.mode)

        if track.num != i + 1:
            raise ValidationError(f"Track numbering mismatch: got {track.num}, expected {i + 1}")

        if track.start < 0:
            raise ValidationError(f"Track {track.num} starts at negative sector {track.start}")

        if track.start > track.end:
            raise ValidationError(f"Track {track.num} start sector ({track.start}) is after end sector ({track.end})")

        if i == 0:
            track.pregap = 0
            if track.start != 0:
                logger.warning(f"Track 1 starts at sector {track.start}, cue sheet times assume the image starts at sector 0")
            continue

        previous = tracks[i - 1]
        pregap = track.start - previous.end - 1
        if pregap < 0:
            raise ValidationError(f"Track {track.num} overlaps previous track "
                                  f"(start={track.start}, previous end={previous.end}, pregap {pregap} sectors)")
        track.pregap = pregap

        if previous.is_audio and not track.is_audio:
            logger.warning(f"Data track {track.num} follows audio track {previous.num} (unusual ordering)")

    expected_size = expected_payload_size(tracks)
    if expected_size != payload_length:
        raise ValidationError(f"Payload length mismatch: expected {expected_size} bytes, got {payload_length} bytes")

    return tracks
