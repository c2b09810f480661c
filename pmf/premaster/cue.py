import os
from typing import List
from pmf.CD.cd_types import Track
from pmf.errors import ImageIOError
from .constants import *
from .utilities import msf_string


def format_cue(tracks: List[Track], bin_path: str) -> str:
    lines = [f'FILE "{os.path.basename(bin_path)}" BINARY']
    for track in tracks:
        track_type = CUE_TRACK_TYPE_AUDIO if track.is_audio else CUE_TRACK_TYPE_MODE2
        lines.append(f'  TRACK {track.num:02d} {track_type}')
        if track.pregap > 0:
            lines.append(f'    INDEX 00 {msf_string(track.start - track.pregap)}')
        lines.append(f'    INDEX 01 {msf_string(track.start)}')
    return '\n'.join(lines) + '\n'


def write_cue(tracks: List[Track], cue_path: str, bin_path: str) -> str:
    cue_content = format_cue(tracks, bin_path)
    try:
        with open(cue_path, 'w', encoding='utf-8') as cue_file:
            cue_file.write(cue_content)
    except OSError as e:
        raise ImageIOError(f"Failed to write cue {cue_path}: {e}", cue_path) from e

    print(f"Wrote CUE sheet: {cue_path}")
    return cue_path
