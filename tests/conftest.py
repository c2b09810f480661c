import os
import random

import pytest

from pmf.CD.cd_types import RAW_SECTOR_SIZE, PREMASTER_DATA_SECTOR_SIZE, TrackMode


def descriptor_text(track_lines, byte_order='AUDIO_LSB', declared=None):
    if declared is None:
        declared = len(track_lines)
    lines = [
        'PREMASTER_FILE_FORMAT 1.0',
        f'AUDIO_BYTE_ORDER: {byte_order}',
        f'%NUMBER_OF_ADDED_TRACKS {declared}',
        '%START_OF_ADDED_TRACK_DATA',
    ]
    lines.extend(track_lines)
    return '\n'.join(lines) + '\n'


def payload_for(track_lines, seed=0):
    '''
    builds a payload that exactly fits the given "num mode start end" lines
    '''
    rng = random.Random(seed)
    size = 0
    for line in track_lines:
        _, mode, start, end = (int(v) for v in line.split())
        unit = RAW_SECTOR_SIZE if mode == TrackMode.Audio else PREMASTER_DATA_SECTOR_SIZE
        size += (end - start + 1) * unit
    return bytes(rng.getrandbits(8) for _ in range(size))


@pytest.fixture
def make_premaster(tmp_path):
    def _make(track_lines, payload=None, byte_order='AUDIO_LSB', declared=None, name='game'):
        if payload is None:
            payload = payload_for(track_lines)
        base = os.path.join(str(tmp_path), name)
        with open(base + '.pmf', 'wb') as f:
            f.write(payload)
        with open(base + '.pmf.ff', 'w', encoding='utf-8') as f:
            f.write(descriptor_text(track_lines, byte_order, declared))
        return base
    return _make
