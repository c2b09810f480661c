import random

import pytest

from pmf.CD.cd_types import (
    TrackMode, SYNC_PATTERN, RAW_SECTOR_SIZE, PREMASTER_DATA_SECTOR_SIZE, SUBHEADER_SIZE
)
from pmf.CD.cd_checksums import CdChecksums
from pmf.CD.ecc import ReedSolomonParity
from pmf.CD.sector_builder import SectorBuilder, lba_to_msf, to_bcd, swap_audio_endianness

from test_cd_checksums import bitwise_edc
from test_ecc import table_ecc


def unit_bytes(seed):
    rng = random.Random(seed)
    return bytes(rng.getrandbits(8) for _ in range(PREMASTER_DATA_SECTOR_SIZE))


@pytest.mark.parametrize('lba, msf', [
    (0, (0, 0, 0)),
    (74, (0, 0, 74)),
    (75, (0, 1, 0)),
    (150, (0, 2, 0)),
    (4499, (0, 59, 74)),
    (4500, (1, 0, 0)),
    (((16 * 60) + 2) * 75 + 5, (16, 2, 5)),
])
def test_lba_to_msf(lba, msf):
    assert lba_to_msf(lba) == msf


def test_to_bcd():
    assert to_bcd(28) == 0x28
    assert to_bcd(0) == 0x00
    assert to_bcd(9) == 0x09
    assert to_bcd(59) == 0x59
    assert to_bcd(74) == 0x74


def test_disc_msf_adds_lead_in():
    assert SectorBuilder.disc_msf(0) == (0, 2, 0)
    assert SectorBuilder.disc_msf(4350) == (1, 0, 0)


def test_swap_audio_endianness():
    assert swap_audio_endianness(b'\x01\x02\x03\x04') == bytearray(b'\x02\x01\x04\x03')
    assert swap_audio_endianness(memoryview(b'\xAA\xBB')) == bytearray(b'\xBB\xAA')


def test_data_sector_layout():
    unit = unit_bytes(1)
    sector = SectorBuilder().build_data_sector(unit, 11)

    assert len(sector) == RAW_SECTOR_SIZE
    assert sector[0:12] == SYNC_PATTERN
    # LBA 11 + 150 lead-in = 00:02:11
    assert sector[12:15] == b'\x00\x02\x11'
    assert sector[15] == TrackMode.DataMode2Form1
    assert sector[16:24] == unit[:SUBHEADER_SIZE]
    assert sector[24:2072] == unit[SUBHEADER_SIZE:]


def test_data_sector_golden_vector():
    # fixed Form 1 subheader and a repeating data pattern
    unit = bytes([0x00, 0x00, 0x08, 0x00, 0x00, 0x00, 0x08, 0x00]) + bytes(i & 0xFF for i in range(2048))
    sector = SectorBuilder().build_data_sector(unit, 1234)

    expected_edc = bitwise_edc(sector[16:2072]).to_bytes(4, 'little')
    assert sector[2072:2076] == expected_edc
    assert sector[2076:2248] == table_ecc(bytes(sector[12:2076]), 86, 24, 2, 86)
    assert sector[2248:2352] == table_ecc(bytes(sector[12:2248]), 52, 43, 86, 88)


def test_data_sector_uses_engines():
    unit = unit_bytes(2)
    sector = SectorBuilder().build_data_sector(unit, 0)
    parity = ReedSolomonParity()
    assert sector[2072:2076] == CdChecksums().edc_bytes(sector[16:2072])
    assert sector[2076:2248] == parity.p_parity(bytes(sector[12:2076]))
    assert sector[2248:2352] == parity.q_parity(bytes(sector[12:2248]))


def test_zero_data_sector_has_zero_edc_and_ecc():
    sector = SectorBuilder().build_data_sector(bytes(PREMASTER_DATA_SECTOR_SIZE), 500)
    assert sector[2072:] == bytes(RAW_SECTOR_SIZE - 2072)


def test_ecc_does_not_depend_on_address():
    unit = unit_bytes(3)
    builder = SectorBuilder()
    a = builder.build_data_sector(unit, 0)
    b = builder.build_data_sector(unit, 7000)
    assert a[12:15] != b[12:15]
    assert a[2072:] == b[2072:]


def test_data_sector_rejects_wrong_size():
    with pytest.raises(ValueError):
        SectorBuilder().build_data_sector(bytes(2048), 0)


def test_data_pregap_sector():
    sector = SectorBuilder().build_pregap_sector(TrackMode.DataMode2Form1, 11)
    assert sector[0:12] == SYNC_PATTERN
    assert sector[12:16] == b'\x00\x02\x11\x02'
    assert sector[16:] == bytes(2336)


def test_audio_pregap_sector_is_silent():
    assert SectorBuilder().build_pregap_sector(TrackMode.Audio, 11) == bytes(RAW_SECTOR_SIZE)


def test_audio_sector():
    unit = bytes(range(256)) * 9 + bytes(range(48))
    assert SectorBuilder.build_audio_sector(unit) == unit
    swapped = SectorBuilder.build_audio_sector(unit, swap_bytes=True)
    assert swapped[0:4] == b'\x01\x00\x03\x02'
    assert swap_audio_endianness(swapped) == unit

    with pytest.raises(ValueError):
        SectorBuilder.build_audio_sector(bytes(2351))
