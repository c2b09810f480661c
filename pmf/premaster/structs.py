from dataclasses import dataclass, field
from typing import List
from pmf.CD.cd_types import Track


@dataclass
class PremasterDescriptor:
    audio_msb: bool = False
    declared_tracks: int = 0
    tracks: List[Track] = field(default_factory=list)
    skipped_lines: int = 0


@dataclass(frozen=True)
class EncoderConfig:
    audio_msb: bool = False

    @classmethod
    def from_descriptor(cls, descriptor: PremasterDescriptor) -> 'EncoderConfig':
        return cls(audio_msb=descriptor.audio_msb)
