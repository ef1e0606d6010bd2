"""
Decoded register state for a single VBL frame.
"""

from dataclasses import dataclass, asdict
from typing import Optional


@dataclass(frozen=True)
class EnvelopeShape:
    """
    Envelope generator shape bits (register 13).

    The four flags select one of the chip's envelope waveforms using the
    continue/attack/alternate/hold encoding.
    """

    cont: bool
    attack: bool
    alternate: bool
    hold: bool

    @classmethod
    def from_byte(cls, value: int) -> "EnvelopeShape":
        """Build from the raw shape register value."""
        return cls(
            cont=bool(value & 0x08),
            attack=bool(value & 0x04),
            alternate=bool(value & 0x02),
            hold=bool(value & 0x01),
        )

    def to_bits(self) -> str:
        """Render as C/A/A/H digits, e.g. "1/0/1/0"."""
        return "/".join(str(int(flag)) for flag in (self.cont, self.attack, self.alternate, self.hold))


@dataclass(frozen=True)
class ChannelState:
    """Tone, mixer and level state for one of the three channels."""

    name: str
    tone_period: int
    tone_hz: Optional[float]  # None when the period is zero
    tone_enabled: bool
    noise_enabled: bool
    envelope: bool
    volume: int


@dataclass(frozen=True)
class FrameState:
    """
    Snapshot of every decoded field in a register frame.

    Produced by RegisterFrame.decode(); holds plain values only, so it
    stays valid after the source buffer is released.
    """

    index: Optional[int]
    channel_a: ChannelState
    channel_b: ChannelState
    channel_c: ChannelState
    noise_period: int
    envelope_period: int
    envelope_shape: EnvelopeShape

    @property
    def channels(self):
        return (self.channel_a, self.channel_b, self.channel_c)

    def to_dict(self) -> dict:
        """Convert to dictionary representation."""
        return asdict(self)
