"""
YM5 register frame decoder.

One frame is the full PSG register state for a single VBL tick, stored
as 28 bytes. Only the first 14 bytes map to chip registers:

    Byte  Register
    0     R00 Channel A tone period, low 8 bits
    1     R01 Channel A tone period, high 4 bits
    2     R02 Channel B tone period, low 8 bits
    3     R03 Channel B tone period, high 4 bits
    4     R04 Channel C tone period, low 8 bits
    5     R05 Channel C tone period, high 4 bits
    6     R06 Noise period
    7     R07 Mixer (.. | NoiseB/C | NoiseA | ToneC | ToneB | ToneA)
    8     R08 Channel A level (M | 5 bits)
    9     R09 Channel B level (M | 5 bits)
    10    R10 Channel C level (M | 5 bits)
    11    R11 Envelope period, high byte
    12    R12 Envelope period, low byte
    13    R13 Envelope shape (CONT | ATT | ALT | HOLD)
    14-27 Not decoded, available through raw()

Noise B and noise C are both read from mixer bit 4; mixer bit 5 is not
decoded.
"""

from typing import Optional, Union

from ym5view.models.frame_state import ChannelState, EnvelopeShape, FrameState
from ym5view.utils.validation import ZeroTonePeriodError

FRAME_SIZE = 28


class RegisterOffsets:
    """Byte offsets of decoded fields inside a frame."""

    TONE_A = 0
    TONE_B = 2
    TONE_C = 4
    NOISE_PERIOD = 6
    MIXER = 7
    LEVEL_A = 8
    LEVEL_B = 9
    LEVEL_C = 10
    ENVELOPE_HI = 11
    ENVELOPE_LO = 12
    ENVELOPE_SHAPE = 13

    # Mixer bits
    TONE_A_BIT = 0
    TONE_B_BIT = 1
    TONE_C_BIT = 2
    NOISE_A_BIT = 3
    NOISE_B_BIT = 4
    NOISE_C_BIT = 4  # shares the noise B bit

    # Level register
    ENVELOPE_MODE_BIT = 5
    VOLUME_MASK = 0x1F


class RegisterFrame:
    """
    Read-only view over one 28-byte register frame.

    The frame keeps a reference to the caller's buffer; the buffer must
    stay alive and unmodified while the frame is in use.

    Example:
        frame = ym.frame(0)
        if frame.tone_a_enabled() and frame.tone_a():
            print(f"A: {frame.tone_a_hz():.1f} Hz")
    """

    def __init__(
        self,
        data: Union[bytes, memoryview],
        external_frequency: int,
        index: Optional[int] = None,
    ):
        """
        Args:
            data: Exactly 28 bytes of register data
            external_frequency: Chip clock in Hz, used for tone frequencies
            index: Frame position in the song, if known
        """
        if len(data) != FRAME_SIZE:
            raise ValueError(f"Invalid frame size: {len(data)} (expected {FRAME_SIZE})")

        self._data = memoryview(data)
        self.external_frequency = external_frequency
        self.index = index

    def raw(self) -> bytes:
        """Return the 28 frame bytes unmodified."""
        return self._data.tobytes()

    # Tone

    def _tone(self, offset: int) -> int:
        return ((self._data[offset + 1] & 0x0F) << 8) | self._data[offset]

    def _hz(self, period: int, channel: str) -> float:
        if period == 0:
            raise ZeroTonePeriodError(f"Tone {channel} period is 0, frequency is undefined")
        return self.external_frequency / period

    def tone_a(self) -> int:
        return self._tone(RegisterOffsets.TONE_A)

    def tone_b(self) -> int:
        return self._tone(RegisterOffsets.TONE_B)

    def tone_c(self) -> int:
        return self._tone(RegisterOffsets.TONE_C)

    def tone_a_hz(self) -> float:
        """
        Channel A tone frequency in Hz.

        Raises:
            ZeroTonePeriodError: If the tone period is 0
        """
        return self._hz(self.tone_a(), "A")

    def tone_b_hz(self) -> float:
        return self._hz(self.tone_b(), "B")

    def tone_c_hz(self) -> float:
        return self._hz(self.tone_c(), "C")

    # Noise and mixer

    def noise_period(self) -> int:
        return self._data[RegisterOffsets.NOISE_PERIOD]

    def _mixer_bit(self, bit: int) -> bool:
        return (self._data[RegisterOffsets.MIXER] & (1 << bit)) != 0

    def tone_a_enabled(self) -> bool:
        return self._mixer_bit(RegisterOffsets.TONE_A_BIT)

    def tone_b_enabled(self) -> bool:
        return self._mixer_bit(RegisterOffsets.TONE_B_BIT)

    def tone_c_enabled(self) -> bool:
        return self._mixer_bit(RegisterOffsets.TONE_C_BIT)

    def noise_a_enabled(self) -> bool:
        return self._mixer_bit(RegisterOffsets.NOISE_A_BIT)

    def noise_b_enabled(self) -> bool:
        return self._mixer_bit(RegisterOffsets.NOISE_B_BIT)

    def noise_c_enabled(self) -> bool:
        """Noise C flag. Reads the same mixer bit as noise B."""
        return self._mixer_bit(RegisterOffsets.NOISE_C_BIT)

    # Channel levels

    def _envelope_mode(self, offset: int) -> bool:
        return (self._data[offset] & (1 << RegisterOffsets.ENVELOPE_MODE_BIT)) != 0

    def _volume(self, offset: int) -> int:
        return self._data[offset] & RegisterOffsets.VOLUME_MASK

    def channel_a_envelope(self) -> bool:
        return self._envelope_mode(RegisterOffsets.LEVEL_A)

    def channel_a_volume(self) -> int:
        return self._volume(RegisterOffsets.LEVEL_A)

    def channel_b_envelope(self) -> bool:
        return self._envelope_mode(RegisterOffsets.LEVEL_B)

    def channel_b_volume(self) -> int:
        return self._volume(RegisterOffsets.LEVEL_B)

    def channel_c_envelope(self) -> bool:
        return self._envelope_mode(RegisterOffsets.LEVEL_C)

    def channel_c_volume(self) -> int:
        return self._volume(RegisterOffsets.LEVEL_C)

    # Envelope generator

    def envelope_period(self) -> int:
        return (self._data[RegisterOffsets.ENVELOPE_HI] << 8) | self._data[
            RegisterOffsets.ENVELOPE_LO
        ]

    def envelope_shape(self) -> EnvelopeShape:
        return EnvelopeShape.from_byte(self._data[RegisterOffsets.ENVELOPE_SHAPE])

    def envelope_cont(self) -> bool:
        return self.envelope_shape().cont

    def envelope_att(self) -> bool:
        return self.envelope_shape().attack

    def envelope_alt(self) -> bool:
        return self.envelope_shape().alternate

    def envelope_hold(self) -> bool:
        return self.envelope_shape().hold

    # Snapshot

    def _channel_state(
        self, name: str, period: int, tone_enabled: bool, noise_enabled: bool, level: int
    ) -> ChannelState:
        return ChannelState(
            name=name,
            tone_period=period,
            tone_hz=self.external_frequency / period if period else None,
            tone_enabled=tone_enabled,
            noise_enabled=noise_enabled,
            envelope=self._envelope_mode(level),
            volume=self._volume(level),
        )

    def decode(self) -> FrameState:
        """
        Decode every field into a FrameState.

        Tone frequencies are None for channels whose period is 0.
        """
        return FrameState(
            index=self.index,
            channel_a=self._channel_state(
                "A",
                self.tone_a(),
                self.tone_a_enabled(),
                self.noise_a_enabled(),
                RegisterOffsets.LEVEL_A,
            ),
            channel_b=self._channel_state(
                "B",
                self.tone_b(),
                self.tone_b_enabled(),
                self.noise_b_enabled(),
                RegisterOffsets.LEVEL_B,
            ),
            channel_c=self._channel_state(
                "C",
                self.tone_c(),
                self.tone_c_enabled(),
                self.noise_c_enabled(),
                RegisterOffsets.LEVEL_C,
            ),
            noise_period=self.noise_period(),
            envelope_period=self.envelope_period(),
            envelope_shape=self.envelope_shape(),
        )

    def __repr__(self) -> str:
        parts = []
        for name, enabled, period in (
            ("a", self.tone_a_enabled(), self.tone_a()),
            ("b", self.tone_b_enabled(), self.tone_b()),
            ("c", self.tone_c_enabled(), self.tone_c()),
        ):
            if enabled:
                hz = f"{self.external_frequency / period:.2f}" if period else "-"
                parts.append(f"tone_{name}={period} ({hz} Hz)")

        parts.append(f"noise_period={self.noise_period()}")
        parts.append(
            "noise_enabled="
            f"{int(self.noise_a_enabled())}{int(self.noise_b_enabled())}{int(self.noise_c_enabled())}"
        )
        parts.append(f"chan_a={self.channel_a_envelope()}/{self.channel_a_volume()}")
        parts.append(f"chan_b={self.channel_b_envelope()}/{self.channel_b_volume()}")
        parts.append(f"chan_c={self.channel_c_envelope()}/{self.channel_c_volume()}")
        parts.append(f"envelope_period={self.envelope_period()}")
        parts.append(f"envelope_shape={self.envelope_shape().to_bits()}")
        return f"RegisterFrame({', '.join(parts)})"
