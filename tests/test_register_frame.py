"""Tests for YM5 register frame decoding."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from ym5view.formats.ym5.container import YM5File
from ym5view.formats.ym5.frame import RegisterFrame
from ym5view.models.frame_state import EnvelopeShape
from ym5view.utils.validation import ZeroTonePeriodError

CLOCK = 2000000


def make_frame(values=None, external_frequency=CLOCK):
    """Build a frame from {offset: byte} pairs."""
    data = bytearray(28)
    for offset, value in (values or {}).items():
        data[offset] = value
    return RegisterFrame(bytes(data), external_frequency)


class TestTone:
    """Test tone period and frequency decoding."""

    def test_tone_a_period(self):
        """Test 12-bit period assembly from low byte and high nibble."""
        frame = make_frame({0: 0x34, 1: 0x02})

        assert frame.tone_a() == 0x0234
        assert frame.tone_a() == 564

    def test_tone_a_hz(self):
        """Test frequency from external clock and period."""
        frame = make_frame({0: 0x34, 1: 0x02})

        assert frame.tone_a_hz() == pytest.approx(CLOCK / 564)

    def test_high_nibble_masked(self):
        """Test that the upper nibble of the high byte is ignored."""
        frame = make_frame({2: 0xFF, 3: 0xFF})

        assert frame.tone_b() == 0x0FFF

    def test_channels_independent(self):
        """Test that each channel reads its own byte pair."""
        frame = make_frame({0: 0x01, 1: 0x01, 2: 0x02, 3: 0x02, 4: 0x03, 5: 0x03})

        assert frame.tone_a() == 0x101
        assert frame.tone_b() == 0x202
        assert frame.tone_c() == 0x303
        assert frame.tone_c_hz() == pytest.approx(CLOCK / 0x303)

    def test_zero_period_hz_raises(self):
        """Test that a zero period has no defined frequency."""
        frame = make_frame()

        assert frame.tone_a() == 0
        for accessor in (frame.tone_a_hz, frame.tone_b_hz, frame.tone_c_hz):
            with pytest.raises(ZeroTonePeriodError):
                accessor()

    def test_zero_period_is_zero_division(self):
        """Test that the zero period error is also a ZeroDivisionError."""
        with pytest.raises(ZeroDivisionError):
            make_frame().tone_b_hz()


class TestMixer:
    """Test mixer enable flags."""

    def test_tones_enabled(self):
        """Test mixer value with only tone bits set."""
        frame = make_frame({7: 0b00000111})

        assert frame.tone_a_enabled()
        assert frame.tone_b_enabled()
        assert frame.tone_c_enabled()
        assert not frame.noise_a_enabled()
        assert not frame.noise_b_enabled()
        assert not frame.noise_c_enabled()

    def test_noise_a_only(self):
        frame = make_frame({7: 0b00001000})

        assert frame.noise_a_enabled()
        assert not frame.noise_b_enabled()
        assert not frame.tone_a_enabled()

    def test_noise_b_and_c_share_bit_4(self):
        """Test that noise B and noise C both follow mixer bit 4."""
        frame = make_frame({7: 0b00010000})

        assert frame.noise_b_enabled()
        assert frame.noise_c_enabled()

    def test_bit_5_does_not_enable_noise_c(self):
        """Test that mixer bit 5 is not read for noise C."""
        frame = make_frame({7: 0b00100000})

        assert not frame.noise_c_enabled()

    def test_noise_period(self):
        assert make_frame({6: 0xFF}).noise_period() == 255
        assert make_frame({6: 0x1F}).noise_period() == 31


class TestLevels:
    """Test channel level registers."""

    def test_volume_and_envelope_flag(self):
        frame = make_frame({8: 0x0F, 9: 0x2A, 10: 0x3F})

        assert frame.channel_a_envelope() is False
        assert frame.channel_a_volume() == 15
        assert frame.channel_b_envelope() is True
        assert frame.channel_b_volume() == 10
        assert frame.channel_c_envelope() is True
        assert frame.channel_c_volume() == 31

    def test_volume_kept_when_envelope_set(self):
        """Test that the raw volume is reported even in envelope mode."""
        frame = make_frame({8: 0x20 | 0x07})

        assert frame.channel_a_envelope()
        assert frame.channel_a_volume() == 7

    def test_high_bits_ignored(self):
        """Test that bits 6 and 7 affect neither flag nor volume."""
        frame = make_frame({8: 0xC0})

        assert frame.channel_a_envelope() is False
        assert frame.channel_a_volume() == 0


class TestEnvelope:
    """Test envelope period and shape."""

    def test_envelope_period(self):
        """Test that byte 11 is the high byte and byte 12 the low byte."""
        frame = make_frame({11: 0x12, 12: 0x34})

        assert frame.envelope_period() == 0x1234

    def test_envelope_period_ignores_level_c(self):
        frame = make_frame({10: 0xFF, 13: 0xFF})

        assert frame.envelope_period() == 0

    def test_envelope_shape(self):
        """Test continue/attack/alternate/hold bit order."""
        frame = make_frame({13: 0b00001010})

        assert frame.envelope_cont() is True
        assert frame.envelope_att() is False
        assert frame.envelope_alt() is True
        assert frame.envelope_hold() is False
        assert frame.envelope_shape() == EnvelopeShape(
            cont=True, attack=False, alternate=True, hold=False
        )

    @pytest.mark.parametrize(
        "value,bits",
        [(0x00, "0/0/0/0"), (0x0F, "1/1/1/1"), (0x0D, "1/1/0/1"), (0xF0, "0/0/0/0")],
    )
    def test_envelope_shape_bits(self, value, bits):
        assert EnvelopeShape.from_byte(value).to_bits() == bits


class TestFrameView:
    """Test raw access, snapshots and representation."""

    def test_raw_unmodified(self):
        data = bytes(range(28))
        frame = RegisterFrame(data, CLOCK)

        assert frame.raw() == data

    def test_wrong_size_rejected(self):
        with pytest.raises(ValueError, match="Invalid frame size"):
            RegisterFrame(bytes(14), CLOCK)

    def test_decode_snapshot(self, ym5_data):
        """Test the decoded snapshot of a frame taken from a container."""
        state = YM5File(ym5_data).frame(0).decode()

        assert state.index == 0
        assert state.channel_a.tone_period == 564
        assert state.channel_a.tone_hz == pytest.approx(CLOCK / 564)
        assert state.channel_b.tone_period == 0xFFE
        assert state.channel_c.tone_period == 0
        assert state.channel_c.tone_hz is None
        assert [c.tone_enabled for c in state.channels] == [True, True, True]
        assert [c.noise_enabled for c in state.channels] == [False, False, False]
        assert state.channel_b.envelope is True
        assert state.channel_c.volume == 31
        assert state.noise_period == 0x1F
        assert state.envelope_period == 0x1234
        assert state.envelope_shape.to_bits() == "1/0/1/0"

    def test_decode_to_dict(self, ym5_data):
        data = YM5File(ym5_data).frame(1).decode().to_dict()

        assert data["index"] == 1
        assert data["channel_a"]["noise_enabled"] is True
        assert data["channel_c"]["noise_enabled"] is True
        assert data["envelope_shape"] == {
            "cont": False,
            "attack": False,
            "alternate": False,
            "hold": False,
        }

    def test_repr_shows_enabled_tones_only(self):
        frame = make_frame({0: 0x34, 1: 0x02, 7: 0b00000001, 13: 0x0A})
        text = repr(frame)

        assert text.startswith("RegisterFrame(")
        assert "tone_a=564" in text
        assert "tone_b" not in text
        assert "envelope_shape=1/0/1/0" in text

    def test_repr_with_zero_period(self):
        frame = make_frame({7: 0b00000010})

        assert "tone_b=0 (- Hz)" in repr(frame)
