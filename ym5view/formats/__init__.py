"""Format handlers for YM register dumps."""

from ym5view.formats.ym5 import YM5File, YM5Reader, RegisterFrame

__all__ = ["YM5File", "YM5Reader", "RegisterFrame"]
