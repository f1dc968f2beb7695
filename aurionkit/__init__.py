"""Pure-Python models of a hobby OS desktop: mouse input, networking, firmware and apps."""

__version__ = "0.1.0"