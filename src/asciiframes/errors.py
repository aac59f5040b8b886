class AsciiFramesError(Exception):
    """Base class for every failure raised by asciiframes."""


class InvalidParameter(AsciiFramesError, ValueError):
    pass


class UnknownStrategy(AsciiFramesError, ValueError):
    pass


class InvalidRamp(AsciiFramesError, ValueError):
    pass


class DecodeError(AsciiFramesError):
    """The source could not be read or parsed as an image."""


class FrameIOError(AsciiFramesError, OSError):
    """Reading, writing or listing a frame path failed."""


class EmptyInputSet(AsciiFramesError):
    """A frame directory contained no files of the expected kind."""
