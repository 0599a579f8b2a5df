"""Exceptions raised by colorsolve."""


class ColorError(ValueError):
    """Base class for malformed color input."""


class FormatError(ColorError):
    """A hex string or byte sequence cannot be read as colors."""


class UnknownModeError(ColorError):
    """A blend mode other than ``screen`` or ``multiply`` was requested."""
