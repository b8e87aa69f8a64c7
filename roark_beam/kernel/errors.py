# roark_beam/kernel/errors.py
"""Errors raised by the beam solution kernel and the superposition layer."""


class InvalidRestraintError(ValueError):
    """Raised when an end-restraint pair is not one of the ten valid Roark cases."""

    def __init__(self, code):
        self.code = code
        super().__init__(
            f"Invalid end restraint code {code!r}. Valid codes: "
            "11, 12, 13, 14, 21, 22, 23, 31, 32, 41."
        )


class InvalidLoadError(ValueError):
    """Raised when a point load lies outside the beam."""

    def __init__(self, load, length: float):
        self.load = load
        self.length = length
        super().__init__(
            f"Point load {load!r} is located outside the beam [0, {length}]."
        )


class InvalidConfigurationError(ValueError):
    """Raised for a malformed beam or discretization request."""
    pass
