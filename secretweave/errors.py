class ReconstructionError(ValueError):
    """Base class for failures while reconstructing one dataset"""


class DecodeError(ReconstructionError):
    """A share value is not a valid numeral in its stated base"""

    def __init__(self, message, digits=None, base=None, char=None, position=None):
        super().__init__(message)
        self.digits = digits
        self.base = base
        self.char = char
        self.position = position


class InterpolationError(ReconstructionError):
    """The selected points do not determine an integer constant term"""

    def __init__(self, message, x_values=()):
        super().__init__(message)
        self.x_values = list(x_values)


class RecordShapeError(ReconstructionError):
    """An input record is missing its metadata or holds a malformed share"""

    def __init__(self, message, key=None):
        super().__init__(message)
        self.key = key
