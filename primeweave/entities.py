from collections import namedtuple

Share = namedtuple('Share', 'x y')
Share.__doc__ = """A point (x, y) on the sharing polynomial; x is the share index."""


class PrimeWeaveError(Exception):
    """Base class for every error raised by the sharing engine."""


class ShareConfigurationError(PrimeWeaveError, ValueError):
    """Split parameters are invalid; no shares were produced."""


class ReconstructionError(PrimeWeaveError, ValueError):
    """The supplied share set cannot be interpolated."""


class SecretMismatchError(PrimeWeaveError):
    """A reconstructed secret differs from the original."""

    def __init__(self, expected, actual):
        super().__init__("Reconstructed secret does not match the original secret!")
        self.expected = expected
        self.actual = actual


class ReconstructionResult:
    """
    Outcome of a reconstruction check.
    Holds either the recovered value or the error that prevented a
    trustworthy one, so callers decide how to react instead of aborting.
    """
    __slots__ = ('value', 'error')

    def __init__(self, value=None, error=None):
        self.value = value
        self.error = error

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self):
        if self.error is not None:
            raise self.error
        return self.value

    @classmethod
    def success(cls, value):
        return cls(value=value)

    @classmethod
    def failure(cls, error, value=None):
        return cls(value=value, error=error)

    def __repr__(self):
        if self.ok:
            return f"ReconstructionResult(ok, value={self.value})"
        return f"ReconstructionResult(failed, error={self.error!r})"
