class PaletteCutError(Exception):
    """Base class for every failure raised by the color-analysis engine."""


class ConfigurationError(PaletteCutError, ValueError):
    """Invalid call parameters, caught before any work starts."""


class EmptyInputError(PaletteCutError, ValueError):
    """A reducer received zero pixels."""


class EmptyBucketError(EmptyInputError):
    """A median-cut bucket ended up with zero pixels."""


class AcquisitionError(PaletteCutError):
    """
    Decoding or reading an image source failed.

    The original exception is kept as __cause__; the engine never retries.
    """

    def __init__(self, source, reason):
        self.source = str(source)
        self.reason = reason
        super().__init__(f"Error acquiring pixels from {self.source}: {reason}")
