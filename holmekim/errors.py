from __future__ import annotations


class HolmeKimError(Exception):
    """Base class for every error raised by the generator."""


class ConfigurationError(HolmeKimError, ValueError):
    """Invalid run parameters; raised before any growth begins."""


class SeedNetworkError(HolmeKimError, RuntimeError):
    """The seed network could not be built (edgeless or never connected)."""


class InvariantViolation(HolmeKimError, AssertionError):
    """Internal bookkeeping no longer matches the graph."""


class SamplingStallError(HolmeKimError, RuntimeError):
    """A rejection-sampling loop ran out of retries."""


class EmptySamplerError(SamplingStallError):
    """Sampling was requested before any edge was recorded."""


class GrowthStateError(HolmeKimError, RuntimeError):
    """Operation not allowed in the current growth state."""
