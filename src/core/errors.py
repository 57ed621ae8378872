# core/errors.py


class RaytracerError(Exception):
    """Base class for every error raised by the renderer."""


class ConfigurationError(RaytracerError, ValueError):
    """A camera, scene or render setting is outside its valid range."""


class SamplingError(RaytracerError, RuntimeError):
    """A rejection sampler ran out of attempts."""
