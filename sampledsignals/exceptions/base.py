"""Base exception classes for sampledsignals."""


class SampledSignalsError(Exception):
    """Base class for every error raised by sampledsignals.

    Callers that only want to know whether an operation failed can catch this
    class; end-of-stream is never reported through an exception.
    """
