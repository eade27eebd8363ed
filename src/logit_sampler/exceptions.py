"""Exception hierarchy for logit-sampler.

All exceptions derive from LogitSamplerError, enabling broad catch patterns
at the inference-loop boundary while allowing fine-grained handling internally.
"""


class LogitSamplerError(Exception):
    """Base exception for all logit-sampler errors."""


class InvalidParameterError(LogitSamplerError):
    """A transform parameter or input vector is out of range.

    Raised when a temperature falls outside [0, 2], k is not positive,
    a probability threshold falls outside (0, 1), or the score vector
    is not one-dimensional.
    """


class NoValidCandidateError(LogitSamplerError):
    """No position is left to select.

    Raised when the score vector is empty or every position has been
    excluded (set to -inf) before selection.
    """


class SamplingFailureError(LogitSamplerError):
    """The random draw produced no result.

    Raised when the categorical distribution is not well formed (e.g.
    NaN scores make the probability mass non-finite).
    """


class ConfigValidationError(LogitSamplerError):
    """Configuration field validation failed.

    Raised when per-request overrides contain unknown keys, attempt to
    override protected logging fields, or name an unknown transform.
    """
