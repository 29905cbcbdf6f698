"""
Exception hierarchy for hyte.

All exceptions inherit from HyteError to allow catching any
library-specific error.

Two failure categories are kept apart:
    - Absent data (an empty sample) is not an error. Test functions
      return None so the caller can check and carry on.
    - Contract violations (zero sample size, negative standard deviation,
      ragged tables, ...) raise immediately with a message naming the
      offending parameter and its actual value.
"""


class HyteError(Exception):
    """Base exception for all hyte errors."""
    pass


class ValidationError(HyteError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised for ragged contingency tables, a frequency matrix whose
    shape does not match the requested test, or probability vectors
    whose length differs from the observed counts.
    """
    pass


class NumericalError(HyteError):
    """
    Numerical computation failed.

    Raised when a computation would otherwise divide by zero and let
    NaN or Inf flow into a result (zero standard error, zero expected
    frequency).

    Attributes:
        quantity: Name of the quantity that degenerated, if known
        value: The offending value, if known
    """

    def __init__(
        self,
        message: str,
        quantity: str | None = None,
        value: float | None = None,
    ):
        super().__init__(message)
        self.quantity = quantity
        self.value = value
