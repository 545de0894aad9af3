"""
Exception taxonomy for the swap valuation protocol.

Every error subclasses `SwapError` and one builtin, so callers that already
catch `ValueError` / `TypeError` (as the GraphQL service layer does) keep
working.
"""

# Arguments validation

IA_NOMINAL_NOT_SET = "nominal null or not set"

IA_TYPE_NOT_SET = "swap type null or not set"

IA_FIXED_RATE_NOT_SET = "fixed rate null or not set"

IA_DISCOUNT_CURVE_NOT_SET = "discount curve not set"

IA_LENGTH_MISMATCH = "number of {0} ({1}) different from number of {2} ({3})"

# Protocol types

TM_WRONG_ARGUMENTS = "wrong argument type: expected {0}, got {1}"

TM_WRONG_RESULTS = "wrong result type: expected {0}, got {1}"

# Degenerate results

UR_ZERO_ANNUITY = "{0} is undefined: {1} leg annuity is zero"

UR_MISSING_COUPON = "floating coupon paying on {0} cannot be determined (missing fixing?)"

# Inspectors

RNA_NOT_CALCULATED = "{0} not available: instrument has not been valued"

RNA_EXPIRED = "{0} not available: instrument is expired"


class SwapError(Exception):
    """Base class for all swap valuation errors."""


class InvalidArguments(SwapError, ValueError):
    """Arguments snapshot failed validation (length mismatch, missing nominal)."""


class TypeMismatch(SwapError, TypeError):
    """Wrong concrete arguments/results type supplied to the engine protocol."""


class UndefinedResult(SwapError, ArithmeticError):
    """A fair value is mathematically undefined (degenerate annuity, unknown coupon)."""


class ResultNotAvailable(SwapError, LookupError):
    """A result inspector was read before any valuation ran."""
