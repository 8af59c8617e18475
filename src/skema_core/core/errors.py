"""Error taxonomy shared by every kernel component."""

from __future__ import annotations


class SkemaError(Exception):
    """Base class for all errors raised by the kernel."""


class InvalidInput(SkemaError, ValueError):
    """A caller supplied a value the kernel refuses to coerce.

    Raised synchronously for length mismatches, unknown symbol ids,
    negative balances, non-positive pools and out-of-range ranks.
    """


class PayoutIntegrityError(SkemaError, AssertionError):
    """A payout table failed its per-mille closure check.

    This is a programming error, not a user error: a table that does not
    sum to exactly 1000 would corrupt every payout computed from it.
    """


class TransferDenied(SkemaError):
    """A transfer quote failed authorization (tier or available balance)."""
