"""Cooperative cancellation for long-running, multi-step operations.

A CancellationToken is threaded through every saga step and checked
between steps. It does not interrupt an external call that is already in
flight; the saga compensates whatever that call created.
"""

from tenant_management.domain.exceptions import OperationCancelledException


class CancellationToken:
    """Flag that a caller sets to ask an operation to stop at the next step boundary."""

    def __init__(self) -> None:
        self._cancelled = False

    @property
    def is_cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        """Request cancellation. Idempotent."""
        self._cancelled = True

    def raise_if_cancelled(self, operation: str) -> None:
        """Raise OperationCancelledException if cancellation was requested."""
        if self._cancelled:
            raise OperationCancelledException(operation)
