"""Tagged result of an evaluation attempt."""

from dataclasses import dataclass
from typing import Optional

from ..errors import ValuationError
from .process import ValueProcess


@dataclass
class ValuationResult:
    """Result of evaluating a contract without raising."""
    # Value process (None if evaluation failed)
    value_process: Optional[ValueProcess] = None
    # Processing metadata
    success: bool = True
    error: Optional[ValuationError] = None

    @property
    def error_kind(self) -> Optional[str]:
        """Name of the error class, None on success."""
        return type(self.error).__name__ if self.error is not None else None

    @classmethod
    def ok(cls, value_process: ValueProcess) -> "ValuationResult":
        """Create successful result."""
        return cls(value_process=value_process, success=True)

    @classmethod
    def failure(cls, error: ValuationError) -> "ValuationResult":
        """Create error result."""
        return cls(success=False, error=error)
