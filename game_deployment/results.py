from enum import Enum
from typing import NamedTuple, Optional


class StepStatus(Enum):
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    SKIPPED = "skipped"


class VerificationResult(NamedTuple):
    """Outcome of publishing a deployed contract to a block explorer."""

    status: StepStatus
    address: str
    error: Optional[str] = None

    @classmethod
    def succeeded(cls, address: str) -> "VerificationResult":
        return cls(status=StepStatus.SUCCEEDED, address=address)

    @classmethod
    def failed(cls, address: str, error: str) -> "VerificationResult":
        return cls(status=StepStatus.FAILED, address=address, error=error)

    @classmethod
    def skipped(cls, address: str) -> "VerificationResult":
        return cls(status=StepStatus.SKIPPED, address=address)

    @property
    def is_success(self) -> bool:
        return self.status is StepStatus.SUCCEEDED

    @property
    def is_failure(self) -> bool:
        return self.status is StepStatus.FAILED
