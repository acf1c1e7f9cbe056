from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional


class MutationState(Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    FAILED = "failed"


@dataclass
class MutationResult:
    """Outcome of a remote write.

    Clients only replace their local copy with ``instance`` once the state is
    confirmed; a failed mutation leaves the previous copy untouched.
    """

    state: MutationState = MutationState.PENDING
    instance: Any = None
    error: Optional[str] = None
    warnings: List[str] = field(default_factory=list)

    @property
    def confirmed(self):
        return self.state is MutationState.CONFIRMED

    def confirm(self, instance):
        self.state = MutationState.CONFIRMED
        self.instance = instance
        self.error = None
        return self

    def fail(self, error):
        self.state = MutationState.FAILED
        self.error = str(error)
        return self

    def warn(self, message):
        self.warnings.append(message)

    def as_payload(self, data=None):
        payload = {"state": self.state.value, "warnings": list(self.warnings)}
        if data is not None:
            payload["data"] = data
        if self.error:
            payload["error"] = self.error
        return payload
