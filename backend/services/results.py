"""
Explicit outcomes for repository operations
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class ResultKind(str, Enum):
    """What happened during a repository call"""
    OK = "ok"
    NOT_FOUND = "not_found"
    VALIDATION_ERROR = "validation_error"
    STORAGE_ERROR = "storage_error"


@dataclass
class OperationResult:
    """Result of a repository operation"""
    kind: ResultKind
    value: Any = None
    errors: Dict[str, List[str]] = field(default_factory=dict)
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.kind == ResultKind.OK

    @classmethod
    def success(cls, value: Any = None) -> "OperationResult":
        return cls(kind=ResultKind.OK, value=value)

    @classmethod
    def not_found(cls, message: Optional[str] = None) -> "OperationResult":
        return cls(kind=ResultKind.NOT_FOUND, message=message)

    @classmethod
    def invalid(cls, errors: Dict[str, List[str]], message: str = "Data is invalid") -> "OperationResult":
        return cls(kind=ResultKind.VALIDATION_ERROR, errors=errors, message=message)

    @classmethod
    def storage_error(cls, message: str) -> "OperationResult":
        return cls(kind=ResultKind.STORAGE_ERROR, message=message)
