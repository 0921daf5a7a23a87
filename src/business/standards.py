from dataclasses import dataclass
from enum import Enum
from typing import Optional

class ValidationLevel(str, Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

@dataclass
class ValidationResult:
    level: ValidationLevel
    message: str
    field: str
    recommendation: Optional[str] = None
