"""
passgen.models
Plain value types shared by the generator, the evaluator and the API layer.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Tuple


DEFAULT_LENGTH = 12


@dataclass(frozen=True)
class GenerationPolicy:
    length: int = DEFAULT_LENGTH
    include_uppercase: bool = True
    include_lowercase: bool = True
    include_numbers: bool = True
    include_symbols: bool = True
    exclude_ambiguous: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Render with the camelCase keys the HTTP API uses."""
        return {
            "length": self.length,
            "includeUppercase": self.include_uppercase,
            "includeLowercase": self.include_lowercase,
            "includeNumbers": self.include_numbers,
            "includeSymbols": self.include_symbols,
            "excludeAmbiguous": self.exclude_ambiguous,
        }


class StrengthLevel(str, Enum):
    WEAK = "Weak"
    MEDIUM = "Medium"
    STRONG = "Strong"
    VERY_STRONG = "Very Strong"


@dataclass(frozen=True)
class StrengthReport:
    score: int
    level: StrengthLevel
    feedback: Tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "level": self.level.value,
            "feedback": list(self.feedback),
        }
