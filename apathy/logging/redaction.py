"""Home directory redaction for logged path arguments."""

from __future__ import annotations

import re
from pathlib import PurePath
from typing import Any, Dict, List, Optional, Pattern, Union


class DataRedactor:
    """Redact user-identifying segments from paths before they are logged."""

    def __init__(self, custom_patterns: Optional[List[Pattern[str]]] = None) -> None:
        """Initialize redactor with standard and custom patterns.

        Args:
            custom_patterns: Additional regex patterns to redact
        """
        self.patterns = [
            # User home directories
            re.compile(r"/home/[^/\s]+"),
            re.compile(r"/Users/[^/\s]+"),
            re.compile(r"[A-Za-z]:\\Users\\[^\\\s]+"),
            re.compile(r"^~[^/\s]*"),
        ]

        if custom_patterns:
            self.patterns.extend(custom_patterns)

    def redact_string(self, text: str) -> str:
        """Replace home directory prefixes in ``text`` with ``[REDACTED]``."""
        result = text
        for pattern in self.patterns:
            result = pattern.sub("[REDACTED]", result)
        return result

    def redact_dict(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Recursively redact strings and paths in a log context dictionary."""
        result: Dict[str, Any] = {}

        for key, value in data.items():
            if isinstance(value, (list, tuple)):
                result[key] = [self._redact_value(item) for item in value]
            else:
                result[key] = self._redact_value(value)

        return result

    def _redact_value(self, value: Any) -> Any:
        if isinstance(value, dict):
            return self.redact_dict(value)
        if isinstance(value, PurePath):
            return self.redact_string(str(value))
        if isinstance(value, str):
            return self.redact_string(value)
        return value

    def add_pattern(self, pattern: Union[str, Pattern[str]]) -> None:
        """Add custom redaction pattern."""
        if isinstance(pattern, str):
            pattern = re.compile(pattern)
        self.patterns.append(pattern)


class NullRedactor(DataRedactor):
    """Redactor that passes everything through (AP_REDACT_PATHS=0)."""

    def __init__(self) -> None:
        super().__init__()
        self.patterns = []
