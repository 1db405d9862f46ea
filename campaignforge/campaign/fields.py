"""
Typed read access over loosely-structured mappings.

Agent output and stored records are plain dicts whose keys may be missing or
hold values of the wrong type. FieldView resolves each field to the expected
type or to its default, so one malformed value never aborts a build.
"""

from typing import Any, Dict, List, Mapping, Optional, Union

Number = Union[int, float]

class FieldView:
    """
    Read-only view over an untyped mapping with per-field defaults.
    """

    def __init__(self, data: Any):
        self.data = data if isinstance(data, Mapping) else {}

    def __contains__(self, key: str) -> bool:
        return self.data.get(key) is not None

    def raw(self, key: str, default: Any = None) -> Any:
        value = self.data.get(key)
        return default if value is None else value

    def text(self, key: str, default: str = "") -> str:
        """
        Get a string field.

        Numbers are converted to text and lists of strings are joined with
        spaces (agents sometimes send hashtags as a list). Anything else
        yields the default.
        """
        value = self.data.get(key)
        if isinstance(value, str):
            return value
        if isinstance(value, bool):
            return default
        if isinstance(value, (int, float)):
            return str(value)
        if isinstance(value, list) and value and all(isinstance(v, str) for v in value):
            return " ".join(value)
        return default

    def number(self, key: str, default: Number = 0) -> Number:
        """Get a numeric field, parsing numeric strings."""
        value = self.data.get(key)
        if isinstance(value, bool):
            return default
        if isinstance(value, (int, float)):
            return value
        if isinstance(value, str):
            try:
                parsed = float(value.strip())
            except ValueError:
                return default
            return int(parsed) if parsed.is_integer() else parsed
        return default

    def integer(self, key: str, default: int = 0) -> int:
        """Get a non-negative integer field."""
        value = self.number(key, default)
        try:
            return max(int(value), 0)
        except (TypeError, ValueError, OverflowError):
            return default

    def mapping(self, key: str) -> Optional[Dict[str, Any]]:
        """Get a nested mapping, or None if absent or not a mapping."""
        value = self.data.get(key)
        return dict(value) if isinstance(value, Mapping) else None

    def records(self, key: str) -> List[Dict[str, Any]]:
        """Get the mapping items of a list field, skipping anything else."""
        value = self.data.get(key)
        if not isinstance(value, list):
            return []
        return [dict(item) for item in value if isinstance(item, Mapping)]

    def strings(self, key: str) -> List[str]:
        """Get a list of strings; numbers are converted, other items dropped."""
        value = self.data.get(key)
        if isinstance(value, str):
            return [value] if value else []
        if not isinstance(value, list):
            return []
        result = []
        for item in value:
            if isinstance(item, str):
                result.append(item)
            elif isinstance(item, (int, float)) and not isinstance(item, bool):
                result.append(str(item))
        return result
