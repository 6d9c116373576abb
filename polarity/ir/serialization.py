"""
IR Serialization — JSON import/export for inversion results.
"""

from pathlib import Path
from typing import Union

from polarity.ir.schema import InversionResult


def to_json(result: InversionResult, indent: int = 2) -> str:
    """Serialize an InversionResult to JSON string."""
    return result.model_dump_json(indent=indent)


def from_json(json_str: str) -> InversionResult:
    """Deserialize an InversionResult from JSON string."""
    return InversionResult.model_validate_json(json_str)


def save(result: InversionResult, path: Union[str, Path]) -> None:
    """Save an InversionResult to a JSON file."""
    path = Path(path)
    path.write_text(to_json(result))


def load(path: Union[str, Path]) -> InversionResult:
    """Load an InversionResult from a JSON file."""
    path = Path(path)
    return from_json(path.read_text())
