from typing import Dict, Any, Union
from pathlib import Path
import json

from .exceptions import ValidationError

def is_valid_file_path(path: Union[str, Path]) -> bool:
    """Check if a given path is an existing file."""
    try:
        return Path(path).is_file()
    except (OSError, ValueError):
        return False

def load_json_data(file_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a JSON selector description from a file.

    Args:
        file_path: Path to the JSON file

    Returns:
        Dict containing the JSON data

    Raises:
        ValidationError: If file cannot be read, JSON is invalid or the
            top-level value is not an object
    """
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON format: {str(e)}") from e
    except OSError as e:
        raise ValidationError(f"Error reading file: {str(e)}") from e

    if not isinstance(data, dict):
        raise ValidationError(
            f"Expected a JSON object, got {type(data).__name__}"
        )
    return data
