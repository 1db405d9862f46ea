"""
Common utility functions for the campaignforge package.
"""

import os
import re
import json
import uuid
import datetime
from typing import Any, Optional

def ensure_dir(path: str) -> str:
    """
    Ensure a directory exists, creating it if necessary.

    Args:
        path (str): Directory path

    Returns:
        str: The directory path
    """
    os.makedirs(path, exist_ok=True)
    return path

def generate_unique_id(prefix: str = "") -> str:
    """
    Generate a unique ID with optional prefix.

    The ID starts with a timestamp so IDs sort by creation time; the random
    suffix keeps IDs created within the same second distinct.

    Args:
        prefix (str, optional): ID prefix

    Returns:
        str: Unique ID
    """
    timestamp = datetime.datetime.now().strftime("%Y%m%d%H%M%S")
    return f"{prefix}{timestamp}-{uuid.uuid4().hex[:8]}"

def today_iso(today: Optional[datetime.date] = None) -> str:
    """Return the date as YYYY-MM-DD, defaulting to today."""
    return (today or datetime.date.today()).isoformat()

def count_words(text: str) -> int:
    """
    Count whitespace-delimited, non-empty tokens.

    Args:
        text (str): Text to count

    Returns:
        int: Number of words
    """
    if not text:
        return 0
    return len(text.split())

def load_json_file(file_path: str) -> Any:
    """
    Load a JSON file.

    Args:
        file_path (str): Path to JSON file

    Returns:
        Any: Loaded JSON data

    Raises:
        FileNotFoundError: If file does not exist
        json.JSONDecodeError: If file is not valid JSON
    """
    with open(file_path, 'r', encoding='utf-8') as f:
        return json.load(f)

def save_json_file(data: Any, file_path: str, indent: int = 2) -> None:
    """
    Save data to a JSON file, creating the parent directory.

    Args:
        data (Any): Data to save
        file_path (str): Path to save JSON file
        indent (int, optional): JSON indentation level

    Raises:
        OSError: If file cannot be written
    """
    directory = os.path.dirname(file_path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    with open(file_path, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=indent)

def sanitize_filename(filename: str) -> str:
    """
    Make a name safe for use as a file name.

    Runs of whitespace become a single underscore and path-hostile characters
    are replaced with underscores.

    Args:
        filename (str): Original name

    Returns:
        str: Sanitized filename
    """
    filename = re.sub(r'\s+', '_', filename)

    invalid_chars = '<>:"/\\|?*'
    for char in invalid_chars:
        filename = filename.replace(char, '_')

    return filename
