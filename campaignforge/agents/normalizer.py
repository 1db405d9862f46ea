"""
Best-effort normalization of agent responses.

Agents answer with anything from a clean JSON object to prose wrapping a
fenced, half-finished JSON document. normalize() turns all of these into a
dict and never raises: input it cannot make sense of becomes {}.
"""

import json
import re
from typing import Any, Dict, List, Mapping, Optional

from campaignforge.core.logging_config import get_logger

logger = get_logger(__name__)

FENCE_PATTERN = re.compile(r"```(?:json|JSON)?\s*(.*?)(?:```|$)", re.DOTALL)

OPENING_PATTERN = re.compile(r"[{\[]")

# Double-encoded payloads are unwrapped at most this many times
MAX_DECODE_DEPTH = 3

# Attempts at trimming a truncated document back to its last complete member
MAX_REPAIR_ATTEMPTS = 50


def normalize(raw: Any) -> Dict[str, Any]:
    """
    Convert a raw agent payload into a dict.

    Handles:
    - dicts (returned unchanged, so normalize is idempotent)
    - lists (the first mapping element is used)
    - JSON text, optionally inside code fences or surrounded by prose
    - JSON text that was itself JSON-encoded as a string
    - truncated JSON, closed at the last complete member

    Args:
        raw (Any): The payload as received from the agent

    Returns:
        Dict[str, Any]: Parsed mapping, or {} if nothing usable was found
    """
    return _normalize(raw, 0)


def _normalize(raw: Any, depth: int) -> Dict[str, Any]:
    if raw is None:
        return {}

    if isinstance(raw, dict):
        return raw

    if isinstance(raw, Mapping):
        return dict(raw)

    if isinstance(raw, (list, tuple)):
        for item in raw:
            if isinstance(item, Mapping):
                return _normalize(item, depth)
        logger.debug("List payload holds no mapping")
        return {}

    if isinstance(raw, (bytes, bytearray)):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError:
            logger.warning("Agent payload is not valid UTF-8")
            return {}

    if not isinstance(raw, str):
        logger.debug(f"Unsupported payload type {type(raw).__name__}")
        return {}

    if depth >= MAX_DECODE_DEPTH:
        return {}

    text = raw.strip()
    if not text:
        return {}

    for candidate in _candidates(text):
        parsed = _loads(candidate)
        if parsed is None:
            continue
        if isinstance(parsed, str):
            # JSON document that was encoded as a JSON string
            nested = _normalize(parsed, depth + 1)
            if nested:
                return nested
            continue
        result = _normalize(parsed, depth)
        if result:
            return result

    extracted = _extract_embedded(text)
    if extracted is not None:
        return extracted

    logger.warning("Could not parse agent response, using empty result")
    logger.debug(f"Unparsed agent response: {text[:200]}...")
    return {}


def _candidates(text: str) -> List[str]:
    """The whole text first, then the contents of any code fences."""
    candidates = [text]
    for match in FENCE_PATTERN.finditer(text):
        inner = match.group(1).strip()
        if inner and inner not in candidates:
            candidates.append(inner)
    return candidates


def _loads(text: str) -> Any:
    try:
        return json.loads(text)
    except (ValueError, RecursionError):
        return None


def _extract_embedded(text: str) -> Optional[Dict[str, Any]]:
    """
    Find the first JSON object (or list of objects) inside prose.

    Openings are tried left to right. A decoded value is skipped as a whole,
    so members of an earlier document are never returned on their own. An
    opening that does not decode is either the start of a truncated object,
    which is closed and returned, or a stray bracket, after which the search
    goes on.
    """
    decoder = json.JSONDecoder()
    match = OPENING_PATTERN.search(text)
    while match is not None:
        start = match.start()
        try:
            parsed, end = decoder.raw_decode(text, start)
        except (ValueError, RecursionError):
            if text[start] == "{":
                repaired = _repair_truncated(text[start:])
                if repaired is not None:
                    logger.info("Recovered truncated JSON from agent response")
                    return repaired
            match = OPENING_PATTERN.search(text, start + 1)
            continue

        if isinstance(parsed, dict):
            logger.debug("Extracted JSON embedded in agent text")
            return parsed
        if isinstance(parsed, list):
            for item in parsed:
                if isinstance(item, dict):
                    logger.debug("Extracted JSON embedded in agent text")
                    return item
        match = OPENING_PATTERN.search(text, end)
    return None


def _repair_truncated(fragment: str) -> Optional[Dict[str, Any]]:
    """
    Close a JSON object that was cut off mid-document.

    Unterminated strings, objects and arrays are closed. When the cut falls
    inside a member (a dangling key, colon or comma), the document is trimmed
    back to the previous comma and closed again.
    """
    fragment = _strip_closing_fence(fragment)

    for _ in range(MAX_REPAIR_ATTEMPTS):
        if not fragment:
            return None
        closed = _close_open_structures(fragment)
        if closed is not None:
            parsed = _loads(closed)
            if isinstance(parsed, dict):
                return parsed
        cut = fragment.rfind(",")
        if cut <= 0:
            return None
        fragment = fragment[:cut]

    return None


def _strip_closing_fence(text: str) -> str:
    fence = text.rfind("```")
    if fence >= 0:
        text = text[:fence]
    return text.rstrip()


def _close_open_structures(fragment: str) -> Optional[str]:
    stack = []
    in_string = False
    escaped = False

    for char in fragment:
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue
        if char == '"':
            in_string = True
        elif char in "{[":
            stack.append("}" if char == "{" else "]")
        elif char in "}]":
            if not stack or stack[-1] != char:
                return None
            stack.pop()

    repaired = fragment
    if in_string:
        if escaped:
            repaired = repaired[:-1]
        repaired += '"'

    repaired = repaired.rstrip()
    if repaired.endswith(","):
        repaired = repaired[:-1]

    return repaired + "".join(reversed(stack))
