"""Two-stage parsing of the model reply: fenced ```json block first, raw text second."""

import json
import re
from typing import Any

from app.logging.logger import Log
from app.report.exceptions import ResponseFormatError

_FENCED_JSON = re.compile(r"```json\n(.*?)\n```", re.DOTALL)


def extract_fenced_json(text: str) -> str | None:
    """Return the inner text of the first ```json fenced block, or None."""
    match = _FENCED_JSON.search(text)
    if match is None:
        return None
    return match.group(1)


def parse_report(raw_response: str) -> dict[str, Any]:
    """Parse the model reply into a JSON object.

    Raises:
        ResponseFormatError: if neither the fenced block nor the raw reply
            parses as a JSON object.
    """
    fenced = extract_fenced_json(raw_response)
    if fenced is not None:
        Log.info("Extracted JSON from markdown code block")
        candidate = fenced
    else:
        Log.warning("Model response did not contain a markdown JSON block. Attempting raw parse")
        candidate = raw_response

    try:
        parsed = json.loads(candidate)
    except json.JSONDecodeError as exc:
        raise ResponseFormatError(f"Invalid JSON response: {exc}", raw_response) from exc

    if not isinstance(parsed, dict):
        raise ResponseFormatError("JSON response must be an object", raw_response)
    return parsed
