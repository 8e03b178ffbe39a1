"""Response parsing utilities."""

import json
import re
from typing import Any


def extract_json_content(response: str) -> str:
    """Extract content from a ```json fenced block, or the outermost JSON object."""
    match = re.search(r'```(?:json)?\s*(.*?)```', response, re.DOTALL | re.IGNORECASE)
    if match:
        return match.group(1).strip()

    start = response.find('{')
    end = response.rfind('}')
    if start != -1 and end > start:
        return response[start:end + 1]
    return response.strip()


def parse_json_response(response: str) -> Any:
    """
    Parse a model response into JSON data.

    Raises:
        ValueError: If the response is empty or not valid JSON
    """
    if not response or not response.strip():
        raise ValueError("Empty response")
    return json.loads(extract_json_content(response))
