"""JSON parsing utilities for LLM responses."""

import json
import logging
import re
from typing import Any

logger = logging.getLogger(__name__)

# Opening ```json (or bare ```) fence with its newline, or a closing fence
_CODE_FENCE_RE = re.compile(r"```json\n?|\n?```")


def strip_code_fences(content: str) -> str:
    """Remove markdown code-fence markers and surrounding whitespace."""
    return _CODE_FENCE_RE.sub("", content).strip()


def parse_json_content(content: str) -> Any:
    """Strictly parse LLM output as JSON once code fences are stripped.

    No repair and no substring extraction: text around the JSON makes the
    parse fail, and so does nesting deeper than the decoder can recurse.
    Returns None on failure.
    """
    try:
        return json.loads(strip_code_fences(content))
    except (ValueError, RecursionError) as e:
        logger.debug("Failed to parse JSON from content", extra={
            "error": str(e),
            "content_preview": content[:200]
        })
        return None
