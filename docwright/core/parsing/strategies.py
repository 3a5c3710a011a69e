"""
docwright.core.parsing.strategies
---------------------------------

The generic strategies of the parse cascade. Each one takes the raw
string and returns either a dict (success) or None (this strategy does
not apply). None of them raise.

    strict_parse      canonical JSON, object only
    cleaned_parse     JSON after undoing the usual LLM damage
    key_value_parse   `key: value, key: value` prose
    opaque_fallback   {"input": raw} – always succeeds
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any, Dict, Optional

log = logging.getLogger(__name__)

# ```json\n … \n```  wrapping the whole payload; a language tag is only
# consumed when whitespace follows it, or a json tag when a bracket does
_WRAPPING_FENCE = re.compile(r"\A\s*```(?:[\w+-]+(?=\s)|json(?=[{\[]))?\s*(.*?)\s*```\s*\Z", re.DOTALL)
_EDGE_NOISE_HEAD = re.compile(r"\A[\s`'\"]+")
_EDGE_NOISE_TAIL = re.compile(r"[\s`'\"]+\Z")
_BARE_KEY        = re.compile(r"(\A|[{,]\s*)([A-Za-z_$][\w$]*)(\s*:)")
_TRAILING_COMMA  = re.compile(r",(\s*[}\]])")

_KEY_VALUE = re.compile(r"(\w+)\s*:\s*([^,]+)(?:,|$)")
_INT       = re.compile(r"[-+]?\d+")
_NUMBER    = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")


# ─────────────────────────────────────────────────────────── 1. strict
def strict_parse(raw: str) -> Optional[Dict[str, Any]]:
    try:
        data = json.loads(raw.strip())
    except (ValueError, RecursionError) as exc:
        log.debug("strict parse failed: %s", exc)
        return None
    if not isinstance(data, dict):
        log.debug("strict parse produced %s, not an object", type(data).__name__)
        return None
    return data


# ─────────────────────────────────────────────────────────── 2. cleaned
def clean(raw: str) -> str:
    """Best-effort repair of JSON-ish text into JSON."""
    text = raw
    if m := _WRAPPING_FENCE.match(text):
        text = m.group(1)
    text = _EDGE_NOISE_HEAD.sub("", text)
    text = _EDGE_NOISE_TAIL.sub("", text)
    text = text.replace("'", '"')
    text = _BARE_KEY.sub(r'\1"\2"\3', text)
    text = _TRAILING_COMMA.sub(r"\1", text)
    return text


def cleaned_parse(raw: str) -> Optional[Dict[str, Any]]:
    cleaned = clean(raw)
    if not cleaned:
        return None
    return strict_parse(cleaned)


# ─────────────────────────────────────────────────────────── 3. key/value
def coerce_scalar(value: str) -> Any:
    """
    'true'/'false' (any case) → bool, numeric text → int/float,
    "quoted" / 'quoted' → inner text, anything else → trimmed text.
    """
    v = value.strip()
    if v.lower() == "true":
        return True
    if v.lower() == "false":
        return False
    if _NUMBER.fullmatch(v):
        try:
            return int(v) if _INT.fullmatch(v) else float(v)
        except ValueError:
            # past the int digit limit; keep the text
            return v
    if len(v) >= 2 and v[0] == v[-1] and v[0] in "\"'":
        return v[1:-1]
    return v


def key_value_parse(raw: str) -> Optional[Dict[str, Any]]:
    result = {m.group(1): coerce_scalar(m.group(2)) for m in _KEY_VALUE.finditer(raw)}
    if not result:
        log.debug("no key: value segments found")
        return None
    return result


# ─────────────────────────────────────────────────────────── 5. fallback
def opaque_fallback(raw: str) -> Dict[str, Any]:
    return {"input": raw}
