"""
docwright.core.parsing.cascade
==============================

parse(tool_name, raw_payload) -> dict

Turns whatever a reasoning loop produced for a tool call into a parameter
mapping. The order below is part of the contract and is pinned by the
test-suite; do not reorder without evidence from real payloads.

    0. mapping payload        → returned unchanged
       blank string           → {}   (nothing else runs)
    1. strict JSON
    2. cleaned JSON
    3. key: value extraction
    4. tool-specific extractor (if registered)
    5. {"input": raw}

When 1-3 succeed for a tool that has an extractor, the extractor's
defaults are filled in (missing keys only).

Ordinary ambiguity never raises. The one exception is the save_document
extractor's ValidationError: an empty-content save is never acceptable,
so it propagates instead of degrading to step 5.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from docwright.core.exceptions          import ValidationError
from docwright.core.models.invocation   import RawInvocation
from docwright.core.parsing.extractors  import DEFAULT_REGISTRY, ExtractorRegistry
from docwright.core.parsing.strategies  import (
    cleaned_parse,
    key_value_parse,
    opaque_fallback,
    strict_parse,
)

log = logging.getLogger(__name__)

STRATEGIES: Tuple[Tuple[str, Callable[[str], Optional[Dict[str, Any]]]], ...] = (
    ("strict",    strict_parse),
    ("cleaned",   cleaned_parse),
    ("key_value", key_value_parse),
)


def parse(
    tool_name: str,
    raw_payload: Any,
    *,
    registry: ExtractorRegistry | None = None,
) -> Mapping[str, Any]:
    if isinstance(raw_payload, Mapping):
        return raw_payload
    if raw_payload is None:
        return {}
    if not isinstance(raw_payload, str):
        log.warning("payload for %s is %s, not str – converting", tool_name, type(raw_payload).__name__)
        raw_payload = str(raw_payload)
    if not raw_payload.strip():
        log.warning("empty payload for %s", tool_name)
        return {}

    registry  = DEFAULT_REGISTRY if registry is None else registry
    extractor = registry.get(tool_name)

    for name, strategy in STRATEGIES:
        params = strategy(raw_payload)
        if params is not None:
            log.debug("%s: %s strategy succeeded", tool_name, name)
            return extractor.complete(params) if extractor else params

    if extractor is not None:
        log.info("%s: generic strategies failed, using %r", tool_name, extractor)
        try:
            params = extractor.extract(raw_payload)
        except ValidationError:
            raise
        except Exception:  # noqa: BLE001
            log.exception("%s: extractor crashed, falling back to opaque input", tool_name)
            params = None
        if params:
            return params

    log.warning("%s: all strategies failed, passing payload through as 'input'", tool_name)
    return opaque_fallback(raw_payload)


def parse_invocation(invocation: RawInvocation, *, registry: ExtractorRegistry | None = None) -> Mapping[str, Any]:
    return parse(invocation.tool_name, invocation.raw_payload, registry=registry)
