"""JSON reporter for scripted consumers."""

from __future__ import annotations

import json
from typing import Any, Dict, List

from nanodiff.diff.models import DiffLineType, DiffResult


def to_dict(
    result: DiffResult,
    *,
    expected_name: str,
    actual_name: str,
    show_context: bool = True,
) -> Dict[str, Any]:
    """Convert a DiffResult to a JSON-serialisable dict."""
    lines_list: List[Dict[str, Any]] = []
    for line in result.lines:
        if line.line_type == DiffLineType.CONTEXT and not show_context:
            continue
        lines_list.append({
            "type": line.line_type.value,
            "content": line.content,
        })

    return {
        "version": "1.0",
        "expected": expected_name,
        "actual": actual_name,
        "has_diff": result.has_diff,
        "summary": {
            "context": result.context_count,
            "expected_only": result.expected_only_count,
            "actual_only": result.actual_only_count,
        },
        "lines": lines_list,
    }


def render(
    result: DiffResult,
    *,
    expected_name: str,
    actual_name: str,
    show_context: bool = True,
) -> str:
    """Return formatted JSON string."""
    return json.dumps(
        to_dict(result, expected_name=expected_name, actual_name=actual_name, show_context=show_context),
        indent=2,
        ensure_ascii=False,
    )
