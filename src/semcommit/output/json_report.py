"""JSON reporter for scripts and commit-message templates."""

from __future__ import annotations

import json
from typing import Any, Dict, List

from semcommit.semantic.classifier import Category
from semcommit.semantic.summary import ChangeSummary


def to_dict(summary: ChangeSummary) -> Dict[str, Any]:
    """Convert a ChangeSummary to a JSON-serialisable dict."""
    changes_list: List[Dict[str, Any]] = []
    for change in summary.changes:
        status = change.status
        changes_list.append({
            "x": status.x,
            "y": status.y,
            "path": status.to,
            **({"from": status.from_} if status.from_ else {}),
            "status": status.describe(),
            "category": change.category.value,
        })

    malformed_list: List[Dict[str, Any]] = []
    for bad in summary.malformed:
        malformed_list.append({
            "line_no": bad.line_no,
            "line": bad.line,
            "reason": bad.reason,
        })

    counts = summary.counts
    return {
        "version": "1.0",
        "category": summary.category.value,
        "common_dir": summary.common_dir,
        "counts": {c.value or "unclassified": counts.get(c, 0) for c in Category},
        "changes": changes_list,
        "malformed": malformed_list,
    }


def render(summary: ChangeSummary) -> str:
    """Return formatted JSON string."""
    return json.dumps(to_dict(summary), indent=2)
