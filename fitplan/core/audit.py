from __future__ import annotations

import logging
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


def append_event(audit: Dict[str, Any], name: str, payload: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Append event to audit trail"""
    events = list(audit.get("events", []))
    events.append({"name": name, "payload": payload or {}})
    return {**audit, "events": events}


def log_observer(node: str, update: Dict[str, Any]) -> None:
    """Default observer: log the audit events a node just produced."""
    events = (update.get("audit") or {}).get("events") or []
    last = events[-1]["name"] if events else "-"
    logger.debug("[GRAPH] node=%s event=%s keys=%s", node, last, sorted(update.keys()))
