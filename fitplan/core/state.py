from __future__ import annotations

import uuid
from typing import Any, Dict, List, Optional
from typing_extensions import TypedDict
from dataclasses import dataclass, field


class BaseGraphState(TypedDict, total=False):
    """Base state for every generation graph"""
    request_id: str
    user_id: int
    seed: Optional[int]
    failed: bool
    issues: List[Dict[str, Any]]
    warnings: List[str]
    audit: Dict[str, Any]


@dataclass
class BaseResult:
    """Base result for every generation run"""
    request_id: str
    success: bool = False
    issues: list = field(default_factory=list)
    warnings: list = field(default_factory=list)
    audit: Dict[str, Any] = field(default_factory=lambda: {"events": []})


def generate_request_id() -> str:
    return str(uuid.uuid4())


def issue(kind: str, detail: str) -> Dict[str, Any]:
    return {"type": kind, "detail": detail}
