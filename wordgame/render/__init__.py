from __future__ import annotations
from typing import List
from .base import BaseRenderer, REGISTRY, register

from . import plain  # noqa: F401
from . import emoji  # noqa: F401
from . import ansi  # noqa: F401
from .outcome import format_outcome, status_line


def create_renderer(renderer_id: str) -> BaseRenderer:
    """
    Factory: instantiate a registered renderer by id.
    """
    try:
        cls = REGISTRY[renderer_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown renderer id: {renderer_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls()


def get_renderer_ids() -> List[str]:
    """
    Return all registered renderer ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())


__all__ = [
    "BaseRenderer", "REGISTRY", "register", "create_renderer", "get_renderer_ids",
    "format_outcome", "status_line",
]
