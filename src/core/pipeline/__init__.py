"""
Aggregate public API for core.pipeline.
Re-exports are intentional; keep them listed in __all__ to satisfy linters.
"""

from .orchestrator import IconUpdater, run_icon_update
from .renderer import render
from .types import RenderJob, RenderOutcome, RenderResult, RunSummary

__all__ = [
    # Orchestrator
    "IconUpdater",
    "run_icon_update",
    # Renderer
    "render",
    # Types
    "RenderJob",
    "RenderOutcome",
    "RenderResult",
    "RunSummary",
]
