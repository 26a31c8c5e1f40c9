"""Install/update lifecycle orchestration."""

from ralph_gemini.lifecycle.controller import (
    LifecycleController,
    LifecycleResult,
    Outcome,
    collect_config_warnings,
)

__all__ = [
    "LifecycleController",
    "LifecycleResult",
    "Outcome",
    "collect_config_warnings",
]
