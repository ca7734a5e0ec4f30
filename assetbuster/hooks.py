"""
Post-step hooks for host build pipelines.

A host pipeline that wants assets fingerprinted after one of its steps
(typically a compile or bundle step) composes the step with a hook
explicitly:

    hook = BusterHook(project.config, project.root)
    compile_then_bust = run_after(compile_assets, hook)
    compile_then_bust("release")
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

from assetbuster.buster import run_buster
from assetbuster.core.config import BusterConfig, BusterProject
from assetbuster.manifest.builder import BustResult

T = TypeVar("T")


class BusterHook:
    """Callable that runs buster for a fixed project when invoked."""

    def __init__(self, config: BusterConfig | dict[str, Any], project_root: Path | str):
        self.config = config
        self.project_root = Path(project_root)
        self.last_result: BustResult | None = None

    @classmethod
    def for_project(cls, project: BusterProject) -> BusterHook:
        return cls(project.config, project.root)

    def __call__(self, *_args: Any, **_kwargs: Any) -> BustResult:
        self.last_result = run_buster(self.config, self.project_root)
        return self.last_result


def run_after(step: Callable[..., T], hook: Callable[[], Any]) -> Callable[..., T]:
    """
    Wrap ``step`` so that ``hook`` runs after it completes.

    The wrapper returns the step's own result. If the step raises, the
    hook is not run.
    """

    @functools.wraps(step)
    def wrapper(*args: Any, **kwargs: Any) -> T:
        result = step(*args, **kwargs)
        hook()
        return result

    return wrapper
