"""
Base Pass System

Passes run over the parsed ``SourceFile`` and write their results into a
``HighlightContext``. The tree itself is never modified.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Type, TYPE_CHECKING

from ..shared.categories import Category
from ..shared.errors import HighlightImplementationError
from ..shared.identifier_memory import IdentifierMemory
from ..shared.nodes import SourceFile
from ..shared.span_registry import SpanRegistry

if TYPE_CHECKING:
    from .identification import FallbackRules

logger = logging.getLogger(__name__)


class HighlightContext:
    """
    Per-invocation state shared by all passes of one highlight run.

    Owns the span registry and the identifier memory; both are discarded with
    the context. Nothing here is shared between code blocks.
    """

    def __init__(self, source: str, fallback_rules: Optional["FallbackRules"] = None):
        if fallback_rules is None:
            from .identification import DEFAULT_FALLBACK_RULES
            fallback_rules = DEFAULT_FALLBACK_RULES

        self.source = source
        self.registry = SpanRegistry()
        self.memory = IdentifierMemory()
        self.fallback_rules = fallback_rules

        # Filled by IdentificationPass: deferred span start -> category
        self.resolutions: Dict[int, Category] = {}

        self._analysis_results: Dict[Type['BasePass'], Any] = {}

    def get_analysis(self, pass_class: Type['BasePass']) -> Any:
        """Get analysis results from a pass"""
        if pass_class not in self._analysis_results:
            raise HighlightImplementationError(f"analysis {pass_class.__name__} not available")
        return self._analysis_results[pass_class]

    def set_analysis(self, pass_class: Type['BasePass'], results: Any) -> None:
        self._analysis_results[pass_class] = results


class BasePass(ABC):
    """
    Base class for highlight passes.

    Dependencies are declared in ``requires``; the PassManager orders passes
    so every pass runs after the ones it requires.
    """
    requires: List[Type['BasePass']] = []

    @abstractmethod
    def run(self, program: SourceFile, ctx: HighlightContext) -> SourceFile:
        raise NotImplementedError


class PassManager:
    """Pass manager with dependency resolution (topological order)"""

    def __init__(self):
        self.passes: List[Type[BasePass]] = []
        self._dependency_graph: Dict[Type[BasePass], set] = {}

    def register_pass(self, pass_class: Type[BasePass]) -> None:
        self.passes.append(pass_class)
        self._dependency_graph[pass_class] = set(pass_class.requires)

    def run_all(self, program: SourceFile, ctx: HighlightContext) -> SourceFile:
        for pass_class in self._topological_sort():
            logger.debug("running %s", pass_class.__name__)
            program = pass_class().run(program, ctx)
        return program

    def _topological_sort(self) -> List[Type[BasePass]]:
        """Topological sort of passes by dependencies"""
        missing = {
            dep.__name__
            for deps in self._dependency_graph.values()
            for dep in deps
            if dep not in self._dependency_graph
        }
        if missing:
            raise HighlightImplementationError(
                f"required passes not registered: {', '.join(sorted(missing))}"
            )

        in_degree = {p: len(self._dependency_graph[p]) for p in self.passes}
        queue = [p for p, degree in in_degree.items() if degree == 0]
        result = []

        while queue:
            pass_class = queue.pop(0)
            result.append(pass_class)

            for other_pass in self.passes:
                if pass_class in self._dependency_graph[other_pass]:
                    in_degree[other_pass] -= 1
                    if in_degree[other_pass] == 0:
                        queue.append(other_pass)

        if len(result) != len(self.passes):
            raise HighlightImplementationError("circular dependency detected in passes")

        return result
