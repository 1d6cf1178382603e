"""Per-unit mutable state for the class-name prefix check.

AnalysisUnitState:
    Everything the traversal callbacks accumulate for one analysis unit:
    - exported_name: first default-exported identifier (set once)
    - defined_class_name: first class declaration identifier (set once)
    - pending_elements: JSXElement nodes carrying a className attribute,
      in document order

The state is consumed at end of unit and reset so the owning visitor can
move on to another unit without leaking names between them.
"""

from __future__ import annotations

from typing import Any
from dataclasses import field, dataclass


@dataclass
class AnalysisUnitState:
    """Accumulated names and elements for one analysis unit.

    Attributes:
        exported_name: Name bound by the first ``export default``. Stays
            ``None`` when that export is anonymous.
        defined_class_name: Name of the first class declaration.
        pending_elements: ESTree ``JSXElement`` nodes awaiting validation.
    """

    exported_name: str | None = None
    defined_class_name: str | None = None
    pending_elements: list[dict[str, Any]] = field(default_factory=list)

    def record_export(self, name: str | None) -> None:
        if self.exported_name is None and name:
            self.exported_name = name

    def record_class(self, name: str | None) -> None:
        if self.defined_class_name is None and name:
            self.defined_class_name = name

    def record_element(self, element: dict[str, Any]) -> None:
        self.pending_elements.append(element)

    def component_name(self) -> str | None:
        """Return the name the prefix derives from; the export wins over the class."""
        return self.exported_name or self.defined_class_name

    def reset(self) -> None:
        self.exported_name = None
        self.defined_class_name = None
        self.pending_elements = []


__all__ = ["AnalysisUnitState"]
