"""Named graph families and their parameter rules."""

import logging
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class GraphFamily(str, Enum):
    """Families the generator library can build."""
    ANTIPRISM = "antiprism"
    BALANCED_BINARY_TREE = "bbtree"
    BIPARTITE = "bipartite"
    CROWN = "crown"
    CYCLE = "cycle"
    DUTCH_WINDMILL = "windmill"
    GEAR = "gear"
    GRID = "grid"
    HELM = "helm"
    PATH = "path"
    PETERSEN = "petersen"
    PRISM = "prism"
    COMPLETE = "complete"
    STAR = "star"
    WHEEL = "wheel"


@dataclass(frozen=True)
class FamilyInfo:
    """Display name and parameter description of a family."""
    display_name: str
    first_label: str
    first_min: int = 1
    second_label: str | None = None
    second_min: int = 1
    second_default: int | None = None

    @property
    def takes_second(self) -> bool:
        return self.second_label is not None


FAMILY_INFO: dict[GraphFamily, FamilyInfo] = {
    GraphFamily.ANTIPRISM: FamilyInfo("Antiprism", "nodes (even)", first_min=6),
    GraphFamily.BALANCED_BINARY_TREE: FamilyInfo("Balanced Binary Tree", "nodes"),
    GraphFamily.BIPARTITE: FamilyInfo("Bipartite", "top nodes", second_label="bottom nodes"),
    GraphFamily.CROWN: FamilyInfo("Crown", "nodes per ring"),
    GraphFamily.CYCLE: FamilyInfo("Cycle", "nodes"),
    GraphFamily.DUTCH_WINDMILL: FamilyInfo(
        "Dutch Windmill", "blades", first_min=2,
        second_label="nodes per blade", second_min=3, second_default=3,
    ),
    GraphFamily.GEAR: FamilyInfo("Gear (generalized)", "nodes", first_min=6),
    GraphFamily.GRID: FamilyInfo("Grid", "rows", second_label="columns"),
    GraphFamily.HELM: FamilyInfo("Helm", "nodes per ring"),
    GraphFamily.PATH: FamilyInfo("Path", "nodes"),
    GraphFamily.PETERSEN: FamilyInfo(
        "Petersen (generalized)", "nodes per ring", first_min=3,
        second_label="star skip k", second_min=0, second_default=2,
    ),
    GraphFamily.PRISM: FamilyInfo("Prism", "nodes per ring"),
    GraphFamily.COMPLETE: FamilyInfo("Complete", "nodes"),
    GraphFamily.STAR: FamilyInfo("Star", "nodes"),
    GraphFamily.WHEEL: FamilyInfo("Wheel", "nodes"),
}


def family_from_name(name: str) -> GraphFamily:
    """Look a family up by value, enum name or display name (case-insensitive)."""
    key = name.strip().lower()
    for family, info in FAMILY_INFO.items():
        if key in (family.value, family.name.lower(), info.display_name.lower()):
            return family
    if key in ("dutch-windmill", "dutch_windmill", "binary-tree", "balanced-binary-tree"):
        return GraphFamily.DUTCH_WINDMILL if "windmill" in key else GraphFamily.BALANCED_BINARY_TREE
    valid = [f.value for f in GraphFamily]
    raise ValueError(f"Unknown graph family '{name}'. Must be one of: {', '.join(valid)}")


def coerce_parameters(family: GraphFamily, count: int, second: int | None = None) -> tuple[int, int | None]:
    """Move parameters to the nearest legal values for ``family``.

    Returns ``(count, second)``; ``second`` is None for one-parameter
    families.
    """
    info = FAMILY_INFO[family]
    original = (count, second)

    count = max(info.first_min, int(count))
    if family == GraphFamily.ANTIPRISM and count % 2:
        count -= 1
        count = max(info.first_min, count)

    if not info.takes_second:
        second = None
    else:
        if second is None:
            second = info.second_default if info.second_default is not None else count
        second = int(second)
        if family == GraphFamily.PETERSEN and not 0 <= second <= (count - 1) // 2:
            second = 1
        second = max(info.second_min, second)

    if (count, second) != original:
        logger.debug(f"Coerced {family.value} parameters {original} -> {(count, second)}")
    return count, second
