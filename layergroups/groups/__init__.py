"""Group index package: membership queries and placement"""

from .anchor import BeforeRef, BeforeRefKind
from .core import LayerGroups, NestedLayerGroups
from .placement_mixin import GroupPlacementMixin
from .query_mixin import GroupQueryMixin

__all__ = [
    'LayerGroups',
    'NestedLayerGroups',
    'BeforeRef',
    'BeforeRefKind',
    'GroupPlacementMixin',
    'GroupQueryMixin',
]
