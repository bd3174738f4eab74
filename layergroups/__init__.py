"""
Layer Groups

Named, nested groups of layers on top of a host that only knows a flat,
ordered layer list with single-layer insert/remove/move.

Public API: import LayerGroups / NestedLayerGroups and a LayerHost
implementation (LayerStack for an in-memory host).
"""

from .errors import (
    DuplicateLayerError,
    InvalidPlacementError,
    LayerGroupsError,
    LayerNotFoundError,
)
from .groups import BeforeRef, BeforeRefKind, LayerGroups, NestedLayerGroups
from .models import (
    Layer,
    LayerHost,
    LayerStack,
    LayerTracker,
    ancestor_chain,
    create_group_id,
    normalize_group_id,
)
from .version import get_version

__version__ = get_version()

__all__ = [
    'LayerGroups',
    'NestedLayerGroups',
    'BeforeRef',
    'BeforeRefKind',
    'Layer',
    'LayerHost',
    'LayerStack',
    'LayerTracker',
    'ancestor_chain',
    'create_group_id',
    'normalize_group_id',
    'LayerGroupsError',
    'InvalidPlacementError',
    'LayerNotFoundError',
    'DuplicateLayerError',
]
