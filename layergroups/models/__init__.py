"""
Layer Groups - Data Models

Public API: Layer, LayerTracker, LayerHost, LayerStack and the group id
helpers.
"""

from .group_id import (
    ancestor_chain,
    create_group_id,
    group_depth,
    group_name,
    is_group_id,
    normalize_group_id,
    parent_group_id,
    sort_group_ids,
)
from .layer import Layer, LayerTracker
from .layer_stack import LayerHost, LayerStack

__all__ = [
    'Layer',
    'LayerTracker',
    'LayerHost',
    'LayerStack',
    'ancestor_chain',
    'create_group_id',
    'group_depth',
    'group_name',
    'is_group_id',
    'normalize_group_id',
    'parent_group_id',
    'sort_group_ids',
]
