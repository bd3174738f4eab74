"""
Layer Groups - Group Index

THE ENTRY POINT of the package. Groups are not stored anywhere: a group is
the set of host layers whose membership tag contains its id. Creating a group
means adding its first layer, removing its last layer deletes it.

Two membership models are provided:
- LayerGroups: flat model, a layer belongs to at most one group
- NestedLayerGroups: hierarchical model, a layer added to "$a/b" also
  belongs to "$a", so ancestor queries return all descendant layers

Usage:
    stack = LayerStack()
    groups = NestedLayerGroups(stack)

    groups.add_group('roads', [casing, fill])
    groups.add_group(groups.create_group_id('roads', 'labels'), [label])
    groups.move_group('roads', before_id='water')
    groups.remove_group('roads')
"""

import logging
from typing import Iterable, List, Optional

from layergroups.models.group_id import (
    ancestor_chain,
    create_group_id,
    group_depth,
    normalize_group_id,
    parent_group_id,
    sort_group_ids,
)
from layergroups.models.layer import Layer
from layergroups.models.layer_stack import LayerHost
from .placement_mixin import GroupPlacementMixin
from .query_mixin import GroupQueryMixin


class LayerGroups(GroupPlacementMixin, GroupQueryMixin):
    """Flat layer groups over a LayerHost

    Adding a layer to a group replaces any group tag it already carried.
    """

    def __init__(self, host: LayerHost):
        """Bind to a host

        Args:
            host: The LayerHost owning the layer sequence
        """
        self._logger = logging.getLogger(self.__class__.__name__)
        self._host = host

    @property
    def host(self) -> LayerHost:
        return self._host

    def _tag_for(self, layer: Layer, group_id: str) -> Iterable[str]:
        return {group_id}

    def _anchor_group_for(self, layer: Layer) -> Optional[str]:
        return layer.group_id


class NestedLayerGroups(LayerGroups):
    """Hierarchical layer groups over a LayerHost

    Group ids are paths ("$a/b/c"). Adding a layer to a group unions its
    existing tag with the group and every ancestor of the group. A layer
    tagged with a sub-group is a member of every ancestor of that sub-group,
    whether or not the ancestors are written into its tag.
    """

    create_group_id = staticmethod(create_group_id)

    def _tag_for(self, layer: Layer, group_id: str) -> Iterable[str]:
        return set(layer.groups) | set(ancestor_chain(group_id))

    def _groups_of(self, layer: Layer) -> Iterable[str]:
        groups = set()
        for group_id in layer.groups:
            groups.update(ancestor_chain(group_id))
        return groups

    def _layer_in_group(self, layer: Layer, group_id: str) -> bool:
        return any(group_id in ancestor_chain(g) for g in layer.groups)

    def _anchor_group_for(self, layer: Layer) -> Optional[str]:
        """Outermost group of a layer

        A layer tagged with unrelated top-level groups resolves through the
        one that starts lowest in the stack.
        """
        group_ids = sort_group_ids(self._groups_of(layer))
        if not group_ids:
            return None

        outermost_depth = group_depth(group_ids[0])
        candidates = [g for g in group_ids if group_depth(g) == outermost_depth]
        if len(candidates) == 1:
            return candidates[0]
        return min(candidates, key=self.get_group_first_index)

    def get_child_groups(self, group_id: str) -> List[str]:
        """Direct sub-groups of a group currently in use (sorted)"""
        group_id = normalize_group_id(group_id)
        return [g for g in self.get_all_groups() if parent_group_id(g) == group_id]
