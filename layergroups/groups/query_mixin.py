"""
Query Mixin for layer groups

Provides read-only membership and position queries over the host's layer
sequence. No index is kept: every query re-reads the live sequence, so
results can never go stale after host mutations made elsewhere.

All query methods follow these conventions:
- Accept raw or normalized group ids
- Return None / [] for unknown layers and empty groups (never raise)
- Return layers and ids in host order (bottom to top)
"""

from typing import Iterable, List, Optional, Tuple

from layergroups.models.group_id import normalize_group_id, sort_group_ids
from layergroups.models.layer import Layer


class GroupQueryMixin:
    """Mixin providing group membership queries

    This mixin assumes the class has:
    - self._host: LayerHost

    Subclasses change what membership means by overriding _groups_of and
    _layer_in_group.
    """

    # ========================================
    # Membership Queries
    # ========================================

    def get_layers_in_group(self, group_id: str) -> List[Layer]:
        """Get all layers of a group

        Args:
            group_id: Group id (raw or normalized)

        Returns:
            Member layers in host order, empty if the group has no members
        """
        group_id = normalize_group_id(group_id)
        if not group_id:
            return []
        layers = self._host.get_ordered_layers()
        return [layer for layer in layers if self._layer_in_group(layer, group_id)]

    def get_layer_ids_in_group(self, group_id: str) -> List[str]:
        """Get ids of all layers of a group, in host order"""
        return [layer.id for layer in self.get_layers_in_group(group_id)]

    def get_layer_group_id(self, layer_id: str) -> Optional[str]:
        """Get the group a layer belongs to

        Returns:
            The layer's own (most specific) group id, or None if the layer
            does not exist or is not grouped
        """
        layer = self._host.get_layer(layer_id)
        if layer is None:
            return None
        return layer.group_id

    def get_layer_group_ids(self, layer_id: str) -> List[str]:
        """Get every group a layer belongs to, outermost first

        Returns:
            Group ids, or [] if the layer does not exist or is not grouped
        """
        layer = self._host.get_layer(layer_id)
        if layer is None:
            return []
        return sort_group_ids(self._groups_of(layer))

    # ========================================
    # Position Queries
    # ========================================

    def get_group_first_index(self, group_id: str) -> Optional[int]:
        """Index of the first (bottom-most) layer of a group, or None"""
        group_id = normalize_group_id(group_id)
        for index, layer in enumerate(self._host.get_ordered_layers()):
            if self._layer_in_group(layer, group_id):
                return index
        return None

    def get_group_last_index(self, group_id: str) -> Optional[int]:
        """Index of the last (top-most) layer of a group, or None"""
        group_id = normalize_group_id(group_id)
        layers = self._host.get_ordered_layers()
        for index in range(len(layers) - 1, -1, -1):
            if self._layer_in_group(layers[index], group_id):
                return index
        return None

    def get_layer_id_from_index(self, index: Optional[int]) -> Optional[str]:
        """Id of the layer at an index, or None if out of range"""
        if index is None:
            return None
        layers = self._host.get_ordered_layers()
        if 0 <= index < len(layers):
            return layers[index].id
        return None

    def get_group_first_layer_id(self, group_id: str) -> Optional[str]:
        """Id of the first layer of a group, or None if the group is empty"""
        return self.get_layer_id_from_index(self.get_group_first_index(group_id))

    def get_group_last_layer_id(self, group_id: str) -> Optional[str]:
        """Id of the last layer of a group, or None if the group is empty"""
        return self.get_layer_id_from_index(self.get_group_last_index(group_id))

    # ========================================
    # Group Collection Queries
    # ========================================

    def get_all_groups(self) -> List[str]:
        """Get all group ids currently in use (sorted)"""
        groups = set()
        for layer in self._host.get_ordered_layers():
            groups.update(self._groups_of(layer))
        return sorted(groups)

    def has_group(self, group_id: str) -> bool:
        """Check whether at least one layer carries the group id"""
        return self.get_group_first_index(group_id) is not None

    def get_group_runs(self, group_id: str) -> List[Tuple[int, int]]:
        """Get the contiguous index runs occupied by a group

        Returns:
            List of (start, end) inclusive index pairs, bottom to top.
            A contiguous group has exactly one run.
        """
        group_id = normalize_group_id(group_id)
        runs = []
        start = None
        layers = self._host.get_ordered_layers()

        for index, layer in enumerate(layers):
            if self._layer_in_group(layer, group_id):
                if start is None:
                    start = index
            elif start is not None:
                runs.append((start, index - 1))
                start = None

        if start is not None:
            runs.append((start, len(layers) - 1))
        return runs

    def is_group_contiguous(self, group_id: str) -> bool:
        """Check that a group has no foreign layers between its members

        An empty group counts as contiguous.
        """
        return len(self.get_group_runs(group_id)) <= 1

    # ========================================
    # Membership Hooks
    # ========================================

    def _groups_of(self, layer: Layer) -> Iterable[str]:
        """Every group a layer is a member of"""
        return layer.groups

    def _layer_in_group(self, layer: Layer, group_id: str) -> bool:
        return layer.in_group(group_id)
