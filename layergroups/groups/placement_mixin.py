"""
Placement Mixin for layer groups

Translates group-level operations into single-layer host primitives:
    - resolve_anchor
    - add_group
    - add_layer_to_group
    - remove_group
    - move_group

Multi-layer operations are not transactional. If the host rejects a call
part way through (duplicate id, unknown id), the error propagates and the
layers already handled stay where they are.
"""

from typing import Any, Dict, Iterable, List, Optional, Union

from layergroups.constants import (
    ERROR_BEFORE_ID_INSIDE_MOVED_GROUP,
    ERROR_BEFORE_ID_OUTSIDE_GROUP,
)
from layergroups.errors import InvalidPlacementError
from layergroups.models.group_id import normalize_group_id
from layergroups.models.layer import Layer
from .anchor import BeforeRef, BeforeRefKind

LayerLike = Union[Layer, Dict[str, Any]]


class GroupPlacementMixin:
    """Mixin providing group mutations

    This mixin assumes the class has:
    - self._host: LayerHost
    - self._logger: logging.Logger instance
    - the GroupQueryMixin queries
    - self._tag_for(layer, group_id): tag to give a layer joining a group
    - self._anchor_group_for(layer): group a layer-anchor resolves through
    """

    # ========================================
    # Anchor Resolution
    # ========================================

    def resolve_anchor(self, before_id: Optional[str]) -> Optional[str]:
        """Turn a "before X" argument into a concrete layer id

        X may be absent, a layer id or a group id. A grouped layer resolves
        to the first layer of its enclosing group so that inserting before
        it never splits that group.

        Args:
            before_id: Layer id, group id, or None for append

        Returns:
            Layer id to insert before, or None to append
        """
        ref = BeforeRef.classify(self._host, before_id)
        if ref.is_absent:
            return None

        if ref.kind is BeforeRefKind.LAYER:
            group_id = self._anchor_group_for(self._host.get_layer(ref.ref_id))
            if group_id is None:
                return ref.ref_id
        else:
            group_id = ref.ref_id

        first_layer_id = self.get_group_first_layer_id(group_id)
        if first_layer_id is None:
            # Unknown group: leave it to the host to accept or reject
            return before_id
        return first_layer_id

    # ========================================
    # Group Operations
    # ========================================

    def add_group(self, group_id: str, layers: Iterable[LayerLike],
                  before_id: Optional[str] = None) -> List[str]:
        """Add a new group of layers

        Args:
            group_id: Id of the new group
            layers: Layers (or style-spec dicts), bottom to top
            before_id: Layer id or group id to insert the group before.
                If omitted the group is added on top of the stack.

        Returns:
            Ids of the inserted layers, in insertion order
        """
        group_id = self._require_group_id(group_id)
        before_layer_id = self.resolve_anchor(before_id)

        added = []
        for layer in layers:
            added.append(self._add_layer_to_group(group_id, layer, before_layer_id, True))

        self._logger.info(f"Added group {group_id} with {len(added)} layers before {before_layer_id}")
        return added

    def add_layer_to_group(self, group_id: str, layer: LayerLike,
                           before_id: Optional[str] = None) -> str:
        """Add a single layer to a group

        Args:
            group_id: Id of the group
            layer: Layer (or style-spec dict) to add
            before_id: Id of a layer of the same group to insert before.
                If omitted the layer goes on top of the group.

        Returns:
            Id of the inserted layer

        Raises:
            InvalidPlacementError: If before_id is not a layer of the group
        """
        return self._add_layer_to_group(self._require_group_id(group_id), layer, before_id, False)

    def remove_group(self, group_id: str) -> List[str]:
        """Remove a group and all of its layers

        Returns:
            Ids of the removed layers, in host order
        """
        group_id = self._require_group_id(group_id)
        layer_ids = self.get_layer_ids_in_group(group_id)
        if not layer_ids:
            self._logger.warning(f"Group {group_id} has no layers")
            return []

        for layer_id in layer_ids:
            self._host.remove_layer(layer_id)

        self._logger.info(f"Removed group {group_id} ({len(layer_ids)} layers)")
        return layer_ids

    def move_group(self, group_id: str, before_id: Optional[str] = None) -> List[str]:
        """Move a group, keeping the relative order of its layers

        Args:
            group_id: Id of the group to move
            before_id: Layer id or group id to move the group before.
                If omitted the group is moved to the top of the stack.

        Returns:
            Ids of the moved layers, in their final order

        Raises:
            InvalidPlacementError: If before_id is the group itself, one of its
                layers, or resolves into the group
        """
        group_id = self._require_group_id(group_id)

        # Resolve before moving anything, the anchor must not shift under us
        ref = BeforeRef.classify(self._host, before_id)
        before_layer_id = self.resolve_anchor(before_id)
        layer_ids = self.get_layer_ids_in_group(group_id)

        if ref.ref_id == group_id or ref.ref_id in layer_ids or before_layer_id in layer_ids:
            raise InvalidPlacementError(ERROR_BEFORE_ID_INSIDE_MOVED_GROUP)

        for layer_id in layer_ids:
            self._host.move_layer(layer_id, before_layer_id)

        self._logger.info(f"Moved group {group_id} ({len(layer_ids)} layers) before {before_layer_id}")
        return layer_ids

    # ========================================
    # Internals
    # ========================================

    def _add_layer_to_group(self, group_id: str, layer: LayerLike, before_id: Optional[str],
                            ignore_before_id_check: bool) -> str:
        """Tag a layer and hand it to the host

        Args:
            group_id: Normalized group id
            layer: Layer or style-spec dict
            before_id: Layer id to insert before, or None
            ignore_before_id_check: True for bulk inserts, where before_id
                is an already resolved anchor outside the (new) group
        """
        layer = Layer.coerce(layer)

        if not ignore_before_id_check:
            if before_id:
                before_layer = self._host.get_layer(before_id)
                if before_layer is None or not self._layer_in_group(before_layer, group_id):
                    raise InvalidPlacementError(ERROR_BEFORE_ID_OUTSIDE_GROUP)
            else:
                before_id = self._layer_id_above_group(group_id)

        grouped_layer = layer.with_groups(self._tag_for(layer, group_id))
        self._host.insert_layer(grouped_layer, before_id)

        self._logger.debug(f"Added layer {grouped_layer.id} to {group_id} before {before_id}")
        return grouped_layer.id

    def _layer_id_above_group(self, group_id: str) -> Optional[str]:
        """Id of the layer right after a group's last member

        None when the group is empty or already on top, i.e. append.
        """
        last_index = self.get_group_last_index(group_id)
        if last_index is None:
            return None
        return self.get_layer_id_from_index(last_index + 1)

    def _require_group_id(self, group_id: Optional[str]) -> str:
        group_id = normalize_group_id(group_id)
        if not group_id:
            raise ValueError("Group id must be a non-empty string")
        return group_id
