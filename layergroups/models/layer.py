"""
Layer Groups - Layer Data Model

Provides the layer value type handled by group operations:
- Stable string id (unique within the host)
- Opaque style payload (type, source, paint, layout, ...) passed through as-is
- Opaque metadata (all keys preserved)
- Explicit group membership tag, kept apart from payload and metadata
- Conversion from/to style-spec layer dicts, where the tag lives in
  metadata["group"]

Also provides LayerTracker, a bounded call log of host primitive calls used
for debugging and for asserting call order in tests.

This is part of the MODEL layer - pure data, no host access.

Usage:
    layer = Layer.from_dict({'id': 'roads-casing', 'type': 'line', 'paint': {...}})
    grouped = layer.with_groups({'$roads'})
    grouped.group_id      # '$roads'
    grouped.to_dict()     # {..., 'metadata': {'group': '$roads'}}
"""

import logging
from typing import Any, Dict, FrozenSet, Iterable, List, Optional, Union

from layergroups.constants import (
    LAYER_ID_KEY,
    LAYER_METADATA_KEY,
    METADATA_GROUP_KEY,
    TRACKER_MAX_LOG_SIZE,
)
from .group_id import normalize_group_id, sort_group_ids


class LayerTracker:
    """Tracks host primitive calls for debugging and accountability

    Components that mutate a host register a caller key. Every insert,
    remove and move is logged with the caller, the layer id and the anchor.
    """

    # Registered component keys (pre-register internal callers)
    _registered_keys = {'LayerStack'}

    # Call log (limited size to prevent memory issues)
    _call_log = []
    _max_log_size = TRACKER_MAX_LOG_SIZE

    _logger = logging.getLogger('LayerTracker')

    @classmethod
    def register(cls, key: str) -> None:
        """Register a caller key (e.g. 'map_view', 'style_loader')

        Args:
            key: Unique identifier for the calling component
        """
        cls._registered_keys.add(key)
        cls._logger.info(f"Registered caller: {key}")

    @classmethod
    def log_call(cls, caller: str, layer_id: Optional[str], method: str, value: Any = None):
        """Log a host primitive call

        Args:
            caller: The registered key of the caller
            layer_id: Id of the layer being inserted/removed/moved
            method: Name of the primitive called
            value: Extra argument, typically the beforeId
        """
        if caller not in cls._registered_keys:
            cls._logger.warning(f"Unregistered caller: {caller}")

        cls._call_log.append({
            'caller': caller,
            'layer_id': layer_id,
            'method': method,
            'value': value,
        })

        # Trim log if too large
        if len(cls._call_log) > cls._max_log_size:
            cls._call_log = cls._call_log[-cls._max_log_size:]

        cls._logger.debug(f"{caller}.{method}(layer={layer_id}, before={value})")

    @classmethod
    def get_log(cls, caller: str = None, layer_id: str = None, method: str = None) -> List[Dict]:
        """Get call log, optionally filtered

        Args:
            caller: Filter by caller key
            layer_id: Filter by layer id
            method: Filter by primitive name

        Returns:
            List of log entries, oldest first
        """
        log = cls._call_log

        if caller:
            log = [e for e in log if e['caller'] == caller]

        if layer_id is not None:
            log = [e for e in log if e['layer_id'] == layer_id]

        if method:
            log = [e for e in log if e['method'] == method]

        return list(log)

    @classmethod
    def clear_log(cls):
        """Clear the call log"""
        cls._call_log.clear()
        cls._logger.info("Call log cleared")


class Layer:
    """Layer value type with an explicit group membership tag

    Properties:
        id: Layer id (unique within a host)
        payload: Style payload dict (everything except id and metadata)
        metadata: Metadata dict without the group tag
        groups: Frozen set of normalized group ids
        group_ids: Groups ordered outermost first
        group_id: Most specific group, or None
    """

    def __init__(self, layer_id: str, payload: Optional[Dict[str, Any]] = None,
                 metadata: Optional[Dict[str, Any]] = None,
                 groups: Optional[Iterable[str]] = None):
        if not layer_id:
            raise ValueError("Layer id must be a non-empty string")

        self._id = layer_id
        self._payload = dict(payload) if payload else {}
        self._metadata = dict(metadata) if metadata else {}
        self._groups = frozenset(normalize_group_id(g) for g in (groups or ()) if g)

    @property
    def id(self) -> str:
        """Get layer id"""
        return self._id

    @property
    def payload(self) -> Dict[str, Any]:
        """Get style payload (opaque to group operations)"""
        return self._payload

    @property
    def metadata(self) -> Dict[str, Any]:
        """Get metadata, excluding the group tag"""
        return self._metadata

    @property
    def groups(self) -> FrozenSet[str]:
        """Get group membership tag"""
        return self._groups

    @property
    def group_ids(self) -> List[str]:
        """Get member groups ordered outermost first"""
        return sort_group_ids(self._groups)

    @property
    def group_id(self) -> Optional[str]:
        """Get the layer's own (most specific) group

        Returns None if the layer is not in any group.
        """
        group_ids = self.group_ids
        return group_ids[-1] if group_ids else None

    def in_group(self, group_id: str) -> bool:
        """Check membership of a normalized group id"""
        return group_id in self._groups

    def with_groups(self, groups: Iterable[str]) -> 'Layer':
        """Return a copy of this layer carrying the given tag

        The caller's layer is never modified. Payload and metadata dicts are
        shallow-copied.
        """
        return Layer(self._id, payload=self._payload, metadata=self._metadata, groups=groups)

    # ========================================
    # Style-spec dict conversion
    # ========================================

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Layer':
        """Create a layer from a style-spec layer dict

        The tag is read from metadata["group"], either a single id string or
        a list of ids.

        Raises:
            ValueError: If the dict has no id
        """
        layer_id = data.get(LAYER_ID_KEY)
        if not layer_id:
            raise ValueError(f"Layer dict has no '{LAYER_ID_KEY}': {data!r}")

        payload = {k: v for k, v in data.items() if k not in (LAYER_ID_KEY, LAYER_METADATA_KEY)}
        metadata = dict(data.get(LAYER_METADATA_KEY) or {})

        tag = metadata.pop(METADATA_GROUP_KEY, None)
        if isinstance(tag, str):
            groups = [tag]
        elif tag:
            groups = list(tag)
        else:
            groups = []

        return cls(layer_id, payload=payload, metadata=metadata, groups=groups)

    @classmethod
    def coerce(cls, layer: Union['Layer', Dict[str, Any]]) -> 'Layer':
        """Accept a Layer or a style-spec layer dict"""
        if isinstance(layer, Layer):
            return layer
        if isinstance(layer, dict):
            return cls.from_dict(layer)
        raise TypeError(f"Expected Layer or dict, got {type(layer)}")

    def to_dict(self) -> Dict[str, Any]:
        """Export to a style-spec layer dict

        A single group is written as a string, several as a list ordered
        outermost first. Metadata is omitted when empty.
        """
        data = {LAYER_ID_KEY: self._id}
        data.update(self._payload)

        metadata = dict(self._metadata)
        group_ids = self.group_ids
        if len(group_ids) == 1:
            metadata[METADATA_GROUP_KEY] = group_ids[0]
        elif group_ids:
            metadata[METADATA_GROUP_KEY] = group_ids

        if metadata:
            data[LAYER_METADATA_KEY] = metadata
        return data

    def __repr__(self) -> str:
        return f"Layer(id='{self._id}', groups={self.group_ids})"
