"""
Layer Groups - Host Contract and Reference Host

LayerHost is the contract a rendering engine must satisfy for group
operations to run against it. It exposes a flat, ordered layer sequence and
single-layer primitives only; it knows nothing about groups.

LayerStack is a list-backed LayerHost. Index 0 is the bottom of the stack
(drawn first). Every mutation is recorded in LayerTracker.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Optional

from layergroups.errors import DuplicateLayerError, LayerNotFoundError
from .layer import Layer, LayerTracker


class LayerHost(ABC):
    """Abstract host exposing an ordered layer sequence

    Subclasses must implement:
    - get_ordered_layers(): Current full sequence, bottom to top
    - get_layer(): Lookup by id
    - insert_layer(): Insert before a layer, or append
    - remove_layer(): Remove by id
    - move_layer(): Relocate before a layer, or to the end
    """

    @abstractmethod
    def get_ordered_layers(self) -> List[Layer]:
        """Return the current layer sequence (read only)"""
        pass

    @abstractmethod
    def get_layer(self, layer_id: str) -> Optional[Layer]:
        """Return the layer with this id, or None"""
        pass

    @abstractmethod
    def insert_layer(self, layer: Layer, before_id: Optional[str] = None):
        """Insert a layer immediately before before_id, or at the end

        Raises:
            DuplicateLayerError: If the layer id already exists
            LayerNotFoundError: If before_id does not exist
        """
        pass

    @abstractmethod
    def remove_layer(self, layer_id: str):
        """Remove a layer

        Raises:
            LayerNotFoundError: If the layer id does not exist
        """
        pass

    @abstractmethod
    def move_layer(self, layer_id: str, before_id: Optional[str] = None):
        """Move a layer immediately before before_id, or to the end

        Raises:
            LayerNotFoundError: If either id does not exist
        """
        pass


class LayerStack(LayerHost):
    """In-memory host backed by a Python list

    Provides:
    - The LayerHost primitives with the contract's failure modes
    - List-like access (iteration, len, membership by id)
    - Conversion from/to lists of style-spec layer dicts
    """

    def __init__(self, layers: Optional[Iterable[Layer]] = None, caller: str = 'LayerStack'):
        """Initialize from layers, bottom to top

        Args:
            layers: Initial layers (Layer objects or style-spec dicts)
            caller: Key recorded in LayerTracker for every mutation

        Raises:
            DuplicateLayerError: If two initial layers share an id
        """
        self._caller = caller
        self._layers: List[Layer] = []

        for layer in layers or ():
            layer = Layer.coerce(layer)
            if self.get_layer(layer.id) is not None:
                raise DuplicateLayerError(layer.id)
            self._layers.append(layer)

    def __len__(self) -> int:
        """Get number of layers"""
        return len(self._layers)

    def __iter__(self):
        """Iterate over layers, bottom to top"""
        return iter(self._layers)

    def __contains__(self, layer_id: str) -> bool:
        """Check whether a layer id exists"""
        return self.get_layer(layer_id) is not None

    def __repr__(self) -> str:
        return f"LayerStack({len(self._layers)} layers)"

    # ========================================
    # LayerHost primitives
    # ========================================

    def get_ordered_layers(self) -> List[Layer]:
        return list(self._layers)

    def get_layer(self, layer_id: str) -> Optional[Layer]:
        for layer in self._layers:
            if layer.id == layer_id:
                return layer
        return None

    def insert_layer(self, layer: Layer, before_id: Optional[str] = None):
        layer = Layer.coerce(layer)
        if self.get_layer(layer.id) is not None:
            raise DuplicateLayerError(layer.id)

        if before_id is None:
            self._layers.append(layer)
        else:
            self._layers.insert(self.index_of(before_id), layer)

        LayerTracker.log_call(self._caller, layer.id, 'insert_layer', value=before_id)

    def remove_layer(self, layer_id: str):
        index = self.index_of(layer_id)
        self._layers.pop(index)
        LayerTracker.log_call(self._caller, layer_id, 'remove_layer')

    def move_layer(self, layer_id: str, before_id: Optional[str] = None):
        from_index = self.index_of(layer_id)
        if before_id is not None:
            # Validate the anchor before touching the list
            self.index_of(before_id)

        if before_id == layer_id:
            LayerTracker.log_call(self._caller, layer_id, 'move_layer', value=before_id)
            return

        layer = self._layers.pop(from_index)
        if before_id is None:
            self._layers.append(layer)
        else:
            self._layers.insert(self.index_of(before_id), layer)

        LayerTracker.log_call(self._caller, layer_id, 'move_layer', value=before_id)

    # ========================================
    # Helpers
    # ========================================

    def index_of(self, layer_id: str) -> int:
        """Get index of a layer

        Raises:
            LayerNotFoundError: If the layer id does not exist
        """
        for i, layer in enumerate(self._layers):
            if layer.id == layer_id:
                return i
        raise LayerNotFoundError(layer_id)

    def get_layer_ids(self) -> List[str]:
        """Get all layer ids, bottom to top"""
        return [layer.id for layer in self._layers]

    @classmethod
    def from_dicts(cls, data_list: List[Dict[str, Any]], caller: str = 'LayerStack') -> 'LayerStack':
        """Create a stack from a list of style-spec layer dicts"""
        return cls([Layer.from_dict(data) for data in data_list], caller=caller)

    def to_dicts(self) -> List[Dict[str, Any]]:
        """Export all layers to style-spec layer dicts"""
        return [layer.to_dict() for layer in self._layers]
