"""Exceptions raised by layer group operations and the reference host"""


class LayerGroupsError(ValueError):
    """Base class for all layergroups errors"""


class InvalidPlacementError(LayerGroupsError):
    """A beforeId does not satisfy the placement rules of a group operation"""


class LayerNotFoundError(LayerGroupsError):
    """A layer id does not exist in the host"""

    def __init__(self, layer_id: str):
        self.layer_id = layer_id
        super().__init__(f"Layer with id '{layer_id}' not found")


class DuplicateLayerError(LayerGroupsError):
    """A layer id is already present in the host"""

    def __init__(self, layer_id: str):
        self.layer_id = layer_id
        super().__init__(f"Layer with id '{layer_id}' already exists")
