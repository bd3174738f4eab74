"""Classification of "insert before X" arguments"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from layergroups.models.group_id import normalize_group_id
from layergroups.models.layer_stack import LayerHost


class BeforeRefKind(Enum):
    """What a beforeId argument refers to"""
    ABSENT = 'absent'
    LAYER = 'layer'
    GROUP = 'group'


@dataclass(frozen=True)
class BeforeRef:
    """A beforeId argument resolved against the host

    kind is ABSENT (append), LAYER (an existing layer id) or GROUP (anything
    else, taken as a group id and normalized). raw keeps the caller's value.
    """
    kind: BeforeRefKind
    ref_id: Optional[str] = None
    raw: Optional[str] = None

    @classmethod
    def classify(cls, host: LayerHost, before_id: Optional[str]) -> 'BeforeRef':
        """Classify a caller-supplied beforeId

        Args:
            host: Host to look the id up in
            before_id: Layer id, group id, or None/'' for append
        """
        if not before_id:
            return cls(BeforeRefKind.ABSENT)
        if host.get_layer(before_id) is not None:
            return cls(BeforeRefKind.LAYER, before_id, before_id)
        return cls(BeforeRefKind.GROUP, normalize_group_id(before_id), before_id)

    @property
    def is_absent(self) -> bool:
        return self.kind is BeforeRefKind.ABSENT
