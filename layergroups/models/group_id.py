"""
Group identifier normalization

Group ids share a string namespace with layer ids, so every group id is
forced into a reserved namespace by prefixing it with GROUP_ID_PREFIX.
Hierarchical ids are paths ("$parent/child") whose prefix sub-paths are the
ancestor groups.

Usage:
    normalize_group_id('roads')            # '$roads'
    create_group_id('roads', 'labels')     # '$roads/labels'
    ancestor_chain('$roads/labels/major')  # ['$roads', '$roads/labels', '$roads/labels/major']
"""

from typing import Iterable, List, Optional

from layergroups.constants import GROUP_ID_PREFIX, GROUP_ID_SEPARATOR


def normalize_group_id(group_id: Optional[str]) -> Optional[str]:
    """Prefix a group id with the reserved prefix if it is missing

    Idempotent. None and '' are passed through unchanged.

    Args:
        group_id: Raw or already normalized group id

    Returns:
        Normalized group id
    """
    if group_id and not group_id.startswith(GROUP_ID_PREFIX):
        return f"{GROUP_ID_PREFIX}{group_id}"
    return group_id


def is_group_id(value: Optional[str]) -> bool:
    """Check whether a string is already in the group namespace"""
    return bool(value) and value.startswith(GROUP_ID_PREFIX)


def create_group_id(*segments: str) -> str:
    """Build a (sub-)group id from path segments

    Args:
        *segments: Path segments, outermost first. The first segment may
            already carry the prefix.

    Returns:
        Normalized group id, e.g. create_group_id('a', 'b') -> '$a/b'

    Raises:
        ValueError: If no segments are given, a segment is empty, or a
            segment contains the reserved prefix or separator
    """
    if not segments:
        raise ValueError("create_group_id requires at least one segment")

    parts = list(segments)
    if parts[0].startswith(GROUP_ID_PREFIX):
        parts[0] = parts[0][len(GROUP_ID_PREFIX):]

    for part in parts:
        if not part:
            raise ValueError(f"Empty segment in group id segments {segments!r}")
        if GROUP_ID_PREFIX in part or GROUP_ID_SEPARATOR in part:
            raise ValueError(f"Reserved character in group id segment {part!r}")

    return normalize_group_id(GROUP_ID_SEPARATOR.join(parts))


def ancestor_chain(group_id: Optional[str]) -> List[str]:
    """Decompose a group id into itself and all of its ancestors

    Args:
        group_id: Raw or normalized group id

    Returns:
        Group ids ordered outermost first, ending with the id itself.
        Empty list for None/''.
    """
    group_id = normalize_group_id(group_id)
    if not group_id:
        return []

    segments = group_id.split(GROUP_ID_SEPARATOR)
    return [GROUP_ID_SEPARATOR.join(segments[:i]) for i in range(1, len(segments) + 1)]


def group_depth(group_id: str) -> int:
    """Number of path segments in a group id ('$a' -> 1, '$a/b' -> 2)"""
    return normalize_group_id(group_id).count(GROUP_ID_SEPARATOR) + 1


def sort_group_ids(group_ids: Iterable[str]) -> List[str]:
    """Order group ids outermost first, then by name"""
    return sorted(group_ids, key=lambda g: (group_depth(g), g))


def parent_group_id(group_id: str) -> Optional[str]:
    """Direct parent of a sub-group id, or None for a top-level group"""
    chain = ancestor_chain(group_id)
    if len(chain) < 2:
        return None
    return chain[-2]


def group_name(group_id: str) -> str:
    """Last path segment of a group id, without the prefix"""
    name = normalize_group_id(group_id).rsplit(GROUP_ID_SEPARATOR, 1)[-1]
    if name.startswith(GROUP_ID_PREFIX):
        name = name[len(GROUP_ID_PREFIX):]
    return name
