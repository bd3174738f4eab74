"""
Layer Groups - Constants and Configuration

This module contains all constant values used throughout the package:
- Group identifier format (reserved prefix, path separator)
- Layer dict keys used at the style-spec boundary
- Call tracker limits
- Error messages
"""

# ======================================================================
# GROUP IDENTIFIERS
# ======================================================================
# Group ids live in their own namespace. The prefix is not allowed in
# caller-supplied group names, so "$roads" can never collide with a layer
# named "roads".

GROUP_ID_PREFIX = '$'

# Sub-groups are addressed as paths: "$parent/child"
GROUP_ID_SEPARATOR = '/'

# ======================================================================
# STYLE-SPEC LAYER DICTS
# ======================================================================

LAYER_ID_KEY = 'id'
LAYER_METADATA_KEY = 'metadata'

# Key inside layer metadata holding the group membership tag
METADATA_GROUP_KEY = 'group'

# ======================================================================
# CALL TRACKER
# ======================================================================

TRACKER_MAX_LOG_SIZE = 1000

# ======================================================================
# ERROR MESSAGES
# ======================================================================

ERROR_BEFORE_ID_OUTSIDE_GROUP = 'beforeId must reference a layer within the same group'
ERROR_BEFORE_ID_INSIDE_MOVED_GROUP = 'beforeId must not reference a layer within the group being moved'
