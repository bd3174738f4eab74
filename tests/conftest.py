"""
Shared fixtures for layergroups tests.

Provides sample style layers, an in-memory host and group indexes bound to it.
"""
import sys
import os
from copy import deepcopy

import pytest

# Ensure the project root is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from layergroups import Layer, LayerGroups, LayerStack, LayerTracker, NestedLayerGroups


# ── Sample style layers (bottom → top) ──────────────────────────────────

SAMPLE_STYLE_LAYERS = [
    {
        'id': 'background',
        'type': 'background',
        'paint': {'background-color': '#f8f4f0'},
    },
    {
        'id': 'water',
        'type': 'fill',
        'source': 'openmaptiles',
        'source-layer': 'water',
        'paint': {'fill-color': '#a0c8f0'},
    },
    {
        'id': 'roads-casing',
        'type': 'line',
        'source': 'openmaptiles',
        'source-layer': 'transportation',
        'paint': {'line-color': '#cfcdca', 'line-width': 6},
        'metadata': {'group': '$roads'},
    },
    {
        'id': 'roads-fill',
        'type': 'line',
        'source': 'openmaptiles',
        'source-layer': 'transportation',
        'paint': {'line-color': '#ffffff', 'line-width': 4},
        'metadata': {'group': '$roads', 'mapbox:group': '1444849345966.4436'},
    },
    {
        'id': 'labels',
        'type': 'symbol',
        'source': 'openmaptiles',
        'source-layer': 'place',
        'layout': {'text-field': '{name}'},
    },
]


def make_layer(layer_id, layer_type='fill', **payload):
    """Build an ungrouped layer with a minimal payload"""
    payload.setdefault('type', layer_type)
    return Layer(layer_id, payload=payload)


@pytest.fixture(autouse=True)
def clear_tracker():
    """Each test starts with an empty host call log"""
    LayerTracker.clear_log()
    yield
    LayerTracker.clear_log()


@pytest.fixture
def style_layers():
    """Fresh copy of the sample style layers"""
    return deepcopy(SAMPLE_STYLE_LAYERS)


@pytest.fixture
def stack(style_layers):
    """Host loaded with the sample style: background, water, roads(2), labels"""
    return LayerStack.from_dicts(style_layers)


@pytest.fixture
def groups(stack):
    """Flat group index over the sample host"""
    return LayerGroups(stack)


@pytest.fixture
def base_stack():
    """Host with three ungrouped layers: background, water, labels"""
    return LayerStack([make_layer('background', 'background'), make_layer('water'),
                       make_layer('labels', 'symbol')])


@pytest.fixture
def nested_groups(base_stack):
    """Hierarchical group index over the ungrouped host"""
    return NestedLayerGroups(base_stack)
