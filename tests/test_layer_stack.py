"""
Tests for the in-memory host (LayerStack) and its host-contract failure modes.
"""
import pytest

from layergroups import (
    DuplicateLayerError,
    Layer,
    LayerHost,
    LayerNotFoundError,
    LayerStack,
    LayerTracker,
)


def _stack(*ids):
    return LayerStack([Layer(layer_id) for layer_id in ids])


class TestLayerStackPrimitives:

    def test_is_a_layer_host(self):
        assert isinstance(LayerStack(), LayerHost)

    def test_insert_appends_by_default(self):
        stack = _stack('a', 'b')
        stack.insert_layer(Layer('c'))
        assert stack.get_layer_ids() == ['a', 'b', 'c']

    def test_insert_before(self):
        stack = _stack('a', 'b')
        stack.insert_layer(Layer('c'), 'b')
        assert stack.get_layer_ids() == ['a', 'c', 'b']

    def test_insert_duplicate_rejected(self):
        stack = _stack('a')
        with pytest.raises(DuplicateLayerError):
            stack.insert_layer(Layer('a'))

    def test_insert_before_unknown_rejected(self):
        stack = _stack('a')
        with pytest.raises(LayerNotFoundError):
            stack.insert_layer(Layer('b'), 'ghost')
        assert stack.get_layer_ids() == ['a']

    def test_remove(self):
        stack = _stack('a', 'b')
        stack.remove_layer('a')
        assert stack.get_layer_ids() == ['b']

    def test_remove_unknown_rejected(self):
        with pytest.raises(LayerNotFoundError, match="ghost"):
            _stack('a').remove_layer('ghost')

    @pytest.mark.parametrize("layer_id, before_id, expected", [
        ('a', 'c', ['b', 'a', 'c', 'd']),
        ('d', 'b', ['a', 'd', 'b', 'c']),
        ('a', None, ['b', 'c', 'd', 'a']),
        ('b', 'b', ['a', 'b', 'c', 'd']),
    ])
    def test_move(self, layer_id, before_id, expected):
        stack = _stack('a', 'b', 'c', 'd')
        stack.move_layer(layer_id, before_id)
        assert stack.get_layer_ids() == expected

    def test_move_unknown_rejected(self):
        stack = _stack('a', 'b')
        with pytest.raises(LayerNotFoundError):
            stack.move_layer('ghost', 'a')
        with pytest.raises(LayerNotFoundError):
            stack.move_layer('a', 'ghost')
        assert stack.get_layer_ids() == ['a', 'b']

    def test_get_layer(self):
        stack = _stack('a')
        assert stack.get_layer('a').id == 'a'
        assert stack.get_layer('ghost') is None

    def test_ordered_layers_is_a_copy(self):
        stack = _stack('a', 'b')
        stack.get_ordered_layers().clear()
        assert len(stack) == 2


class TestLayerStackCollection:

    def test_duplicate_initial_layers_rejected(self):
        with pytest.raises(DuplicateLayerError):
            _stack('a', 'a')

    def test_container_protocol(self):
        stack = _stack('a', 'b')
        assert len(stack) == 2
        assert 'a' in stack
        assert 'ghost' not in stack
        assert [layer.id for layer in stack] == ['a', 'b']
        assert stack.index_of('b') == 1

    def test_dicts_round_trip(self, style_layers):
        assert LayerStack.from_dicts(style_layers).to_dicts() == style_layers


class TestLayerStackTracking:

    def test_mutations_are_logged_with_caller(self):
        LayerTracker.register('map_view')
        stack = LayerStack([Layer('a')], caller='map_view')
        stack.insert_layer(Layer('b'), 'a')
        stack.move_layer('a', 'b')
        stack.remove_layer('b')

        log = LayerTracker.get_log(caller='map_view')
        assert [(e['method'], e['layer_id'], e['value']) for e in log] == [
            ('insert_layer', 'b', 'a'),
            ('move_layer', 'a', 'b'),
            ('remove_layer', 'b', None),
        ]
