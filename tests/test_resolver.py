import pytest

from svg_importer.exceptions import NodeNotFoundError
from svg_importer.models import FileSnapshot
from svg_importer.resolver import resolve
from tests.fakes import make_file

COMPONENTS = {
    '1:2': {'key': 'k1', 'name': 'Icon'},
    '1:3': {'key': 'k2', 'name': 'Button'},
    '2:1': {'key': 'k3', 'name': 'Logo'},
}


def tagged_snapshot():
    return FileSnapshot.from_api(make_file(COMPONENTS, {
        'id': '0:0', 'type': 'DOCUMENT', 'children': [
            {'id': '0:1', 'type': 'CANVAS', 'children': [
                {'id': '1:1', 'type': 'FRAME', 'children': [
                    {'id': '1:3', 'type': 'COMPONENT'},
                    {'id': '1:2', 'type': 'COMPONENT'},
                    {'id': '1:9', 'type': 'INSTANCE'},
                ]},
                {'id': '2:0', 'type': 'FRAME', 'children': [
                    {'id': '2:1', 'type': 'COMPONENT'},
                ]},
                {'id': '3:0', 'type': 'FRAME', 'children': []},
            ]},
        ],
    }))


def reference_snapshot():
    return FileSnapshot.from_api(make_file(COMPONENTS, {
        'id': '0:0', 'children': [
            {'id': '5:1', 'children': [
                {'id': '5:2', 'componentId': '2:1'},
                {'id': '5:3', 'children': [
                    {'id': '5:4', 'componentId': '1:2'},
                    {'id': '5:5', 'componentId': '2:1'},
                    {'id': '5:6', 'componentId': '404:404'},
                ]},
            ]},
            {'id': '6:1', 'componentId': '1:3'},
        ],
    }))


class TestResolveWithoutSubtree:
    def test_returns_whole_registry(self):
        assert resolve(tagged_snapshot()) == ['1:2', '1:3', '2:1']


class TestResolveKindTagged:
    def test_collects_components_under_subtree(self):
        assert resolve(tagged_snapshot(), '1:1') == ['1:3', '1:2']

    def test_subtree_root_itself_can_be_component(self):
        assert resolve(tagged_snapshot(), '2:1') == ['2:1']

    def test_empty_subtree_is_not_an_error(self):
        assert resolve(tagged_snapshot(), '3:0') == []

    def test_missing_node_raises(self):
        with pytest.raises(NodeNotFoundError) as exc_info:
            resolve(tagged_snapshot(), '9:9')
        assert exc_info.value.node_id == '9:9'
        assert '9:9' in str(exc_info.value)

    def test_hyphenated_id_is_normalized(self):
        assert resolve(tagged_snapshot(), '1-1', normalize_ids=True) == ['1:3', '1:2']

    def test_hyphenated_id_without_normalization_is_not_found(self):
        with pytest.raises(NodeNotFoundError):
            resolve(tagged_snapshot(), '1-1')


class TestResolveComponentReferences:
    def test_collects_unique_registered_references(self):
        assert resolve(reference_snapshot(), '5:1') == ['2:1', '1:2']

    def test_reference_on_subtree_root_is_included(self):
        assert resolve(reference_snapshot(), '6:1') == ['1:3']

    def test_whole_document(self):
        assert set(resolve(reference_snapshot(), '0:0')) == {'1:2', '1:3', '2:1'}


class TestResolveInstances:
    def test_typed_instances_do_not_contribute_their_component(self):
        snapshot = FileSnapshot.from_api(make_file(COMPONENTS, {
            'id': '0:0', 'type': 'DOCUMENT', 'children': [
                {'id': '7:0', 'type': 'FRAME', 'children': [
                    {'id': '7:1', 'type': 'INSTANCE', 'componentId': '1:2'},
                ]},
            ],
        }))
        assert resolve(snapshot, '7:0') == []
