# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for Focus records and JSON encoding."""

import json

import pytest

from treefocus import (
    Focus,
    InvalidPathError,
    Jump,
    MalformedDataError,
    Tree,
    TreeFocusError,
    dumps,
    loads,
    loads_focus,
    loads_tree,
)


@pytest.fixture
def built_focus():
    """Focus on node 'b1' of a small tree built through the cursor."""
    focus = Focus('root')
    focus.create_subtree('a')
    focus.create_subtree('a1')
    focus.jump(Jump.UP)
    focus.jump(Jump.UP)
    focus.create_subtree('b')
    focus.create_subtree('b1')
    return focus


class TestFocusRecords:
    """Tests for Focus.as_dict and Focus.from_dict."""

    def test_as_dict(self, built_focus):
        """Test the record holds the tree and path."""
        record = built_focus.as_dict()
        assert record['path'] == [1, 0]
        assert record['tree']['label'] == 'root'
        assert [c['label'] for c in record['tree']['children']] == ['a', 'b']

    def test_from_dict(self, built_focus):
        """Test from_dict(as_dict()) rebuilds an equal focus."""
        rebuilt = Focus.from_dict(built_focus.as_dict())
        assert rebuilt == built_focus
        assert rebuilt.focused().label == 'b1'
        assert rebuilt.labels() == ['root', 'b', 'b1']

    def test_from_dict_default_path(self):
        """Test a record without path focuses the root."""
        focus = Focus.from_dict({'tree': {'label': 0, 'children': []}})
        assert focus.path == ()

    def test_from_dict_invalid_path(self):
        """Test a path that misses the tree raises InvalidPathError."""
        record = {'tree': {'label': 0, 'children': []}, 'path': [0]}
        with pytest.raises(InvalidPathError) as exc_info:
            Focus.from_dict(record)
        assert exc_info.value.path == (0,)
        assert isinstance(exc_info.value, TreeFocusError)

    @pytest.mark.parametrize('path', [[-1], ['0'], [True], 0, None, [0.0]])
    def test_from_dict_bad_path_type(self, path):
        """Test path must be a list of non-negative integers."""
        record = {'tree': {'label': 0, 'children': [{'label': 1}]}, 'path': path}
        with pytest.raises(MalformedDataError, match="'path'"):
            Focus.from_dict(record)

    def test_from_dict_missing_tree(self):
        """Test a record without tree is rejected."""
        with pytest.raises(MalformedDataError, match="no 'tree'"):
            Focus.from_dict({'path': []})

    def test_from_dict_not_a_dict(self):
        """Test a non-mapping record is rejected."""
        with pytest.raises(MalformedDataError):
            Focus.from_dict('focus')


class TestDumps:
    """Tests for dumps."""

    def test_dumps_tree(self):
        """Test tree encoding."""
        tree = Tree(0)
        tree.create_subtree(1)
        assert json.loads(dumps(tree)) == {
            'label': 0,
            'children': [{'label': 1, 'children': []}],
        }

    def test_dumps_focus(self, built_focus):
        """Test focus encoding keeps the path order."""
        data = json.loads(dumps(built_focus))
        assert data['path'] == [1, 0]

    def test_dumps_passes_json_options(self):
        """Test keyword arguments reach json.dumps."""
        assert '\n' in dumps(Tree(0), indent=2)

    def test_dumps_rejects_other_objects(self):
        """Test only Tree and Focus can be encoded."""
        with pytest.raises(TypeError, match="Tree or Focus"):
            dumps({'label': 0})

    def test_dumps_unserializable_label(self):
        """Test labels must be JSON values."""
        with pytest.raises(TypeError):
            dumps(Tree(object()))


class TestLoads:
    """Tests for loads, loads_tree and loads_focus."""

    def test_tree_round_trip(self):
        """Test a tree survives encoding with child order intact."""
        tree = Tree('r')
        first = tree.create_subtree('z')
        first.create_subtree('z1')
        tree.create_subtree('a')
        tree.create_subtree('m')
        text = dumps(tree)
        assert loads_tree(text) == tree
        assert loads(text) == tree
        assert [c.label for c in loads_tree(text)] == ['z', 'a', 'm']

    def test_focus_round_trip(self, built_focus):
        """Test a focus survives encoding with path intact."""
        text = dumps(built_focus)
        assert loads_focus(text) == built_focus
        restored = loads(text)
        assert isinstance(restored, Focus)
        assert restored.path == (1, 0)

    def test_round_trip_structured_labels(self):
        """Test labels that are JSON objects and lists survive."""
        focus = Focus({'name': 'root', 'size': 3})
        focus.create_subtree(['x', 1, None])
        assert loads(dumps(focus)) == focus

    def test_restored_focus_keeps_working(self, built_focus):
        """Test navigation and growth on a decoded focus."""
        focus = loads_focus(dumps(built_focus))
        focus.jump(Jump.UP)
        focus.jump(Jump.lateral(-1))
        assert focus.focused().label == 'a'
        focus.create_subtree('a2')
        assert focus.labels() == ['root', 'a', 'a2']

    def test_loads_bytes(self):
        """Test bytes input is accepted."""
        assert loads_tree(b'{"label": 1, "children": []}') == Tree(1)

    def test_loads_invalid_json(self):
        """Test invalid JSON raises MalformedDataError."""
        with pytest.raises(MalformedDataError, match="invalid JSON") as exc_info:
            loads('{"label": ')
        assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)

    def test_loads_invalid_utf8(self):
        """Test bytes that are not UTF-8 raise MalformedDataError."""
        with pytest.raises(MalformedDataError, match="invalid JSON") as exc_info:
            loads(b'{"label": "\xff", "children": []}')
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    def test_loads_too_deeply_nested(self):
        """Test nesting past the decoder limit raises MalformedDataError."""
        with pytest.raises(MalformedDataError, match="invalid JSON") as exc_info:
            loads('[' * 200000)
        assert isinstance(exc_info.value.__cause__, RecursionError)

    @pytest.mark.parametrize('text', ['[]', '42', '{"path": [0]}', 'null'])
    def test_loads_unknown_record(self, text):
        """Test documents that are neither trees nor focuses."""
        with pytest.raises(MalformedDataError, match="neither"):
            loads(text)

    def test_loads_focus_invalid_path(self):
        """Test decoding a focus whose path misses the tree."""
        text = '{"tree": {"label": 0, "children": []}, "path": [3]}'
        with pytest.raises(InvalidPathError):
            loads_focus(text)
