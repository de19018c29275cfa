# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import unittest
from unittest.mock import patch

import pytest

from tagfield import TagEditor
from tagfield.collaborators import InMemoryForm, InMemoryRenderer, TagNode
from tagfield.errors import CollaboratorContractError


def _record(editor):
    events = []
    editor.on("update", lambda change: events.append(("update", change.tag, change.kind.value)))
    editor.on("change", lambda change: events.append(("change", change.values)))
    return events


class TestInitialNodes(unittest.TestCase):
    def test_existing_nodes_become_tags_without_change(self):
        renderer = InMemoryRenderer.from_values(("js", "JavaScript"), (None, "Text Only"), ("3", "Label C"))
        form = InMemoryForm()
        editor = TagEditor(renderer, form, name="langs", multiple=True)

        self.assertEqual(editor.tags, ["js", "Text Only", "3"])
        self.assertEqual(editor.labels, ["JavaScript", "Text Only", "Label C"])
        self.assertEqual(form.entries, [("langs", "js"), ("langs", "Text Only"), ("langs", "3")])
        self.assertEqual(form.change_count, 0)
        self.assertEqual(editor.cursor.position, 3)

    def test_empty_field_projects_placeholder(self):
        form = InMemoryForm()
        TagEditor(form=form, name="tags")
        self.assertEqual(form.entries, [("tags", "")])
        self.assertEqual(form.values, [""])

    def test_single_mode_trims_initial_nodes(self):
        renderer = InMemoryRenderer.from_values("first", "second")
        editor = TagEditor(renderer)
        self.assertEqual(editor.tags, ["first"])
        self.assertEqual(renderer.values, ["first"])


class TestStoreToStructure(unittest.TestCase):
    def test_mutations_are_mirrored_without_feedback(self):
        renderer = InMemoryRenderer()
        editor = TagEditor(renderer, multiple=True)
        with patch.object(editor.bridge, "rebuild", wraps=editor.bridge.rebuild) as rebuild:
            editor.add("a,b")
            editor.add("x", index=1)
            editor.remove("a")
        rebuild.assert_not_called()
        self.assertEqual(renderer.values, ["x", "b"])
        self.assertEqual(len(renderer.created), 3)
        self.assertEqual([node.text for node in renderer.destroyed], ["a"])
        self.assertIs(editor.bridge.handle_for("x"), renderer.nodes[0])

    def test_selected_suggestion_renders_label(self):
        renderer = InMemoryRenderer()
        editor = TagEditor(renderer, multiple=True, options=[("js", "JavaScript")])
        editor.select_suggestion("JavaScript")
        self.assertEqual(renderer.values, ["js"])
        self.assertEqual(renderer.texts, ["JavaScript"])


class TestStructureToStore(unittest.TestCase):
    def setUp(self):
        self.renderer = InMemoryRenderer.from_values("a", "b")
        self.form = InMemoryForm()
        self.editor = TagEditor(self.renderer, self.form, name="tags", multiple=True)
        self.events = _record(self.editor)

    def test_appended_node(self):
        self.renderer.append(value="x", text="Ex")
        self.assertEqual(self.editor.tags, ["a", "b", "x"])
        self.assertEqual(self.editor.labels, ["a", "b", "Ex"])
        self.assertEqual(self.editor.cursor.position, 3)
        self.assertEqual(self.events, [("change", ["a", "b", "x"])])
        self.assertEqual(self.form.values, ["a", "b", "x"])

    def test_removed_node(self):
        self.renderer.remove(self.renderer.nodes[0])
        self.assertEqual(self.editor.tags, ["b"])
        self.assertEqual(self.events, [("change", ["b"])])

    def test_value_and_text_edits(self):
        self.renderer.set_value(self.renderer.nodes[0], "alpha")
        self.assertEqual(self.editor.tags, ["alpha", "b"])

        node = self.renderer.append(text="plain")
        self.renderer.set_text(node, "renamed")
        self.assertEqual(self.editor.tags, ["alpha", "b", "renamed"])

    def test_replace_all(self):
        self.renderer.replace_all([TagNode(value="p", text="P"), TagNode(value="q", text="Q")])
        self.assertEqual(self.editor.tags, ["p", "q"])
        self.assertEqual(self.editor.labels, ["P", "Q"])

    def test_batched_edits_fire_one_change(self):
        with self.renderer.batch():
            self.renderer.append(value="c", text="c")
            self.renderer.append(value="d", text="d")
            self.renderer.remove(self.renderer.nodes[0])
        self.assertEqual(self.editor.tags, ["b", "c", "d"])
        self.assertEqual(self.events, [("change", ["b", "c", "d"])])

    def test_duplicate_nodes_are_dropped(self):
        self.renderer.append(value="a", text="again")
        self.assertEqual(self.editor.tags, ["a", "b"])
        self.assertEqual(self.renderer.values, ["a", "b"])
        self.assertEqual(self.events, [])

    def test_malformed_node_contributes_empty_value(self):
        self.renderer.append(value=None, text="")
        self.assertEqual(self.editor.tags, ["a", "b", ""])
        self.assertEqual(self.form.values, ["a", "b", ""])

    def test_store_edits_after_rebuild_use_new_handles(self):
        self.renderer.replace_all([TagNode(value="p", text="P")])
        self.editor.remove("p")
        self.assertEqual(self.renderer.nodes, [])
        self.assertEqual(self.editor.tags, [])

    def test_disconnect_stops_observation(self):
        self.editor.disconnect()
        self.assertFalse(self.editor.connected)
        self.assertEqual(self.renderer.listener_count, 0)
        self.renderer.append(value="late", text="late")
        self.assertEqual(self.editor.tags, ["a", "b"])

        self.editor.connect()
        self.assertEqual(self.editor.tags, ["a", "b", "late"])
        self.assertEqual(self.renderer.listener_count, 1)


def test_single_mode_drops_extra_external_nodes():
    renderer = InMemoryRenderer.from_values("first")
    editor = TagEditor(renderer)
    events = _record(editor)
    renderer.append(value="second", text="second")
    assert editor.tags == ["first"]
    assert renderer.values == ["first"]
    assert events == []


def test_switching_to_single_mode_keeps_first():
    renderer = InMemoryRenderer()
    editor = TagEditor(renderer, multiple=True)
    editor.add("a,b,c")
    events = _record(editor)
    editor.set_multiple(False)
    assert editor.multiple is False
    assert editor.tags == ["a"]
    assert renderer.values == ["a"]
    assert events == [("change", ["a"])]

    editor.add("z")
    assert editor.tags == ["a"]
    editor.set_multiple(True)
    editor.add("z")
    assert editor.tags == ["a", "z"]


class WrongHandleRenderer(InMemoryRenderer):
    def create_node(self, value, label, index=None):
        super().create_node(value, label, index)
        return "not-a-node"


class NoHandleRenderer(InMemoryRenderer):
    def create_node(self, value, label, index=None):
        super().create_node(value, label, index)
        return None


@pytest.mark.parametrize("renderer_cls", [WrongHandleRenderer, NoHandleRenderer])
def test_wrong_handle_kind_is_fatal(renderer_cls):
    editor = TagEditor(renderer_cls(), multiple=True)
    with pytest.raises(CollaboratorContractError):
        editor.add("a")


def test_destroying_unknown_handle_is_fatal():
    renderer = InMemoryRenderer()
    with pytest.raises(CollaboratorContractError):
        renderer.destroy_node(TagNode(value="ghost"))
