"""Tests for the shortcut registry."""

from dataclasses import FrozenInstanceError

import pytest

from bk.models.shortcuts import Category, ShortcutEntry, build_registry


class TestShortcutEntry:

    def test_shortcut_creation(self):
        shortcut = ShortcutEntry("Ctrl+a", "Go to beginning of line")
        assert shortcut.trigger == "Ctrl+a"
        assert shortcut.description == "Go to beginning of line"

    def test_entries_are_immutable(self):
        shortcut = ShortcutEntry("Ctrl+a", "Go to beginning of line")
        with pytest.raises(FrozenInstanceError):
            shortcut.trigger = "Ctrl+e"

    def test_equality_is_by_value(self):
        assert ShortcutEntry("!!", "Repeat last command") == ShortcutEntry(
            "!!", "Repeat last command"
        )


class TestCategory:

    def test_declaration_order_is_display_order(self):
        assert list(Category) == [
            Category.MOVEMENT,
            Category.EDIT,
            Category.RECALL,
            Category.PROCESS,
        ]

    def test_lookup_by_flag_name(self):
        assert Category("movement") is Category.MOVEMENT
        assert Category("recall") is Category.RECALL

    def test_title(self):
        assert Category.RECALL.title == "RECALL"
        assert Category.PROCESS.title == "PROCESS"


class TestRegistry:

    def test_all_categories_present(self):
        registry = build_registry()
        assert list(registry) == list(Category)

    @pytest.mark.parametrize("category", list(Category))
    def test_every_category_has_entries(self, category):
        assert len(build_registry()[category]) > 0

    def test_entry_counts(self):
        registry = build_registry()
        assert len(registry[Category.MOVEMENT]) == 7
        assert len(registry[Category.EDIT]) == 18
        assert len(registry[Category.RECALL]) == 17
        assert len(registry[Category.PROCESS]) == 6

    def test_declaration_order_preserved(self):
        registry = build_registry()
        movement = [entry.trigger for entry in registry[Category.MOVEMENT]]
        assert movement == ["Ctrl+a", "Ctrl+e", "Ctrl+f", "Ctrl+b", "Alt+f", "Alt+b", "Ctrl+xx"]
        assert registry[Category.EDIT][-1].trigger == "Tab"
        assert registry[Category.RECALL][0].trigger == "Ctrl+r"
        assert registry[Category.RECALL][-1].trigger == "^abc^def"
        assert registry[Category.PROCESS][-1].trigger == "Ctrl+z"

    def test_deterministic(self):
        assert build_registry() == build_registry()

    def test_matches_category_entries(self):
        for category, entries in build_registry().items():
            assert entries == category.entries

    def test_same_trigger_in_two_categories(self):
        # Ctrl+l clears the screen in both edit and process
        edit = {entry.trigger for entry in Category.EDIT.entries}
        process = {entry.trigger for entry in Category.PROCESS.entries}
        assert "Ctrl+l" in edit & process
