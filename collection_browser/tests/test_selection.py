import unittest

from ..core.selection import SelectionReconciler, reconcile
from .helpers import artworks


class TestReconcile(unittest.TestCase):
    def test_keeps_off_page_ids_and_replaces_visible_part(self):
        result = reconcile({1, 2, 7, 8}, visible_ids=[1, 2, 3], desired_visible=[3])
        self.assertEqual(result, frozenset({3, 7, 8}))

    def test_empty_desired_removes_only_visible_ids(self):
        result = reconcile({1, 7}, visible_ids=[1, 2], desired_visible=[])
        self.assertEqual(result, frozenset({7}))

    def test_does_not_mutate_input(self):
        selected = {1, 2}
        reconcile(selected, visible_ids=[1, 2], desired_visible=[])
        self.assertEqual(selected, {1, 2})


class TestSelectionReconciler(unittest.TestCase):
    def setUp(self):
        self.page1 = artworks(1, 2, 3)
        self.page2 = artworks(4, 5, 6)
        self.selection = SelectionReconciler()
        self.selection.set_visible(self.page1)

    def test_starts_empty(self):
        self.assertEqual(self.selection.snapshot, frozenset())
        self.assertFalse(self.selection.all_selected)
        self.assertFalse(self.selection.some_visible_selected)

    def test_toggle_one_flips_membership(self):
        item = self.page1[1]
        self.selection.toggle_one(item)
        self.assertTrue(self.selection.is_selected(item))
        self.assertIn(2, self.selection)

        self.selection.toggle_one(item)
        self.assertFalse(self.selection.is_selected(item))

    def test_toggle_all_selects_page_when_partially_selected(self):
        self.selection.toggle_one(self.page1[0])
        self.assertTrue(self.selection.some_visible_selected)

        self.selection.toggle_all_visible()

        self.assertTrue(self.selection.all_selected)
        self.assertFalse(self.selection.some_visible_selected)
        self.assertEqual(self.selection.snapshot, frozenset({1, 2, 3}))

    def test_toggle_all_deselects_page_when_fully_selected(self):
        self.selection.toggle_all_visible()
        self.selection.toggle_all_visible()
        self.assertEqual(self.selection.snapshot, frozenset())

    def test_toggle_all_twice_restores_original_set(self):
        # off-page selection plus a partial page
        self.selection.set_visible(self.page2)
        self.selection.toggle_one(self.page2[2])
        self.selection.set_visible(self.page1)
        self.selection.toggle_one(self.page1[0])
        self.selection.toggle_all_visible()
        self.selection.toggle_all_visible()
        before = self.selection.snapshot

        self.selection.toggle_all_visible()
        self.selection.toggle_all_visible()

        self.assertEqual(self.selection.snapshot, before)

    def test_toggle_all_on_empty_page_changes_nothing(self):
        self.selection.toggle_one(self.page1[0])
        self.selection.set_visible(())

        self.assertFalse(self.selection.all_selected)
        self.selection.toggle_all_visible()

        self.assertEqual(self.selection.snapshot, frozenset({1}))

    def test_select_first_n_replaces_visible_selection(self):
        self.selection.toggle_one(self.page1[2])
        self.selection.select_first_n(2)
        self.assertEqual(self.selection.snapshot, frozenset({1, 2}))

    def test_select_first_n_larger_than_page_selects_everything_visible(self):
        self.selection.select_first_n(50)
        self.assertTrue(self.selection.all_selected)
        self.assertEqual(self.selection.snapshot, frozenset({1, 2, 3}))

    def test_select_first_n_below_one_is_clamped_to_one(self):
        for n in (0, -4):
            with self.subTest(n=n):
                self.selection.clear_all()
                self.selection.select_first_n(n)
                self.assertEqual(self.selection.snapshot, frozenset({1}))

    def test_select_first_n_keeps_off_page_ids(self):
        self.selection.set_visible(self.page2)
        self.selection.toggle_one(self.page2[0])
        self.selection.set_visible(self.page1)

        self.selection.select_first_n(1)

        self.assertEqual(self.selection.snapshot, frozenset({1, 4}))

    def test_select_first_n_without_visible_items_is_noop(self):
        self.selection.set_visible(())
        self.selection.select_first_n(3)
        self.assertEqual(self.selection.count, 0)

    def test_clear_all_drops_every_page(self):
        self.selection.toggle_one(self.page1[0])
        self.selection.set_visible(self.page2)
        self.selection.toggle_one(self.page2[0])

        self.selection.clear_all()

        self.assertEqual(len(self.selection), 0)

    def test_selection_survives_page_round_trip(self):
        self.selection.toggle_one(self.page1[1])

        self.selection.set_visible(self.page2)
        self.selection.toggle_all_visible()
        self.selection.select_first_n(1)
        self.selection.toggle_one(self.page2[0])
        self.selection.set_visible(self.page1)

        self.assertTrue(self.selection.is_selected(self.page1[1]))
        self.assertEqual([a.id for a in self.selection.selected_on_page], [2])

    def test_set_visible_does_not_change_selection(self):
        self.selection.toggle_all_visible()
        self.selection.set_visible(self.page2)

        self.assertEqual(self.selection.snapshot, frozenset({1, 2, 3}))
        self.assertEqual(self.selection.selected_on_page, [])

    def test_custom_key_function(self):
        rows = [{"uid": "a"}, {"uid": "b"}]
        selection = SelectionReconciler(key=lambda row: row["uid"])
        selection.set_visible(rows)

        selection.toggle_all_visible()

        self.assertEqual(selection.snapshot, frozenset({"a", "b"}))

    def test_snapshot_is_detached(self):
        snap = self.selection.snapshot
        self.selection.toggle_one(self.page1[0])
        self.assertEqual(snap, frozenset())


if __name__ == "__main__":
    unittest.main()
