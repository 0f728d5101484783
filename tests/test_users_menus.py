# -*- coding: utf-8 -*-

from __future__ import annotations

import json
import unittest

from workout_tracker.errors import NotFoundError, ValidationError
from workout_tracker.menus.models import MenusReplaceRequest, MenuTabPatchRequest
from workout_tracker.menus.storage import MenuManager
from workout_tracker.store import MemoryDocumentStore
from workout_tracker.users.storage import UserRegistryManager

BENCH = {
    "name": "Bench",
    "body": "Chest",
    "repRange": "8-12",
    "records": [{"date": "2024-02-08", "sets": [{"kg": 60, "reps": 8}, {"kg": "", "reps": ""}]}],
}


class TestUserRegistry(unittest.TestCase):
    def setUp(self) -> None:
        self.store = MemoryDocumentStore()
        self.registry = UserRegistryManager(self.store, default_users=["WAKASA", "TEZUKA"], default_current="WAKASA")

    def test_defaults_when_nothing_stored(self) -> None:
        self.assertEqual(self.registry.list_users(), {"users": ["WAKASA", "TEZUKA"], "current": "WAKASA"})

    def test_register_normalizes_and_appends(self) -> None:
        data = self.registry.register_user("  sato ")
        self.assertEqual(data["users"], ["WAKASA", "TEZUKA", "SATO"])
        self.assertEqual(self.registry.list_users()["users"], ["WAKASA", "TEZUKA", "SATO"])

    def test_register_is_idempotent_case_insensitive(self) -> None:
        self.registry.register_user("Sato")
        first = self.registry.list_users()
        self.registry.register_user("SATO")
        self.registry.register_user("sato")
        self.assertEqual(self.registry.list_users(), first)

    def test_register_keeps_insertion_order(self) -> None:
        for name in ("zed", "alpha", "mid"):
            self.registry.register_user(name)
        self.assertEqual(self.registry.list_users()["users"][-3:], ["ZED", "ALPHA", "MID"])

    def test_empty_name_rejected(self) -> None:
        for name in (None, "", "   "):
            with self.assertRaises(ValidationError):
                self.registry.register_user(name)
        self.assertNotIn("users", self.store.documents)


class TestMenuManager(unittest.TestCase):
    def setUp(self) -> None:
        self.store = MemoryDocumentStore()
        self.menus = MenuManager(self.store)

    def test_never_saved_is_none_not_empty(self) -> None:
        self.assertIsNone(self.menus.get_menus("GHOST"))
        self.menus.replace_menus("EMPTY", {})
        self.assertEqual(self.menus.get_menus("EMPTY"), {})

    def test_replace_then_get_round_trip(self) -> None:
        doc = {"Push": [BENCH], "Pull": []}
        self.menus.replace_menus("wakasa", doc)
        self.assertEqual(self.menus.get_menus("WAKASA"), doc)

    def test_similar_user_names_do_not_share_menus(self) -> None:
        self.menus.replace_menus("JOHN DOE", {"Push": []})
        self.assertIsNone(self.menus.get_menus("JOHN_DOE"))
        self.assertIsNone(self.menus.get_menus("JOHN/DOE"))
        self.menus.replace_menus("JOHN_DOE", {"Pull": []})
        self.assertEqual(self.menus.get_menus("JOHN DOE"), {"Push": []})
        self.assertEqual(self.menus.get_menus("john_doe"), {"Pull": []})

    def test_non_dict_document_cannot_be_patched(self) -> None:
        self.store.save("menus", "WAKASA", [])
        with self.assertRaises(NotFoundError):
            self.menus.patch_tab("WAKASA", "Push", [])
        self.assertEqual(self.store.load("menus", "WAKASA"), [])

    def test_replace_requires_document(self) -> None:
        with self.assertRaises(ValidationError):
            self.menus.replace_menus("WAKASA", None)

    def test_patch_changes_only_that_tab(self) -> None:
        self.menus.replace_menus("WAKASA", {"Push": [BENCH], "Pull": [{"name": "Row", "records": []}]})
        before = self.store.load("menus", "WAKASA")
        self.menus.patch_tab("WAKASA", "Push", [])
        after = self.menus.get_menus("WAKASA")
        self.assertEqual(after["Push"], [])
        self.assertEqual(json.dumps(after["Pull"]), json.dumps(before["Pull"]))

    def test_patch_can_add_a_new_tab(self) -> None:
        self.menus.replace_menus("WAKASA", {"Push": [BENCH]})
        self.menus.patch_tab("WAKASA", "Legs", [{"name": "Squat"}])
        self.assertEqual(list(self.menus.get_menus("WAKASA")), ["Push", "Legs"])

    def test_patch_without_document_is_not_found(self) -> None:
        with self.assertRaises(NotFoundError):
            self.menus.patch_tab("GHOST", "Push", [])
        self.assertIsNone(self.menus.get_menus("GHOST"))

    def test_patch_requires_exercises(self) -> None:
        self.menus.replace_menus("WAKASA", {"Push": [BENCH]})
        with self.assertRaises(ValidationError):
            self.menus.patch_tab("WAKASA", "Push", None)
        self.assertEqual(self.menus.get_menus("WAKASA"), {"Push": [BENCH]})


class TestMenuRequestModels(unittest.TestCase):
    def test_document_keeps_client_shape(self) -> None:
        exercise = dict(BENCH, memo="felt strong")
        request = MenusReplaceRequest.model_validate({"menus": {"Push": [exercise]}})
        self.assertEqual(request.to_document(), {"Push": [exercise]})

    def test_partial_exercise_is_not_padded(self) -> None:
        request = MenuTabPatchRequest.model_validate({"exercises": [{"name": "Dip"}]})
        self.assertEqual(request.to_document(), [{"name": "Dip"}])

    def test_missing_fields_map_to_none(self) -> None:
        self.assertIsNone(MenusReplaceRequest.model_validate({}).to_document())
        self.assertIsNone(MenuTabPatchRequest.model_validate({}).to_document())


if __name__ == "__main__":
    unittest.main()
