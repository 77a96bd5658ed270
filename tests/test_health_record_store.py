import unittest
from unittest.mock import MagicMock

from firebase_admin import firestore

from heartcheck.core.errors import PersistenceError
from heartcheck.services.health_record_store import HealthRecordStore
from tests.factories import make_record, utc


def _doc(doc_id, data):
    doc = MagicMock()
    doc.id = doc_id
    doc.to_dict.return_value = data
    return doc


class TestHealthRecordStore(unittest.TestCase):

    def setUp(self):
        self.db = MagicMock()
        self.ref = (
            self.db.collection.return_value
            .document.return_value
            .collection.return_value
            .document.return_value
            .collection.return_value
        )
        self.store = HealthRecordStore(self.db, app_id="test-app")

    def test_save_writes_under_user_path(self):
        doc_ref = MagicMock()
        doc_ref.id = "rec-1"
        self.ref.add.return_value = (None, doc_ref)

        record_id = self.store.save("uid-1", make_record(25))

        self.assertEqual(record_id, "rec-1")
        self.db.collection.assert_called_with("artifacts")
        self.db.collection.return_value.document.assert_called_with("test-app")
        self.db.collection.return_value.document.return_value.collection.return_value \
            .document.assert_called_with("uid-1")
        payload = self.ref.add.call_args[0][0]
        self.assertIs(payload["createdAt"], firestore.SERVER_TIMESTAMP)
        self.assertEqual(payload["score"], 25)
        self.assertEqual(payload["level"], "Moderate")
        self.assertNotIn("id", payload)

    def test_save_failure_raises_persistence_error(self):
        self.ref.add.side_effect = RuntimeError("offline")
        with self.assertRaises(PersistenceError) as ctx:
            self.store.save("uid-1", make_record(25))
        self.assertEqual(ctx.exception.operation, "save")

    def test_list_orders_newest_first(self):
        newer = make_record(30).to_document()
        newer["createdAt"] = utc(2024, 3, 2)
        older = make_record(20).to_document()
        older["createdAt"] = None
        query = self.ref.order_by.return_value
        query.stream.return_value = [_doc("b", newer), _doc("a", older)]

        records = self.store.list_ordered_by_time_desc("uid-1")

        self.ref.order_by.assert_called_once_with(
            "createdAt", direction=firestore.Query.DESCENDING
        )
        self.assertEqual([r.id for r in records], ["b", "a"])
        self.assertEqual(records[0].created_at, utc(2024, 3, 2))
        # Missing server time falls back to the client timestamp
        self.assertEqual(records[1].recorded_at, utc(2024, 3, 1, 10, 0))

    def test_list_with_limit(self):
        limited = self.ref.order_by.return_value.limit.return_value
        limited.stream.return_value = []
        self.assertEqual(self.store.list_ordered_by_time_desc("uid-1", limit=2), [])
        self.ref.order_by.return_value.limit.assert_called_once_with(2)

    def test_list_failure(self):
        self.ref.order_by.return_value.stream.side_effect = RuntimeError("denied")
        with self.assertRaises(PersistenceError) as ctx:
            self.store.list_ordered_by_time_desc("uid-1")
        self.assertEqual(ctx.exception.operation, "list")

    def test_delete_all_returns_count(self):
        docs = [_doc(str(i), {}) for i in range(3)]
        self.ref.stream.return_value = docs
        self.assertEqual(self.store.delete_all("uid-1"), 3)
        for d in docs:
            d.reference.delete.assert_called_once_with()

    def test_delete_failure(self):
        self.ref.stream.side_effect = RuntimeError("boom")
        with self.assertRaises(PersistenceError) as ctx:
            self.store.delete_all("uid-1")
        self.assertEqual(ctx.exception.operation, "delete")


    def test_legacy_fractional_age_is_read(self):
        legacy = make_record(22).to_document()
        legacy["age"] = 40.5
        self.ref.order_by.return_value.stream.return_value = [_doc("old", legacy)]

        records = self.store.list_ordered_by_time_desc("uid-1")

        self.assertEqual(len(records), 1)
        self.assertEqual(records[0].age, 40)

    def test_unreadable_document_is_skipped(self):
        good = make_record(30).to_document()
        broken = make_record(20).to_document()
        del broken["score"]
        self.ref.order_by.return_value.stream.return_value = [
            _doc("good", good), _doc("broken", broken),
        ]

        with self.assertLogs("heartcheck.services.health_record_store", level="WARNING") as logs:
            records = self.store.list_ordered_by_time_desc("uid-1")

        self.assertEqual([r.id for r in records], ["good"])
        self.assertIn("broken", logs.output[0])


if __name__ == "__main__":
    unittest.main()
