import unittest

from heartcheck.models.assessment import RiskLevel
from heartcheck.services.record_assembler import assemble_record
from heartcheck.services.risk_engine import evaluate_risk
from tests.factories import WORST_CASE, make_input, utc


class TestRecordAssembler(unittest.TestCase):

    def setUp(self):
        self.health_input = make_input(WORST_CASE, name="Sam", rbc=4.8, wbc=6.1)
        self.assessment = evaluate_risk(self.health_input)
        self.record = assemble_record(
            self.health_input, self.assessment, now=utc(2024, 3, 1, 10, 0, 0, 123456)
        )

    def test_scores_and_inputs_carried(self):
        self.assertEqual(self.record.score, 60)
        self.assertEqual(self.record.level, RiskLevel.HIGH)
        self.assertEqual(self.record.bmi, 31.14)
        self.assertEqual(self.record.height_cm, 170)
        self.assertEqual(self.record.rbc, 4.8)
        self.assertEqual(self.record.cholesterol, 260)

    def test_client_timestamp(self):
        self.assertEqual(self.record.timestamp, "2024-03-01T10:00:00.123Z")
        self.assertIsNone(self.record.created_at)
        self.assertIsNone(self.record.id)

    def test_document_keys(self):
        doc = self.record.to_document()
        for key in ("heightCm", "junkFood", "familyHistory", "highBp", "score", "level", "timestamp"):
            self.assertIn(key, doc)
        self.assertEqual(doc["level"], "High")
        self.assertNotIn("id", doc)
        self.assertNotIn("createdAt", doc)
        self.assertFalse(any("simulated" in key.lower() for key in doc))

    def test_record_is_immutable(self):
        with self.assertRaises(Exception):
            self.record.score = 1

    def test_blank_name_stored_as_none(self):
        record = assemble_record(make_input(name=""), evaluate_risk(make_input()))
        self.assertIsNone(record.name)
        self.assertTrue(record.timestamp.endswith("Z"))


if __name__ == "__main__":
    unittest.main()
