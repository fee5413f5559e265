"""Tests for the mission store."""
import unittest
from datetime import datetime
from airguard.domain.coordinate import Coordinate
from airguard.domain.drone import DroneClass, DroneSettings
from airguard.domain.mission import SavedMission
from airguard.persistence import db as db_module
from airguard.persistence.db import init_db, close_db
from airguard.persistence.repositories import MissionRepository


class TestMissionRepository(unittest.TestCase):
    """Test saved mission CRUD against an in-memory database."""

    def setUp(self):
        """Set up an in-memory store."""
        init_db("sqlite://")
        self.session = db_module.SessionLocal()
        self.repo = MissionRepository(self.session)

    def tearDown(self):
        """Close the store."""
        self.session.close()
        close_db()

    def _mission(self, name: str, day: int) -> SavedMission:
        return SavedMission(
            name=name,
            path=[Coordinate(12.9, 77.5), Coordinate(12.95, 77.55)],
            settings=DroneSettings(altitude=60.0, model=DroneClass.HEAVY),
            risk_score=12.5,
            timestamp=datetime(2024, 1, day, 9, 0)
        )

    def test_create_and_get(self):
        """Test a stored mission comes back with the same content."""
        mission = self.repo.create(self._mission("Survey", 1))
        loaded = self.repo.get(mission.id)

        self.assertIsNotNone(loaded)
        self.assertEqual(loaded.name, "Survey")
        self.assertEqual(loaded.path, mission.path)
        self.assertEqual(loaded.settings, mission.settings)
        self.assertEqual(loaded.risk_score, 12.5)
        self.assertEqual(loaded.timestamp, datetime(2024, 1, 1, 9, 0))

    def test_get_missing(self):
        """Test unknown ids return None."""
        self.assertIsNone(self.repo.get("missing"))

    def test_list_newest_first(self):
        """Test missions are listed newest first."""
        self.repo.create(self._mission("Old", 1))
        self.repo.create(self._mission("New", 3))
        self.repo.create(self._mission("Middle", 2))

        self.assertEqual([m.name for m in self.repo.list()], ["New", "Middle", "Old"])
        self.assertEqual(self.repo.count(), 3)

    def test_delete(self):
        """Test deleting a mission."""
        mission = self.repo.create(self._mission("Survey", 1))
        self.assertTrue(self.repo.delete(mission.id))
        self.assertIsNone(self.repo.get(mission.id))
        self.assertFalse(self.repo.delete(mission.id))
        self.assertEqual(self.repo.count(), 0)


if __name__ == '__main__':
    unittest.main()
