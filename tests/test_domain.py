"""Tests for domain models."""
import math
import unittest
from datetime import datetime
from airguard.domain.coordinate import Coordinate
from airguard.domain.drone import DroneClass, DroneSettings
from airguard.domain.flight_path import FlightPath
from airguard.domain.mission import SavedMission


class TestCoordinate(unittest.TestCase):
    """Test coordinate validation."""

    def test_valid_coordinate(self):
        """Test a regular coordinate."""
        c = Coordinate(12.97, 77.59)
        self.assertEqual(c.to_lnglat(), (77.59, 12.97))
        self.assertEqual(Coordinate.from_dict(c.to_dict()), c)

    def test_out_of_range(self):
        """Test latitude and longitude bounds."""
        with self.assertRaises(ValueError):
            Coordinate(91.0, 0.0)
        with self.assertRaises(ValueError):
            Coordinate(0.0, -180.5)

    def test_non_finite(self):
        """Test NaN and infinity are rejected."""
        with self.assertRaises(ValueError):
            Coordinate(math.nan, 0.0)
        with self.assertRaises(ValueError):
            Coordinate(0.0, math.inf)


class TestDroneSettings(unittest.TestCase):
    """Test drone settings."""

    def test_defaults(self):
        """Test default altitude and model."""
        settings = DroneSettings()
        self.assertEqual(settings.altitude, 40.0)
        self.assertEqual(settings.model, DroneClass.LIGHT)
        self.assertEqual(settings.nominal_speed_ms, 80.0)

    def test_model_parsing(self):
        """Test the model may be given by value or by name."""
        self.assertEqual(DroneSettings(model="Micro (>2kg)").model, DroneClass.HEAVY)
        self.assertEqual(DroneSettings(model="heavy").model, DroneClass.HEAVY)
        self.assertEqual(DroneSettings(model="LIGHT").model, DroneClass.LIGHT)
        with self.assertRaises(ValueError):
            DroneSettings(model="Jumbo")

    def test_invalid_altitude(self):
        """Test negative and non-finite altitudes are rejected."""
        with self.assertRaises(ValueError):
            DroneSettings(altitude=-1.0)
        with self.assertRaises(ValueError):
            DroneSettings(altitude=math.inf)

    def test_updated_returns_copy(self):
        """Test partial updates leave the original untouched."""
        settings = DroneSettings()
        higher = settings.updated(altitude=150.0)
        self.assertEqual(higher.altitude, 150.0)
        self.assertEqual(higher.model, DroneClass.LIGHT)
        self.assertEqual(settings.altitude, 40.0)

    def test_dict_round_trip(self):
        """Test settings serialization."""
        settings = DroneSettings(altitude=90.0, model=DroneClass.HEAVY)
        data = settings.to_dict()
        self.assertEqual(data, {"altitude": 90.0, "model": "Micro (>2kg)"})
        self.assertEqual(DroneSettings.from_dict(data), settings)


class TestFlightPath(unittest.TestCase):
    """Test flight path editing."""

    def setUp(self):
        """Set up a two-point path."""
        self.path = FlightPath([Coordinate(0.0, 0.0), Coordinate(0.0, 1.0)])

    def test_sequence_protocol(self):
        """Test length, iteration and indexing."""
        self.assertEqual(len(self.path), 2)
        self.assertEqual(list(self.path), self.path.points)
        self.assertEqual(self.path[1], Coordinate(0.0, 1.0))
        self.assertTrue(self.path.is_flyable_shape)

    def test_replace(self):
        """Test replacing in and out of range."""
        self.assertTrue(self.path.replace(0, Coordinate(1.0, 1.0)))
        self.assertEqual(self.path[0], Coordinate(1.0, 1.0))
        self.assertFalse(self.path.replace(5, Coordinate(2.0, 2.0)))
        self.assertFalse(self.path.replace(-1, Coordinate(2.0, 2.0)))
        self.assertEqual(len(self.path), 2)

    def test_truncate_and_clear(self):
        """Test removing points."""
        self.assertTrue(self.path.truncate_last())
        self.assertFalse(self.path.is_flyable_shape)
        self.path.clear()
        self.assertEqual(len(self.path), 0)
        self.assertFalse(self.path.truncate_last())

    def test_length(self):
        """Test path length in kilometers."""
        self.assertAlmostEqual(self.path.length_km(), 111.195, places=2)
        self.assertEqual(FlightPath().length_km(), 0.0)

    def test_list_round_trip(self):
        """Test path serialization."""
        self.assertEqual(FlightPath.from_list(self.path.to_list()), self.path)


class TestSavedMission(unittest.TestCase):
    """Test saved mission serialization."""

    def test_defaults(self):
        """Test id and timestamp are generated."""
        mission = SavedMission(name="Route 1")
        self.assertTrue(mission.id)
        self.assertIsInstance(mission.timestamp, datetime)
        self.assertNotEqual(mission.id, SavedMission(name="Route 2").id)

    def test_dict_round_trip(self):
        """Test mission serialization keeps every field."""
        mission = SavedMission(
            name="Survey",
            path=[Coordinate(12.9, 77.5), Coordinate(12.95, 77.55)],
            settings=DroneSettings(altitude=100.0),
            risk_score=25.5,
            timestamp=datetime(2024, 5, 1, 10, 30)
        )
        restored = SavedMission.from_dict(mission.to_dict())
        self.assertEqual(restored, mission)
        self.assertEqual(mission.to_dict()["timestamp"], "2024-05-01T10:30:00")


if __name__ == '__main__':
    unittest.main()
