"""Tests for auto-reroute out of critical zones."""
import unittest
from airguard.domain.coordinate import Coordinate
from airguard.domain.zone import Zone, ZoneSeverity
from airguard.risk.geodesy import bearing_deg, haversine_km
from airguard.risk.reroute import reroute, displace_from_zone
from airguard.zones.registry import DEFAULT_ZONES, create_box


class TestReroute(unittest.TestCase):
    """Test radial displacement of waypoints."""

    def setUp(self):
        """Set up a path with one waypoint inside the airport zone."""
        self.kia = DEFAULT_ZONES[0]
        self.before = Coordinate(13.15, 77.65)
        self.inside = Coordinate(13.21, 77.72)
        self.after = Coordinate(13.25, 77.80)
        self.path = [self.before, self.inside, self.after]

    def test_point_moved_to_clearance_radius(self):
        """Test an inside point ends up 0.1km from the centroid on the same bearing."""
        corrected = reroute(self.path, DEFAULT_ZONES)
        centroid = self.kia.centroid
        moved = corrected[1]

        self.assertNotEqual(moved, self.inside)
        self.assertAlmostEqual(haversine_km(centroid, moved), 0.1, places=6)
        self.assertAlmostEqual(bearing_deg(centroid, moved),
                               bearing_deg(centroid, self.inside), places=6)

    def test_outside_points_pass_through(self):
        """Test points outside critical zones are untouched."""
        corrected = reroute(self.path, DEFAULT_ZONES)
        self.assertEqual(corrected[0], self.before)
        self.assertEqual(corrected[2], self.after)

    def test_same_length_and_input_untouched(self):
        """Test the result has the same length and the input list is not mutated."""
        original = list(self.path)
        corrected = reroute(self.path, DEFAULT_ZONES)
        self.assertEqual(len(corrected), len(self.path))
        self.assertEqual(self.path, original)
        self.assertIsNot(corrected, self.path)

    def test_idempotent_outside_zones(self):
        """Test a path already clear of critical zones is returned unchanged."""
        path = [Coordinate(12.5, 77.0), Coordinate(12.51, 77.01), Coordinate(12.52, 77.0)]
        self.assertEqual(reroute(path, DEFAULT_ZONES), path)

    def test_non_critical_zones_ignored(self):
        """Test waypoints inside restricted or controlled zones are not moved."""
        path = [Coordinate(13.135, 77.61), Coordinate(12.97, 77.59)]
        self.assertEqual(reroute(path, DEFAULT_ZONES), path)

    def test_empty_registry(self):
        """Test an empty registry returns the path unchanged."""
        self.assertEqual(reroute(self.path, []), self.path)

    def test_single_point_not_corrected(self):
        """Test paths with fewer than 2 points are not corrected."""
        self.assertEqual(reroute([self.inside], DEFAULT_ZONES), [self.inside])

    def test_degenerate_zone_ignored(self):
        """Test a degenerate critical zone never contains a point."""
        zone = Zone("d", "Line", ZoneSeverity.CRITICAL,
                    (Coordinate(10.0, 10.0), Coordinate(10.1, 10.1)))
        path = [Coordinate(10.05, 10.05), Coordinate(10.0, 10.0)]
        self.assertEqual(reroute(path, [zone]), path)

    def test_boundary_point_is_inside(self):
        """Test a point on the zone boundary is corrected."""
        zone = Zone("b", "Box", ZoneSeverity.CRITICAL, create_box(10.0, 10.0, 0.02))
        on_edge = Coordinate(zone.boundary[0].lat, 10.0)
        corrected = reroute([on_edge, Coordinate(11.0, 11.0)], [zone])
        self.assertAlmostEqual(haversine_km(zone.centroid, corrected[0]), 0.1, places=6)

    def test_overlapping_zones_nearest_centroid_wins(self):
        """Test a point in two critical zones is displaced from the nearest centroid."""
        far = Zone("a", "Far", ZoneSeverity.CRITICAL, create_box(10.0, 10.0, 0.2))
        near = Zone("b", "Near", ZoneSeverity.CRITICAL, create_box(10.05, 10.05, 0.2))
        point = Coordinate(10.04, 10.04)
        path = [point, Coordinate(11.0, 11.0)]

        for zones in ([far, near], [near, far]):
            corrected = reroute(path, zones)
            self.assertAlmostEqual(haversine_km(near.centroid, corrected[0]), 0.1, places=6)

    def test_point_on_centroid_pushed_north(self):
        """Test a point exactly on the centroid is displaced due north."""
        zone = Zone("b", "Box", ZoneSeverity.CRITICAL, create_box(10.0, 10.0, 0.02))
        centroid = zone.centroid
        moved = displace_from_zone(centroid, zone)
        self.assertGreater(moved.lat, centroid.lat)
        self.assertAlmostEqual(moved.lng, centroid.lng, places=9)

    def test_missing_registry_is_an_error(self):
        """Test a None registry is rejected."""
        with self.assertRaises(ValueError):
            reroute(self.path, None)


if __name__ == '__main__':
    unittest.main()
