"""Tests for map rendering."""
import unittest
import folium
from airguard.domain.coordinate import Coordinate
from airguard.domain.zone import Zone, ZoneSeverity
from airguard.risk.risk_evaluator import RiskAssessment
from airguard.visualization.map_renderer import MapRenderer, SEVERITY_COLORS
from airguard.zones.registry import DEFAULT_ZONES


class TestMapRenderer(unittest.TestCase):
    """Test folium map output."""

    def setUp(self):
        """Set up renderer."""
        self.renderer = MapRenderer(center_lat=13.0, center_lng=77.6)
        self.path = [Coordinate(13.15, 77.65), Coordinate(13.18, 77.68), Coordinate(13.21, 77.72)]

    def test_render_zones_and_path(self):
        """Test zones, path and waypoint labels end up in the page."""
        assessment = RiskAssessment(score=100.0, violations=["NFZ_BREACH: test"])
        m = self.renderer.render(self.path, DEFAULT_ZONES, assessment)
        html = m.get_root().render()

        self.assertIsInstance(m, folium.Map)
        for zone in DEFAULT_ZONES:
            self.assertIn(zone.name, html)
        self.assertIn("START", html)
        self.assertIn("WP 1", html)
        self.assertIn("FINISH", html)
        self.assertIn("Risk 100%", html)

    def test_zone_colors_by_severity(self):
        """Test critical, restricted and controlled zones are red, yellow and blue."""
        self.assertEqual(SEVERITY_COLORS[ZoneSeverity.CRITICAL], "red")
        self.assertEqual(SEVERITY_COLORS[ZoneSeverity.RESTRICTED], "yellow")
        self.assertEqual(SEVERITY_COLORS[ZoneSeverity.CONTROLLED], "blue")
        html = self.renderer.render([], DEFAULT_ZONES[1:2]).get_root().render()
        self.assertIn('"yellow"', html)

    def test_empty_path_uses_default_center(self):
        """Test an empty path renders zones only, centered on the configured point."""
        m = self.renderer.render([], DEFAULT_ZONES)
        self.assertEqual(m.location, [13.0, 77.6])
        self.assertNotIn("FINISH", m.get_root().render())

    def test_degenerate_zone_skipped(self):
        """Test zones without area are not drawn."""
        zone = Zone("d", "Ghost Strip", ZoneSeverity.CRITICAL,
                    (Coordinate(10.0, 10.0), Coordinate(10.1, 10.1)))
        html = self.renderer.render([], [zone]).get_root().render()
        self.assertNotIn("Ghost Strip", html)


if __name__ == '__main__':
    unittest.main()
