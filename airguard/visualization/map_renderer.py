"""Map renderer for visualizing zones and flight paths."""
from typing import Optional, Sequence
import folium
from airguard.config import get_settings
from airguard.domain.coordinate import Coordinate
from airguard.domain.zone import Zone, ZoneSeverity
from airguard.risk.risk_evaluator import RiskAssessment, format_number

SEVERITY_COLORS = {
    ZoneSeverity.CRITICAL: "red",
    ZoneSeverity.RESTRICTED: "yellow",
    ZoneSeverity.CONTROLLED: "blue",
}


class MapRenderer:
    """Renders zones and paths on interactive maps."""

    def __init__(self, center_lat: Optional[float] = None, center_lng: Optional[float] = None,
                 zoom_start: int = 11):
        """Initialize map renderer.

        Args:
            center_lat: Center latitude (default: map center setting)
            center_lng: Center longitude (default: map center setting)
            zoom_start: Initial zoom level
        """
        settings = get_settings()
        self.center_lat = center_lat if center_lat is not None else settings.map_center_lat
        self.center_lng = center_lng if center_lng is not None else settings.map_center_lng
        self.zoom_start = zoom_start

    def render(self, path: Sequence[Coordinate], zones: Sequence[Zone],
               assessment: Optional[RiskAssessment] = None,
               color: str = "#22d3ee") -> folium.Map:
        """Render zones and a flight path.

        Args:
            path: Ordered waypoints
            zones: Zones to draw
            assessment: Optional risk shown in the path popup
            color: Path color

        Returns:
            Folium Map object
        """
        if path:
            center = [sum(p.lat for p in path) / len(path), sum(p.lng for p in path) / len(path)]
        else:
            center = [self.center_lat, self.center_lng]

        m = folium.Map(location=center, zoom_start=self.zoom_start)

        for zone in zones:
            self._add_zone(m, zone)

        if len(path) > 1:
            popup = "Flight path"
            if assessment is not None:
                popup = f"Risk {format_number(assessment.score)}%<br>" + "<br>".join(assessment.violations)
            folium.PolyLine(
                [[p.lat, p.lng] for p in path],
                color=color,
                weight=3,
                opacity=0.8,
                popup=folium.Popup(popup, max_width=300)
            ).add_to(m)

        for idx, point in enumerate(path):
            if idx == 0:
                icon_color, label = "green", "START"
            elif idx == len(path) - 1:
                icon_color, label = "red", "FINISH"
            else:
                icon_color, label = "blue", f"WP {idx}"
            folium.Marker(
                location=[point.lat, point.lng],
                tooltip=label,
                popup=f"{label}<br>Lat: {point.lat:.6f}<br>Lng: {point.lng:.6f}",
                icon=folium.Icon(color=icon_color)
            ).add_to(m)

        return m

    def _add_zone(self, m: folium.Map, zone: Zone):
        if zone.is_degenerate:
            return
        color = SEVERITY_COLORS[zone.severity]
        folium.Polygon(
            locations=[[c.lat, c.lng] for c in zone.boundary],
            color=color,
            fill=True,
            fill_color=color,
            fill_opacity=0.2,
            weight=2,
            tooltip=f"{zone.name} ({zone.severity.value})"
        ).add_to(m)
