"""Advisory client that asks a hosted language model for flight advice."""
from dataclasses import dataclass, field
from typing import List, Optional, Sequence
import logging

import requests

from airguard.config import get_settings
from airguard.domain.coordinate import Coordinate
from airguard.domain.drone import DroneSettings
from airguard.domain.zone import Zone
from airguard.risk.geodesy import path_length_km
from airguard.risk.risk_evaluator import format_number
from airguard.weather.weather_provider import WeatherReport
from airguard.zones.registry import DEFAULT_ZONES, intersecting_zones

logger = logging.getLogger(__name__)

OFFLINE_MESSAGE = ("COMMAND_FAILURE: System offline. Provide authorization key "
                   "in settings to establish tactical link.")
AUTH_ERROR_MESSAGE = "AUTHENTICATION_ERROR: Provided API key is invalid or unauthorized."
COMMS_FAILURE_MESSAGE = "COMMS_FAILURE: Unable to reach base. Signal attenuated."
EMPTY_REPLY_MESSAGE = "Radio silence. Repeat message."


@dataclass
class AdvisoryContext:
    """Mission state handed to the model as prompt context."""
    risk_level: float
    violations: List[str] = field(default_factory=list)
    settings: DroneSettings = field(default_factory=DroneSettings)
    weather: Optional[WeatherReport] = None
    path: List[Coordinate] = field(default_factory=list)
    zones: Sequence[Zone] = DEFAULT_ZONES

    def airspace_summary(self) -> str:
        if len(self.path) < 2:
            return "Clear of restricted zones."
        crossed = intersecting_zones(self.path, self.zones)
        if not crossed:
            return "Clear of restricted zones."
        return "ZONE_INTERSECT: " + ", ".join(z.name for z in crossed)

    def build_system_instruction(self) -> str:
        """Render the system instruction for the model."""
        if self.weather:
            weather_line = (f"METAR: {self.weather.condition.value}, "
                            f"{format_number(self.weather.wind_speed)} km/h {self.weather.wind_direction}")
        else:
            weather_line = "METAR Unavailable"

        stats_line = ""
        if self.path:
            stats_line = f"- VECTORS: {path_length_km(self.path):.2f} km, {len(self.path)} WPTs"

        violations = ", ".join(self.violations) or "None"
        return "\n".join([
            "IDENTITY: You are Captain Arjun, a retired IAF Wing Commander and strict "
            "Safety Inspector for DGCA.",
            "TONE: Professional, blunt, high-discipline, military-grade jargon.",
            "",
            "CONTEXT:",
            f"- MISSION_RISK: {format_number(self.risk_level)}%",
            f"- VIOLATIONS: {violations}",
            f"- ASSET: {self.settings.model.value} @ {format_number(self.settings.altitude)}m",
            f"- ENVIRONMENT: {weather_line}",
            f"- TELEMETRY: {stats_line}",
            f"- AIRSPACE: {self.airspace_summary()}",
            "",
            "PROTOCOLS:",
            '1. Acknowledge user queries with "Roger" or "Negative".',
            "2. If Risk > 60%, prioritize safety reprimands.",
            '3. Refer to "Drone Rules 2021" specifically for Rule 31 (Zones) or Rule 33 (Altitude).',
            "4. Keep output concise (<120 words).",
        ])


class AdvisoryClient:
    """Client for the Gemini generateContent REST endpoint."""

    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None,
                 base_url: Optional[str] = None, timeout: float = 30.0,
                 temperature: float = 0.7):
        """Initialize advisory client.

        Args:
            api_key: API key (default: GEMINI_API_KEY from settings)
            model: Model name (default: from settings)
            base_url: API base URL (default: from settings)
            timeout: Request timeout in seconds
            temperature: Sampling temperature
        """
        settings = get_settings()
        self.api_key = api_key or settings.gemini_api_key
        self.model = model or settings.advisory_model
        self.base_url = (base_url or settings.advisory_base_url).rstrip("/")
        self.timeout = timeout
        self.temperature = temperature

    def ask(self, message: str, context: AdvisoryContext) -> str:
        """Ask for advice about the current mission.

        Never raises; failures are reported as fixed status strings.
        """
        if not self.api_key:
            return OFFLINE_MESSAGE

        payload = {
            "system_instruction": {"parts": [{"text": context.build_system_instruction()}]},
            "contents": [{"role": "user", "parts": [{"text": message}]}],
            "generationConfig": {"temperature": self.temperature},
        }
        url = f"{self.base_url}/models/{self.model}:generateContent"

        try:
            response = requests.post(url, params={"key": self.api_key}, json=payload,
                                     timeout=self.timeout)
            if response.status_code in (401, 403, 404):
                logger.warning("Advisory request rejected with HTTP %s", response.status_code)
                return AUTH_ERROR_MESSAGE
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.error("Advisory request failed: %s", e)
            return COMMS_FAILURE_MESSAGE

        return self._extract_text(data) or EMPTY_REPLY_MESSAGE

    @staticmethod
    def _extract_text(data: dict) -> str:
        candidates = data.get("candidates") or []
        if not candidates:
            return ""
        parts = (candidates[0].get("content") or {}).get("parts") or []
        return "".join(part.get("text", "") for part in parts).strip()
