"""Shared request/response models for the API."""
from pydantic import BaseModel, Field
from typing import List, Optional
from airguard.domain.coordinate import Coordinate
from airguard.domain.drone import DroneSettings, DroneClass
from airguard.weather.weather_provider import WeatherReport, WeatherCondition


class CoordinateDTO(BaseModel):
    lat: float = Field(ge=-90, le=90, allow_inf_nan=False)
    lng: float = Field(ge=-180, le=180, allow_inf_nan=False)

    def to_domain(self) -> Coordinate:
        return Coordinate(lat=self.lat, lng=self.lng)


class DroneSettingsDTO(BaseModel):
    altitude: float = Field(default=40.0, ge=0, allow_inf_nan=False)
    model: DroneClass = DroneClass.LIGHT

    def to_domain(self) -> DroneSettings:
        return DroneSettings(altitude=self.altitude, model=self.model)


class WeatherDTO(BaseModel):
    temperature: float = 22.0
    wind_speed: float = Field(ge=0, allow_inf_nan=False)
    wind_direction: str = "N"
    visibility: float = 10.0
    condition: WeatherCondition = WeatherCondition.CLEAR
    is_flyable: bool = True

    def to_domain(self) -> WeatherReport:
        return WeatherReport(
            temperature=self.temperature,
            wind_speed=self.wind_speed,
            wind_direction=self.wind_direction,
            visibility=self.visibility,
            condition=self.condition,
            is_flyable=self.is_flyable
        )


class PathRequest(BaseModel):
    path: List[CoordinateDTO] = Field(default_factory=list)
    settings: DroneSettingsDTO = Field(default_factory=DroneSettingsDTO)
    weather: Optional[WeatherDTO] = None

    def domain_path(self) -> List[Coordinate]:
        return [p.to_domain() for p in self.path]


class AssessmentResponse(BaseModel):
    score: float
    violations: List[str]
