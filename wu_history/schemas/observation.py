from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class NormalizedObservation(BaseModel):
    """One observation in the fixed display schema.

    Quantities are finite floats or None. Serialize with ``by_alias=True`` to
    get the camelCase keys the UI and API use.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    when_iso: Optional[Any] = Field(default=None, alias="whenISO")
    when_madrid: str = Field(alias="whenMadrid")
    temp: Optional[float] = None
    dew: Optional[float] = None
    humidity: Optional[float] = None
    pres: Optional[float] = None
    wind: Optional[float] = None
    gust: Optional[float] = None
    dir_deg: Optional[float] = Field(default=None, alias="dirDeg")
    precip_rate: Optional[float] = Field(default=None, alias="precipRate")
    precip_total: Optional[float] = Field(default=None, alias="precipTotal")
    uv: Optional[float] = None
    rad: Optional[float] = None


class Kpis(BaseModel):
    count: int = Field(ge=0)
    temp_min: Optional[float] = Field(default=None, alias="tempMin")
    temp_max: Optional[float] = Field(default=None, alias="tempMax")

    model_config = ConfigDict(populate_by_name=True)


class ObservationsResponse(BaseModel):
    station_id: str = Field(alias="stationId")
    date: str
    count: int = Field(ge=0)
    kpis: Kpis
    observations: List[NormalizedObservation]

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "stationId": "IMADRI123",
                    "date": "20240501",
                    "count": 1,
                    "kpis": {"count": 1, "tempMin": 20.5, "tempMax": 20.5},
                    "observations": [
                        {
                            "whenISO": "2024-05-01T12:00:00Z",
                            "whenMadrid": "14:00",
                            "temp": 20.5,
                            "dew": None,
                            "humidity": 60,
                            "pres": None,
                            "wind": None,
                            "gust": None,
                            "dirDeg": None,
                            "precipRate": None,
                            "precipTotal": None,
                            "uv": None,
                            "rad": None,
                        }
                    ],
                }
            ]
        },
    )
