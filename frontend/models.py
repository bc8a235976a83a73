#file: frontend/models.py

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional

DEFAULT_CODE_INSEE = "69123"


class PollutantReading(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    pollutant_name: str = Field("", alias="polluant_nom", description="Short pollutant code (NO2, O3, PM10...)")
    concentration: Optional[float] = Field(None, description="Concentration, unit as given by Atmo")
    pollutant_index: int = Field(0, alias="indice", description="Atmo sub-index, 0 when unavailable")

    @field_validator("pollutant_index", mode="before")
    @classmethod
    def null_index_is_unavailable(cls, value) :
        return 0 if value is None else value

    @field_validator("pollutant_name", mode="before")
    @classmethod
    def null_name_is_empty(cls, value) :
        return "" if value is None else str(value)


class AirQualityReading(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    commune_insee_code: str = Field(DEFAULT_CODE_INSEE, alias="code_insee", description="INSEE code of the commune")
    overall_index: int = Field(0, alias="indice", description="Overall Atmo index")
    overall_qualifier: str = Field("", alias="qualificatif", description="Label of the overall index")
    overall_color: str = Field("", alias="couleur_html", description="Hex colour of the overall index")
    commune_name: str = Field("", alias="commune_nom", description="Display name of the commune")
    valid_at: str = Field("", alias="date_echeance", description="Date the reading applies to")
    sub_indices: List[PollutantReading] = Field(default_factory=list, alias="sous_indices")

    @field_validator("overall_index", mode="before")
    @classmethod
    def null_index_is_unavailable(cls, value) :
        """Atmo sends null for an index it could not compute."""
        return 0 if value is None else value

    @field_validator("overall_qualifier", "overall_color", "commune_name", "valid_at", mode="before")
    @classmethod
    def null_text_is_empty(cls, value) :
        return "" if value is None else str(value)

    @field_validator("commune_insee_code", mode="before")
    @classmethod
    def insee_code_as_text(cls, value) :
        # INSEE codes sometimes arrive as numbers
        return DEFAULT_CODE_INSEE if value is None else str(value)

    @field_validator("sub_indices", mode="before")
    @classmethod
    def null_sub_indices_is_empty(cls, value) :
        return [] if value is None else value


class AtmoEnvelope(BaseModel):
    success: bool = False
    data: List[AirQualityReading] = Field(default_factory=list)
