#file: frontend/state.py

from dataclasses import dataclass
from typing import Any, Union

from frontend.models import AirQualityReading, AtmoEnvelope

NO_DATA_MESSAGE = "Aucune donnée disponible"
FETCH_ERROR_MESSAGE = "Erreur lors de la récupération des données"


@dataclass(frozen=True)
class Loading :
    """A fetch is in flight."""


@dataclass(frozen=True)
class Failed :
    message: str


@dataclass(frozen=True)
class Loaded :
    reading: AirQualityReading


DashboardState = Union[Loading, Failed, Loaded]


def state_from_envelope(payload: Any) -> DashboardState :
    """Turn a proxy payload into the next dashboard state.

    Only the first reading of a successful, non-empty envelope is kept. Raises
    pydantic.ValidationError when the payload does not look like an envelope.
    """
    envelope = AtmoEnvelope.model_validate(payload)
    if envelope.success and envelope.data :
        return Loaded(envelope.data[0])
    return Failed(NO_DATA_MESSAGE)
