#file: backend/models.py

from pydantic import BaseModel, Field

FETCH_ERROR_MESSAGE = "Erreur lors de la récupération des données"


class ErrorResponse(BaseModel):
    error: str = Field(FETCH_ERROR_MESSAGE, description="Generic error message, never exposes the cause")


class HealthStatus(BaseModel):
    status: str = Field("ok", description="Service liveness")
