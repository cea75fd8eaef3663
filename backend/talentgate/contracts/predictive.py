"""Predictive analytics contracts — prediction requests and their output shapes.

Requests are validated shapes. Responses are plain output models produced by
the prediction services and carry no constraints.
"""

from typing import Any, Literal

from pydantic import BaseModel

from talentgate.validators import IsUUID, ShapeDefinition, field

OFFER_ACCEPTANCE_PREDICTION_REQUEST = ShapeDefinition(
    "offer_acceptance_prediction_request",
    field("offerId", IsUUID()),
    description="Predict how likely a candidate is to accept an offer",
)

TIME_TO_FILL_PREDICTION_REQUEST = ShapeDefinition(
    "time_to_fill_prediction_request",
    field("jobId", IsUUID()),
    description="Predict how many days a job will take to fill",
)


class PredictionFactor(BaseModel):
    """One feature's contribution to a prediction."""

    name: str
    impact: float
    value: Any = None


class OfferAcceptancePredictionResponse(BaseModel):
    acceptanceProbability: float
    factors: list[PredictionFactor] = []
    riskLevel: Literal["low", "medium", "high"]
    recommendations: list[str] = []


class ConfidenceInterval(BaseModel):
    lower: float
    upper: float


class TimeToFillPredictionResponse(BaseModel):
    predictedDays: float
    confidenceInterval: ConfidenceInterval
    factors: list[PredictionFactor] = []


SHAPES = [OFFER_ACCEPTANCE_PREDICTION_REQUEST, TIME_TO_FILL_PREDICTION_REQUEST]
