from dataclasses import dataclass


class EstimatorError(Exception):
    """Base class for failures raised by the estimation engine."""


class NotFoundError(EstimatorError, LookupError):
    def __init__(self, crop_id: str):
        super().__init__(f"Unknown crop id: {crop_id!r}")
        self.crop_id = crop_id


class InvalidInputError(EstimatorError, ValueError):
    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


@dataclass(frozen=True)
class DataGapWarning:
    """Non-fatal note attached to a result computed from incomplete catalog data."""
    crop_id: str
    field: str
    fallback: float
    message: str

    def __str__(self) -> str:
        return self.message
