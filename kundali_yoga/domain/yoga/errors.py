from typing import Optional


class YogaError(Exception):
    """
    Base exception for all yoga-related domain errors.
    """
    pass


class ValidationError(YogaError):
    """
    Raised when a birth chart is missing data or carries
    out-of-range values.
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class YogaDetectionError(YogaError):
    """
    Raised when a detector family fails while analysing
    an already validated chart.
    """

    def __init__(self, message: str, phase: Optional[str] = None):
        super().__init__(message)
        self.phase = phase
