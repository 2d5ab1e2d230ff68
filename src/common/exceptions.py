class RiskAnalysisError(Exception):
    """Base exception for all risk analysis errors."""
    pass

class InputError(RiskAnalysisError):
    """Raised when the footage reference or run parameters are malformed."""
    pass

class SourceError(RiskAnalysisError):
    """Raised when a detection source cannot produce detections."""
    pass

class RunFailedError(RiskAnalysisError):
    """Raised when an analysis run aborts. The originating error is chained as __cause__."""

    def __init__(self, message: str, frame_index: int = -1):
        super().__init__(message)
        self.frame_index = frame_index

class AnalysisCancelledError(RiskAnalysisError):
    """Raised when an analysis run is cancelled before completion."""
    pass

class InvalidFootageError(RiskAnalysisError):
    """Raised when footage is judged not to depict a street or road scene."""
    pass

class ConfigurationError(RiskAnalysisError):
    """Raised when configuration is invalid."""
    pass

class GeocodingError(RiskAnalysisError):
    """Raised when the location service fails."""
    pass
