from .analysis_service import AnalysisService, AcceptAllFootage, INVALID_FOOTAGE_MESSAGE
