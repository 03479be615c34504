"""
Generation orchestration: report builder state machine, phase ticker and service client.
"""
from intel_reports.orchestration.generation_client import (
    GenerationOutcome,
    GenerationResponse,
    GenerationServiceClient,
    OutcomeKind,
    interpret_response,
)
from intel_reports.orchestration.phase_ticker import GENERATION_PHASES, GenerationPhase, PhaseTicker
from intel_reports.orchestration.report_builder import BuilderStep, ReportBuilder

__all__ = [
    "BuilderStep",
    "GENERATION_PHASES",
    "GenerationOutcome",
    "GenerationPhase",
    "GenerationResponse",
    "GenerationServiceClient",
    "OutcomeKind",
    "PhaseTicker",
    "ReportBuilder",
    "interpret_response",
]
