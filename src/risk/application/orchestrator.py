"""
Drives one analysis run: frame sampling, scoring, aggregation and summary.
"""
import asyncio
from dataclasses import dataclass
from typing import List, Optional
from ..domain import (
    AnalysisResult,
    DetectionSource,
    FootageRef,
    FrameAnalysis,
    FrameStats,
    ProgressCallback,
    RunState,
)
from .frame_evaluator import RiskWeights, DEFAULT_WEIGHTS, compute_frame_risk
from .aggregator import aggregate_video_risk
from .violations import generate_violations
from ...common.exceptions import AnalysisCancelledError, InputError, RunFailedError
from ...common.logging import setup_logger
from ...common.utils import round_half_up

logger = setup_logger(__name__)

MAX_RUNNING_PROGRESS = 95


@dataclass(frozen=True)
class AnalysisPreset:
    name: str
    max_frames: int
    frame_skip: int


QUICK = AnalysisPreset("quick", max_frames=20, frame_skip=5)
STANDARD = AnalysisPreset("standard", max_frames=50, frame_skip=3)
DEEP = AnalysisPreset("deep", max_frames=100, frame_skip=2)
PRESETS = {preset.name: preset for preset in (QUICK, STANDARD, DEEP)}


def get_preset(name: str) -> AnalysisPreset:
    try:
        return PRESETS[name]
    except KeyError:
        raise InputError(f"Unknown analysis preset: {name}. Expected one of {sorted(PRESETS)}") from None


class CancellationToken:
    """
    Cooperative cancellation flag checked by the orchestrator between frames.
    """
    def __init__(self):
        self._event = asyncio.Event()

    def cancel(self):
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self):
        if self.cancelled:
            raise AnalysisCancelledError("Analysis cancelled")


class AnalysisOrchestrator:
    """
    Runs a single analysis over a detection source.

    Frames are visited in increasing index order; every `frame_skip`-th index
    is scored until `max_frames` frames have been processed. Control is
    yielded to the event loop before each detection fetch, which is also
    where cancellation is honoured.
    """

    def __init__(
        self,
        source: DetectionSource,
        max_frames: int = STANDARD.max_frames,
        frame_skip: int = STANDARD.frame_skip,
        weights: RiskWeights = DEFAULT_WEIGHTS,
        frame_delay: float = 0.0,
    ):
        self.source = source
        self.max_frames = max_frames
        self.frame_skip = frame_skip
        self.weights = weights
        self.frame_delay = frame_delay
        self.state = RunState.IDLE

    @classmethod
    def from_preset(cls, source: DetectionSource, preset: AnalysisPreset, **kwargs) -> 'AnalysisOrchestrator':
        return cls(source, max_frames=preset.max_frames, frame_skip=preset.frame_skip, **kwargs)

    def _validate(self, footage: FootageRef):
        if footage is None or not isinstance(footage.name, str) or not footage.name.strip():
            raise InputError("A footage reference with a non-empty name is required")
        if footage.size_bytes < 0:
            raise InputError(f"Footage size must not be negative, got {footage.size_bytes}")
        if not isinstance(self.max_frames, int) or self.max_frames < 0:
            raise InputError(f"max_frames must be a non-negative integer, got {self.max_frames!r}")
        if not isinstance(self.frame_skip, int) or self.frame_skip <= 0:
            raise InputError(f"frame_skip must be a positive integer, got {self.frame_skip!r}")

    async def run(
        self,
        footage: FootageRef,
        on_progress: Optional[ProgressCallback] = None,
        cancel_token: Optional[CancellationToken] = None,
    ) -> AnalysisResult:
        self._validate(footage)
        self.state = RunState.RUNNING
        logger.info(f"Starting analysis of: {footage.name}")

        try:
            frame_analyses = await self._process_frames(on_progress, cancel_token)
        except (AnalysisCancelledError, asyncio.CancelledError):
            self.state = RunState.CANCELLED
            logger.info(f"Analysis of {footage.name} cancelled")
            raise
        except RunFailedError:
            self.state = RunState.FAILED
            raise

        if on_progress:
            on_progress(100)

        if not frame_analyses:
            logger.info(f"No frames processed for {footage.name}. Defaulting to LOW, 0.")
            self.state = RunState.COMPLETED
            return AnalysisResult.degenerate()

        result = self._summarize(frame_analyses)
        self.state = RunState.COMPLETED
        logger.info(
            f"Finished {footage.name}: level={result.risk_level.value}, score={result.risk_score}"
        )
        return result

    @property
    def total_frames(self) -> int:
        return self.max_frames * self.frame_skip

    async def _process_frames(
        self,
        on_progress: Optional[ProgressCallback],
        cancel_token: Optional[CancellationToken],
    ) -> List[FrameAnalysis]:
        total_frames = self.total_frames
        frame_analyses: List[FrameAnalysis] = []

        for frame_index in range(0, total_frames, self.frame_skip):
            if len(frame_analyses) >= self.max_frames:
                break

            if on_progress:
                on_progress(min(MAX_RUNNING_PROGRESS, int(round_half_up(frame_index / total_frames * 100))))

            if cancel_token:
                cancel_token.raise_if_cancelled()
            await asyncio.sleep(self.frame_delay)
            if cancel_token:
                cancel_token.raise_if_cancelled()

            try:
                detections = self.source.next(frame_index, total_frames)
            except Exception as e:
                logger.error(f"Detection source failed at frame {frame_index}: {e}")
                raise RunFailedError(
                    f"Detection source failed at frame {frame_index}: {e}", frame_index=frame_index
                ) from e

            frame_analyses.append(compute_frame_risk(
                detections,
                self.source.frame_width,
                self.source.frame_height,
                frame_index=frame_index,
                weights=self.weights,
            ))

        return frame_analyses

    def _summarize(self, frame_analyses: List[FrameAnalysis]) -> AnalysisResult:
        frame_scores = [f.score for f in frame_analyses]
        risk_level, risk_score = aggregate_video_risk(frame_scores)
        violations = generate_violations(frame_analyses, risk_score)

        processed = len(frame_analyses)
        avg_vehicles = sum(f.vehicle_count for f in frame_analyses) / processed
        avg_persons = sum(f.person_count for f in frame_analyses) / processed

        return AnalysisResult(
            risk_level=risk_level,
            risk_score=risk_score,
            violations=tuple(violations),
            frame_stats=FrameStats(
                total_frames=self.total_frames,
                processed_frames=processed,
                avg_vehicles=round_half_up(avg_vehicles, 1),
                avg_persons=round_half_up(avg_persons, 1),
                max_score=max(frame_scores),
                min_score=min(frame_scores),
            ),
        )
