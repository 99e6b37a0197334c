# engine.py

"""
Page replacement simulation engine.

Runs FIFO or LRU replacement over a page reference string and a fixed
number of frames, recording a snapshot of the frames after every
reference. The Streamlit app renders these snapshots column by column.
"""

import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple


# =============================================================================
# CONSTANTS & ERRORS
# =============================================================================

EMPTY = None  # Marker for a frame slot holding no page

# ASCII digits with an optional sign
_REFERENCE_RE = re.compile(r"[+-]?[0-9]+")

HIT = "Hit"
MISS = "Miss"


class ReplacementPolicy:
    """
    Enumeration of available page replacement algorithms.

    FIFO: First-In-First-Out - replaces the oldest page in memory
    LRU:  Least Recently Used - replaces the page not used for longest time
    """
    FIFO = "FIFO"
    LRU = "LRU"

    ALL = (FIFO, LRU)


class InvalidConfigurationError(ValueError):
    """Raised when the frame count is not a positive integer."""


class InvalidReferenceError(ValueError):
    """Raised when a page reference string contains a bad token."""


# =============================================================================
# DATA MODEL
# =============================================================================

@dataclass(frozen=True)
class StepSnapshot:
    """
    State of memory right after one page reference was processed.

    Attributes:
        frames (Tuple[Optional[int], ...]): Copy of every frame slot, EMPTY if free
        status (str): HIT or MISS
        current_page (int): The page that was referenced at this step
    """
    frames: Tuple[Optional[int], ...]
    status: str
    current_page: int


@dataclass
class SimulationResult:
    """
    Outcome of one simulation run.

    Attributes:
        algorithm (str): Policy that produced the run (FIFO or LRU)
        frame_count (int): Number of frames used
        steps (List[StepSnapshot]): One snapshot per reference, in order
        page_faults (int): Number of MISS steps
        event_log (List[str]): Human readable log of every memory event
    """
    algorithm: str
    frame_count: int
    steps: List[StepSnapshot] = field(default_factory=list)
    page_faults: int = 0
    event_log: List[str] = field(default_factory=list)

    @property
    def total_refs(self) -> int:
        return len(self.steps)

    @property
    def hits(self) -> int:
        return self.total_refs - self.page_faults

    @property
    def hit_ratio(self) -> float:
        return (self.hits / self.total_refs) if self.total_refs > 0 else 0.0

    @property
    def fault_rate(self) -> float:
        return (self.page_faults / self.total_refs) if self.total_refs > 0 else 0.0

    def get_stats(self) -> Dict[str, float]:
        """
        Calculate and return simulation statistics.

        Returns:
            Dict[str, float]: hits, faults, hit_ratio, fault_rate and total_refs
        """
        return {
            "hits": self.hits,
            "faults": self.page_faults,
            "hit_ratio": round(self.hit_ratio, 4),
            "fault_rate": round(self.fault_rate, 4),
            "total_refs": self.total_refs,
        }


# =============================================================================
# INPUT HANDLING
# =============================================================================

def parse_page_references(text: str) -> List[int]:
    """
    Parse a comma separated reference string such as "7, 0, 1, 2".

    Blank tokens are skipped, so an empty string yields an empty list.

    Raises:
        InvalidReferenceError: If a token is not a non-negative integer
    """
    pages = []
    tokens = [tok.strip() for tok in text.split(',')]
    for position, token in enumerate((t for t in tokens if t != ''), start=1):
        if not _REFERENCE_RE.fullmatch(token):
            raise InvalidReferenceError(
                f"Reference #{position} ('{token}') is not an integer"
            )
        page = int(token)
        if page < 0:
            raise InvalidReferenceError(
                f"Reference #{position} ('{token}') must not be negative"
            )
        pages.append(page)
    return pages


def validate_frame_count(frame_count) -> int:
    # bool is an int subclass but never a meaningful frame count
    if isinstance(frame_count, bool) or not isinstance(frame_count, int):
        raise InvalidConfigurationError(
            f"Frame count must be an integer, got {frame_count!r}"
        )
    if frame_count <= 0:
        raise InvalidConfigurationError(
            f"Frame count must be at least 1, got {frame_count}"
        )
    return frame_count


# =============================================================================
# ALGORITHMS
# =============================================================================

def fifo(page_references: Sequence[int], frame_count: int) -> SimulationResult:
    """
    Simulate First-In-First-Out replacement.

    A circular pointer marks the slot that was written longest ago. Every
    miss writes the new page there and advances the pointer; hits never
    move it, so how recently a page was used plays no part in eviction.

    Args:
        page_references (Sequence[int]): Pages in reference order
        frame_count (int): Number of physical frames

    Returns:
        SimulationResult: One snapshot per reference plus the fault count

    Raises:
        InvalidConfigurationError: If frame_count is not a positive integer
    """
    validate_frame_count(frame_count)
    frames: List[Optional[int]] = [EMPTY] * frame_count
    result = SimulationResult(ReplacementPolicy.FIFO, frame_count)
    pointer = 0  # Next slot to overwrite

    for page in page_references:
        if page in frames:
            status = HIT
            result.event_log.append(f"Hit: Page {page} in Frame {frames.index(page)}")
        else:
            status = MISS
            result.page_faults += 1
            result.event_log.append(f"Fault: Page {page} not in memory")
            _write_frame(result, frames, pointer, page)
            pointer = (pointer + 1) % frame_count

        result.steps.append(StepSnapshot(tuple(frames), status, page))

    return result


def lru(page_references: Sequence[int], frame_count: int) -> SimulationResult:
    """
    Simulate Least-Recently-Used replacement.

    `recent_usage` holds resident pages ordered from least recently used
    (front) to most recently used (back). Free slots are filled lowest
    index first; once memory is full the front page is evicted.

    Args:
        page_references (Sequence[int]): Pages in reference order
        frame_count (int): Number of physical frames

    Returns:
        SimulationResult: One snapshot per reference plus the fault count

    Raises:
        InvalidConfigurationError: If frame_count is not a positive integer
    """
    validate_frame_count(frame_count)
    frames: List[Optional[int]] = [EMPTY] * frame_count
    result = SimulationResult(ReplacementPolicy.LRU, frame_count)
    recent_usage: List[int] = []

    for page in page_references:
        if page in frames:
            status = HIT
            result.event_log.append(f"Hit: Page {page} in Frame {frames.index(page)}")
        else:
            status = MISS
            result.page_faults += 1
            result.event_log.append(f"Fault: Page {page} not in memory")
            if EMPTY in frames:
                target = frames.index(EMPTY)
            else:
                least_recently_used = recent_usage.pop(0)
                target = frames.index(least_recently_used)
            _write_frame(result, frames, target, page)

        # Both hits and misses make the page the most recently used
        if page in recent_usage:
            recent_usage.remove(page)
        recent_usage.append(page)

        result.steps.append(StepSnapshot(tuple(frames), status, page))

    return result


def _write_frame(result: SimulationResult, frames: List[Optional[int]],
                 frame_no: int, page: int):
    """Place `page` in `frames[frame_no]`, logging any eviction."""
    evicted = frames[frame_no]
    if evicted is not EMPTY:
        result.event_log.append(f"Evicting: Page {evicted} from Frame {frame_no}")
        frames[frame_no] = page
        result.event_log.append(f"Loaded: Page {page} -> Frame {frame_no} (replaced)")
    else:
        frames[frame_no] = page
        result.event_log.append(f"Loaded: Page {page} -> Frame {frame_no}")


# -----------------------------
# Dispatcher
# -----------------------------
_SIMULATORS = {
    ReplacementPolicy.FIFO: fifo,
    ReplacementPolicy.LRU: lru,
}


def simulate(policy: str, page_references: Sequence[int], frame_count: int) -> SimulationResult:
    if policy not in _SIMULATORS:
        raise ValueError(f"Unknown replacement policy: {policy}")
    return _SIMULATORS[policy](page_references, frame_count)


def compare(page_references: Sequence[int], frame_count: int) -> Dict[str, SimulationResult]:
    """Run every policy on the same input, keyed by policy name."""
    return {
        policy: simulate(policy, page_references, frame_count)
        for policy in ReplacementPolicy.ALL
    }
