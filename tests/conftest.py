"""
Shared test helpers: deterministic random sources and fake collaborators
"""

import pytest

from crazy_pong.core.entities import RenderSnapshot


class FractionRandom:
    """Random source that always lands at the same fraction of the requested range"""

    def __init__(self, fraction: float = 0.0):
        self.fraction = fraction
        self.calls: list[tuple[float, float]] = []

    def uniform(self, low: float = 0.0, high: float = 1.0) -> float:
        self.calls.append((low, high))
        return low + self.fraction * (high - low)


class FakeRenderer:
    """Records what the game core asks it to draw"""

    def __init__(self, width: float = 800, height: float = 600):
        self.size = (float(width), float(height))
        self.frames: list[RenderSnapshot] = []
        self.game_over_frames: list[RenderSnapshot] = []
        self.restart_click = False
        self.presented = 0
        self.cleaned_up = False

    def render_frame(self, snapshot: RenderSnapshot) -> None:
        self.frames.append(snapshot)

    def show_game_over(self, snapshot: RenderSnapshot) -> None:
        self.game_over_frames.append(snapshot)

    def get_container_size(self) -> tuple[float, float]:
        return self.size

    def resize(self, width: int, height: int) -> None:
        self.size = (float(width), float(height))

    def is_restart_click(self, position: tuple[int, int]) -> bool:
        return self.restart_click

    def present(self) -> None:
        self.presented += 1

    def update(self, fps: int | None = None) -> None:
        pass

    def is_active(self) -> bool:
        return not self.cleaned_up

    def cleanup(self) -> None:
        self.cleaned_up = True


class ManualClock:
    """Clock returning whatever time the test sets, in milliseconds"""

    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def fake_renderer() -> FakeRenderer:
    return FakeRenderer()


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def fraction_random() -> type[FractionRandom]:
    """Factory for random sources pinned to a fraction of the range"""
    return FractionRandom
