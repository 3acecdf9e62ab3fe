"""MockRecognitionEngine - scripted engine for tests and dry runs.

Each template match attempt consumes the next entry of ``template_script``
and each OCR attempt the next entry of ``ocr_script``. Once a script runs
out, the matching default outcome is used for every further attempt.

Template outcomes:
    True            a match at ``match_bounds``
    False / None    no match
    MatchResult     returned as given (bound to the mock clicker if unbound)
    BaseException   raised from ``find_one``

OCR outcomes:
    list of str or MatchResult    fragments, strings become existing fragments
    BaseException                 raised from ``find_all``
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass, replace
from typing import Any

from ..engine import IRecognitionEngine, IRegionHandle, MatchResult
from ..engine.descriptors import Descriptor
from .mock_time import MockTime


@dataclass(frozen=True)
class MockImage:
    """Stand-in for an image loaded by the mock engine."""

    path: str


class MockRegionHandle(IRegionHandle):
    """Region handle that reports to its engine's counters."""

    def __init__(self, engine: MockRecognitionEngine) -> None:
        self._engine = engine
        self.disposed = False

    def find_one(self, descriptor: Descriptor) -> MatchResult:
        return self._engine._next_template(descriptor)

    def find_all(self, descriptor: Descriptor) -> list[MatchResult]:
        return self._engine._next_ocr(descriptor)

    def dispose(self) -> None:
        if not self.disposed:
            self.disposed = True
            self._engine.disposals += 1


class MockRecognitionEngine(IRecognitionEngine):
    """Scripted recognition engine.

    Attributes:
        captures: Number of region handles handed out
        disposals: Number of region handles disposed
        find_one_calls: Number of template match attempts
        find_all_calls: Number of OCR attempts
        clicks: (virtual time, result) for every click
        loaded_paths: Every path passed to ``load_image``
        descriptors: Every descriptor passed to a find call
    """

    def __init__(
        self,
        template_script: Iterable[Any] = (),
        ocr_script: Iterable[Any] = (),
        *,
        template_default: Any = False,
        ocr_default: Any = (),
        time: MockTime | None = None,
        latency: float = 0.0,
        missing_paths: Iterable[str] = (),
        click_error: BaseException | None = None,
        match_bounds: tuple[int, int, int, int] = (100, 100, 40, 20),
    ) -> None:
        self._template_script = list(template_script)
        self._ocr_script = list(ocr_script)
        self.template_default = template_default
        self.ocr_default = ocr_default
        self.time = time
        self.latency = latency
        self.missing_paths = {str(path) for path in missing_paths}
        self.click_error = click_error
        self.match_bounds = match_bounds

        self.captures = 0
        self.disposals = 0
        self.find_one_calls = 0
        self.find_all_calls = 0
        self.clicks: list[tuple[float, MatchResult]] = []
        self.loaded_paths: list[str] = []
        self.descriptors: list[Descriptor] = []

    def load_image(self, path: str | os.PathLike[str]) -> MockImage:
        path = os.fspath(path)
        self.loaded_paths.append(path)
        if path in self.missing_paths:
            raise FileNotFoundError(f"No such image: {path}")
        return MockImage(path)

    def capture_region(self) -> MockRegionHandle:
        self.captures += 1
        return MockRegionHandle(self)

    def _spend_latency(self) -> None:
        if self.time is not None and self.latency > 0:
            self.time.advance(self.latency)

    def _next_template(self, descriptor: Descriptor) -> MatchResult:
        self.find_one_calls += 1
        self.descriptors.append(descriptor)
        self._spend_latency()

        if self._template_script:
            outcome = self._template_script.pop(0)
        else:
            outcome = self.template_default

        if isinstance(outcome, BaseException):
            raise outcome
        if isinstance(outcome, MatchResult):
            return self._bind(outcome)
        if outcome:
            x, y, width, height = self.match_bounds
            return MatchResult(
                exists=True, x=x, y=y, width=width, height=height, confidence=1.0,
                clicker=self._record_click,
            )
        return MatchResult.empty()

    def _next_ocr(self, descriptor: Descriptor) -> list[MatchResult]:
        self.find_all_calls += 1
        self.descriptors.append(descriptor)
        self._spend_latency()

        if self._ocr_script:
            outcome = self._ocr_script.pop(0)
        else:
            outcome = self.ocr_default

        if isinstance(outcome, BaseException):
            raise outcome

        fragments = []
        for fragment in outcome:
            if isinstance(fragment, MatchResult):
                fragments.append(self._bind(fragment))
            else:
                x, y, width, height = self.match_bounds
                fragments.append(
                    MatchResult(
                        exists=True, x=x, y=y, width=width, height=height,
                        confidence=1.0, text=fragment, clicker=self._record_click,
                    )
                )
        return fragments

    def _bind(self, result: MatchResult) -> MatchResult:
        if result.clicker is None:
            return replace(result, clicker=self._record_click)
        return result

    def _record_click(self, result: MatchResult) -> None:
        if self.click_error is not None:
            raise self.click_error
        self.clicks.append((self.time.now() if self.time is not None else 0.0, result))
