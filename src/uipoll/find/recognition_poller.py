"""RecognitionPoller - retry template and OCR recognition until it succeeds.

Every helper is built from one of two loops:

    single-condition retry   capture, recognize, release, wait, repeat
    act-then-check retry     run an action, recognize once, wait, repeat

Image loops are bounded by elapsed time and text loops by attempt count.
The elapsed-time check is ``elapsed <= timeout`` and runs before each
attempt, so at least one attempt always happens and the last one may
start right at the deadline.

Example:
    poller = create_poller()
    start = poller.find_image_and_click("assets/start.png", timeout=5.0)
    if poller.wait_until_text_appear("loading", lambda: None) is None:
        ...
"""

from __future__ import annotations

import os
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

from ..config import PollerSettings, get_settings
from ..engine import IRecognitionEngine, MatchResult
from ..exceptions import ConfigurationError, InvalidArgumentError
from ..logging import get_logger
from ..model import Region
from ..wrappers import TimeWrapper
from .targets import ByPath, as_target

logger = get_logger(__name__)

Action = Callable[[], Any]

# Absorbs float rounding when interval sums land on the deadline
CLOCK_TOLERANCE = 1e-9


def _is_valid_path(value: Any) -> bool:
    if isinstance(value, str):
        return value != ""
    if isinstance(value, os.PathLike):
        return os.fspath(value) != ""
    return False


class RecognitionPoller:
    """Polling helpers over an ``IRecognitionEngine``.

    The poller holds no state between calls. Each attempt captures a fresh
    region handle and disposes it before the next wait, even when the
    engine raises.

    Args:
        engine: Recognition engine providing capture, matching, OCR and clicks
        default_region: Search region for path targets and OCR; defaults to
            the settings region
        main_ui_marker: Image target that identifies the main UI; defaults to
            ``settings.main_ui_marker``
        time: Time source; ``MockTime`` makes the loops deterministic
        settings: Settings providing default timeouts, intervals and threshold
    """

    def __init__(
        self,
        engine: IRecognitionEngine,
        *,
        default_region: Region | None = None,
        main_ui_marker: Any = None,
        time: TimeWrapper | None = None,
        settings: PollerSettings | None = None,
    ) -> None:
        self.engine = engine
        self.settings = settings or get_settings()
        self.default_region = default_region or self.settings.default_region
        self.main_ui_marker = (
            main_ui_marker if main_ui_marker is not None else self.settings.main_ui_marker
        )
        self.time = time or TimeWrapper()

    def _within(self, start: float, budget: float) -> bool:
        return self.time.now() - start <= budget + CLOCK_TOLERANCE

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load_images(self, paths: str | os.PathLike[str] | Sequence[Any]) -> Any:
        """Load one image, or a sequence of images in order.

        Every element is validated before anything is loaded.

        Args:
            paths: A path, or a list/tuple of paths

        Returns:
            The engine image for a single path, a list for a sequence

        Raises:
            InvalidArgumentError: If ``paths`` is None, of the wrong type, or
                holds a non-path or empty element (``index`` names it)
        """
        if paths is None:
            raise InvalidArgumentError("load_images: path must not be None")

        if isinstance(paths, (str, os.PathLike)):
            if not _is_valid_path(paths):
                raise InvalidArgumentError("load_images: path must be a non-empty string")
            return self.engine.load_image(paths)

        if isinstance(paths, (list, tuple)):
            for index, path in enumerate(paths):
                if not _is_valid_path(path):
                    raise InvalidArgumentError(
                        f"load_images: paths[{index}] is not a valid path string",
                        index=index,
                    )
            return [self.engine.load_image(path) for path in paths]

        raise InvalidArgumentError(
            f"load_images: expected a path or a sequence of paths, got {type(paths).__name__}"
        )

    def _resolve_image(self, target: Any, region: Region | None) -> Any:
        """Turn an image target into a template descriptor, once per call."""
        tagged = as_target(target)
        if isinstance(tagged, ByPath):
            image = self.engine.load_image(tagged.path)
            return self.engine.template_match(
                image, region or self.default_region, self.settings.template_threshold
            )
        return tagged.descriptor

    # ------------------------------------------------------------------
    # Loop primitives
    # ------------------------------------------------------------------

    def _click(self, result: MatchResult, pre_click_delay: float, post_click_delay: float) -> None:
        self.time.wait(pre_click_delay)
        result.click()
        self.time.wait(post_click_delay)
        logger.debug("match_clicked", center=result.center)

    def _poll_image(
        self,
        descriptor: Any,
        timeout: float,
        interval: float,
        click_delays: tuple[float, float] | None = None,
    ) -> MatchResult | None:
        start = self.time.now()
        attempts = 0

        while self._within(start, timeout):
            attempts += 1
            with self.engine.capture_region() as handle:
                result = handle.find_one(descriptor)
                if result is not None and result.exists:
                    logger.debug(
                        "image_found",
                        attempts=attempts,
                        elapsed=self.time.now() - start,
                        bounds=result.bounds,
                    )
                    if click_delays is not None:
                        self._click(result, *click_delays)
                    return result

            self.time.wait(interval)

        logger.debug("image_not_found", attempts=attempts, timeout=timeout)
        return None

    @staticmethod
    def _match_text(fragments: Sequence[MatchResult], keyword: str) -> MatchResult | None:
        for fragment in fragments:
            if fragment.exists and fragment.text and keyword in fragment.text.lower():
                return fragment
        return None

    def _poll_text(
        self,
        text: str,
        region: Region | None,
        attempts: int,
        interval: float,
        click_delays: tuple[float, float] | None = None,
    ) -> MatchResult | None:
        keyword = text.lower()
        descriptor = self.engine.ocr(region or self.default_region)

        for attempt in range(1, attempts + 1):
            with self.engine.capture_region() as handle:
                result = self._match_text(handle.find_all(descriptor), keyword)
                if result is not None:
                    logger.debug("text_found", text=text, found=result.text, attempts=attempt)
                    if click_delays is not None:
                        self._click(result, *click_delays)
                    return result

            self.time.wait(interval)

        logger.debug("text_not_found", text=text, attempts=attempts)
        return None

    # ------------------------------------------------------------------
    # Template matching
    # ------------------------------------------------------------------

    def find_image(
        self,
        target: Any,
        region: Region | None = None,
        timeout: float | None = None,
        interval: float | None = None,
    ) -> MatchResult | None:
        """Poll until ``target`` is on screen or ``timeout`` seconds pass.

        Args:
            target: Image path, ``ByPath``/``ByDescriptor``, or an engine descriptor
            region: Search region for path targets (descriptors carry their own)
            timeout: Time budget in seconds
            interval: Wait between attempts in seconds

        Returns:
            The match, or None on timeout
        """
        descriptor = self._resolve_image(target, region)
        return self._poll_image(
            descriptor,
            timeout=self.settings.find_timeout if timeout is None else timeout,
            interval=self.settings.poll_interval if interval is None else interval,
        )

    def find_image_and_click(
        self,
        target: Any,
        region: Region | None = None,
        timeout: float | None = None,
        interval: float | None = None,
        pre_click_delay: float | None = None,
        post_click_delay: float | None = None,
    ) -> MatchResult | None:
        """Like ``find_image``, then click the match once.

        The click happens ``pre_click_delay`` seconds after the match and is
        followed by ``post_click_delay`` seconds of settling time. There is no
        re-check after clicking; click errors propagate.

        Returns:
            The clicked match, or None on timeout
        """
        descriptor = self._resolve_image(target, region)
        return self._poll_image(
            descriptor,
            timeout=self.settings.find_timeout if timeout is None else timeout,
            interval=self.settings.poll_interval if interval is None else interval,
            click_delays=self._click_delays(pre_click_delay, post_click_delay),
        )

    # ------------------------------------------------------------------
    # OCR
    # ------------------------------------------------------------------

    def find_text(
        self,
        text: str,
        region: Region | None = None,
        attempts: int | None = None,
        interval: float | None = None,
    ) -> MatchResult | None:
        """Run OCR up to ``attempts`` times looking for ``text``.

        A fragment matches when it exists, has text, and contains ``text``
        ignoring case. The first matching fragment in engine order wins.

        Returns:
            The matching fragment, or None once the attempts are used up
        """
        return self._poll_text(
            text,
            region,
            attempts=self.settings.ocr_attempts if attempts is None else attempts,
            interval=self.settings.poll_interval if interval is None else interval,
        )

    def find_text_and_click(
        self,
        text: str,
        region: Region | None = None,
        attempts: int | None = None,
        interval: float | None = None,
        pre_click_delay: float | None = None,
        post_click_delay: float | None = None,
    ) -> MatchResult | None:
        """Like ``find_text``, then click the first matching fragment."""
        return self._poll_text(
            text,
            region,
            attempts=self.settings.ocr_attempts if attempts is None else attempts,
            interval=self.settings.poll_interval if interval is None else interval,
            click_delays=self._click_delays(pre_click_delay, post_click_delay),
        )

    def _click_delays(
        self, pre_click_delay: float | None, post_click_delay: float | None
    ) -> tuple[float, float]:
        return (
            self.settings.pre_click_delay if pre_click_delay is None else pre_click_delay,
            self.settings.post_click_delay if post_click_delay is None else post_click_delay,
        )

    # ------------------------------------------------------------------
    # Act-then-check
    # ------------------------------------------------------------------

    def _wait_for_image(
        self,
        target: Any,
        action: Action,
        region: Region | None,
        timeout: float | None,
        interval: float | None,
        want_present: bool,
    ) -> MatchResult | bool | None:
        timeout = self.settings.wait_timeout if timeout is None else timeout
        interval = self.settings.poll_interval if interval is None else interval
        descriptor = self._resolve_image(target, region)

        start = self.time.now()
        rounds = 0
        while self._within(start, timeout):
            rounds += 1
            action()
            # The round interval doubles as the timeout of the check itself
            result = self._poll_image(
                descriptor, timeout=interval, interval=self.settings.poll_interval
            )
            if want_present and result is not None:
                logger.debug("image_appeared", rounds=rounds)
                return result
            if not want_present and result is None:
                logger.debug("image_disappeared", rounds=rounds)
                return True
            self.time.wait(interval)

        logger.debug("image_wait_timed_out", rounds=rounds, timeout=timeout, present=want_present)
        return None if want_present else False

    def wait_until_image_appear(
        self,
        target: Any,
        action: Action,
        region: Region | None = None,
        timeout: float | None = None,
        interval: float | None = None,
    ) -> MatchResult | None:
        """Repeat ``action`` until ``target`` shows up.

        Each round calls ``action()``, then checks for the image with a
        ``find_image`` whose timeout is ``interval``.

        Returns:
            The match, or None after ``timeout`` seconds
        """
        result = self._wait_for_image(target, action, region, timeout, interval, True)
        return result if isinstance(result, MatchResult) else None

    def wait_until_image_disappear(
        self,
        target: Any,
        action: Action,
        region: Region | None = None,
        timeout: float | None = None,
        interval: float | None = None,
    ) -> bool:
        """Repeat ``action`` until ``target`` is gone.

        Returns:
            True on the first round without a match, False after ``timeout``
        """
        return self._wait_for_image(target, action, region, timeout, interval, False) is True

    def _wait_for_text(
        self,
        text: str,
        action: Action,
        region: Region | None,
        attempts: int | None,
        interval: float | None,
        want_present: bool,
    ) -> MatchResult | bool | None:
        attempts = self.settings.ocr_attempts if attempts is None else attempts
        interval = self.settings.poll_interval if interval is None else interval
        budget = attempts * interval

        start = self.time.now()
        rounds = 0
        while self._within(start, budget):
            rounds += 1
            action()
            result = self._poll_text(text, region, attempts=1, interval=interval)
            if want_present and result is not None:
                logger.debug("text_appeared", text=text, rounds=rounds)
                return result
            if not want_present and result is None:
                logger.debug("text_disappeared", text=text, rounds=rounds)
                return True
            self.time.wait(interval)

        logger.debug("text_wait_timed_out", text=text, rounds=rounds, budget=budget)
        return None if want_present else False

    def wait_until_text_appear(
        self,
        text: str,
        action: Action,
        region: Region | None = None,
        attempts: int | None = None,
        interval: float | None = None,
    ) -> MatchResult | None:
        """Repeat ``action`` until OCR finds ``text``.

        The loop runs for ``attempts * interval`` seconds; each round does a
        single OCR pass.

        Returns:
            The matching fragment, or None when the time budget is spent
        """
        result = self._wait_for_text(text, action, region, attempts, interval, True)
        return result if isinstance(result, MatchResult) else None

    def wait_until_text_disappear(
        self,
        text: str,
        action: Action,
        region: Region | None = None,
        attempts: int | None = None,
        interval: float | None = None,
    ) -> bool:
        """Repeat ``action`` until OCR no longer finds ``text``.

        Returns:
            True on the first round without a match, False when the budget is spent
        """
        return self._wait_for_text(text, action, region, attempts, interval, False) is True

    # ------------------------------------------------------------------
    # Convenience
    # ------------------------------------------------------------------

    def is_in_main_ui(self) -> bool:
        """Whether the main-UI marker image is on screen.

        Raises:
            ConfigurationError: If no marker was configured
        """
        if self.main_ui_marker is None:
            raise ConfigurationError(
                "No main UI marker configured", config_key="main_ui_marker"
            )
        return self.find_image(self.main_ui_marker) is not None


def create_poller(
    settings: PollerSettings | None = None,
    *,
    default_region: Region | None = None,
    main_ui_marker: str | Path | None = None,
) -> RecognitionPoller:
    """Build a poller on the default HAL engine and the real clock.

    Args:
        settings: Settings override; defaults to ``get_settings()``
        default_region: Search region override
        main_ui_marker: Main-UI marker override

    Returns:
        RecognitionPoller instance
    """
    from ..hal import HALFactory

    settings = settings or get_settings()
    return RecognitionPoller(
        HALFactory.create_engine(settings),
        default_region=default_region,
        main_ui_marker=main_ui_marker,
        settings=settings,
    )
