"""Tests for template polling: find_image, find_image_and_click, is_in_main_ui."""

import pytest

from uipoll.engine import MatchResult, TemplateMatchDescriptor
from uipoll.exceptions import ConfigurationError, InputControlError, ScreenCaptureException
from uipoll.find import ByDescriptor, ByPath
from uipoll.mock import MockImage
from uipoll.model import Region


class TestFindImage:
    """find_image loop behaviour."""

    def test_returns_match_on_first_attempt(self, make_poller, mock_time):
        poller, engine = make_poller(True)

        result = poller.find_image("button.png")

        assert result is not None
        assert result.exists
        assert engine.find_one_calls == 1
        assert mock_time.now() == 0.0

    def test_always_attempts_once_when_timeout_is_shorter_than_interval(self, make_poller):
        poller, engine = make_poller()

        result = poller.find_image("button.png", timeout=0.0, interval=0.5)

        assert result is None
        assert engine.find_one_calls == 1

    @pytest.mark.parametrize(
        "misses, timeout, found",
        [
            (0, 0.0, True),
            (3, 0.75, True),  # last attempt starts exactly at the deadline
            (3, 0.5, False),
            (4, 1.0, True),
            (5, 1.0, False),
        ],
    )
    def test_match_after_misses_depends_on_timeout(self, make_poller, misses, timeout, found):
        poller, engine = make_poller(*([False] * misses), True)

        result = poller.find_image("button.png", timeout=timeout, interval=0.25)

        assert (result is not None) is found

    @pytest.mark.parametrize("misses, found", [(3, True), (4, False)])
    def test_decimal_interval_attempts_at_deadline(self, make_poller, misses, found):
        poller, engine = make_poller(*([False] * misses), True)

        result = poller.find_image("button.png", timeout=0.3, interval=0.1)

        assert (result is not None) is found
        assert engine.find_one_calls == 4

    def test_timeout_returns_none_after_expected_attempts(self, make_poller, mock_time):
        poller, engine = make_poller()

        result = poller.find_image("button.png", timeout=1.0, interval=0.25)

        assert result is None
        # attempts at 0, 0.25, 0.5, 0.75 and 1.0
        assert engine.find_one_calls == 5
        assert mock_time.now() == 1.25

    def test_slow_engine_can_overrun_timeout_by_one_attempt(self, make_poller, mock_time):
        poller, engine = make_poller(latency=0.5)

        poller.find_image("button.png", timeout=1.0, interval=0.25)

        # attempts start at 0 and 0.75; the second one ends at 1.25
        assert engine.find_one_calls == 2
        assert mock_time.now() > 1.0

    def test_uses_settings_defaults(self, make_poller, mock_time, settings):
        poller, engine = make_poller()

        poller.find_image("button.png")

        assert set(mock_time.waits) == {settings.poll_interval}
        assert engine.find_one_calls == 9  # 0 .. 1.0 in steps of 0.125

    def test_handle_disposed_on_every_attempt(self, make_poller):
        poller, engine = make_poller(False, False, True)

        poller.find_image("button.png")

        assert engine.captures == 3
        assert engine.disposals == engine.captures

    def test_handle_disposed_when_engine_raises(self, make_poller):
        poller, engine = make_poller(False, ScreenCaptureException("display lost"))

        with pytest.raises(ScreenCaptureException, match="display lost"):
            poller.find_image("button.png")

        assert engine.captures == 2
        assert engine.disposals == 2

    def test_path_target_loads_once_and_uses_default_region(self, make_poller, settings):
        poller, engine = make_poller(False, False, True)

        poller.find_image("button.png")

        assert engine.loaded_paths == ["button.png"]
        descriptor = engine.descriptors[0]
        assert isinstance(descriptor, TemplateMatchDescriptor)
        assert descriptor.image == MockImage("button.png")
        assert descriptor.region == Region(0, 0, 1920, 1080)
        assert descriptor.threshold == settings.template_threshold

    def test_path_target_uses_explicit_region(self, make_poller):
        poller, engine = make_poller(True)
        region = Region(100, 200, 300, 400)

        poller.find_image(ByPath("button.png"), region=region)

        assert engine.descriptors[0].region == region

    def test_descriptor_target_passes_through(self, make_poller):
        poller, engine = make_poller(True)
        descriptor = TemplateMatchDescriptor(MockImage("pre.png"), Region(1, 2, 3, 4), 0.95)

        poller.find_image(descriptor, region=Region(9, 9, 9, 9))

        assert engine.loaded_paths == []
        assert engine.descriptors == [descriptor]

    def test_tagged_descriptor_target(self, make_poller):
        poller, engine = make_poller(True)
        opaque = object()

        poller.find_image(ByDescriptor(opaque))

        assert engine.descriptors == [opaque]

    def test_missing_image_file_propagates(self, make_poller):
        poller, engine = make_poller(missing_paths=["gone.png"])

        with pytest.raises(FileNotFoundError):
            poller.find_image("gone.png")

        assert engine.captures == 0


class TestFindImageAndClick:
    """find_image_and_click click ordering."""

    def test_clicks_once_after_pre_click_delay(self, make_poller, mock_time):
        poller, engine = make_poller(False, True)

        result = poller.find_image_and_click(
            "button.png", interval=0.25, pre_click_delay=0.5, post_click_delay=1.0
        )

        assert result is not None
        assert len(engine.clicks) == 1
        click_time, clicked = engine.clicks[0]
        assert clicked is result
        # match at 0.25, click after the 0.5 pre-click delay
        assert click_time == 0.75
        # post-click delay elapses before returning
        assert mock_time.now() == 1.75
        assert mock_time.waits == [0.25, 0.5, 1.0]

    def test_does_not_poll_again_after_click(self, make_poller):
        poller, engine = make_poller(True, True, True)

        poller.find_image_and_click("button.png")

        assert engine.find_one_calls == 1
        assert engine.captures == engine.disposals == 1

    def test_uses_settings_click_delays(self, make_poller, mock_time, settings):
        poller, engine = make_poller(True)

        poller.find_image_and_click("button.png")

        assert mock_time.waits == [settings.pre_click_delay, settings.post_click_delay]

    def test_no_click_on_timeout(self, make_poller):
        poller, engine = make_poller()

        assert poller.find_image_and_click("button.png", timeout=0.25, interval=0.125) is None
        assert engine.clicks == []

    def test_click_error_propagates_and_handle_is_released(self, make_poller):
        poller, engine = make_poller(True, click_error=InputControlError("no mouse"))

        with pytest.raises(InputControlError, match="no mouse"):
            poller.find_image_and_click("button.png")

        assert engine.disposals == engine.captures == 1


class TestIsInMainUI:
    """is_in_main_ui marker check."""

    def test_true_when_marker_found(self, make_poller):
        poller, engine = make_poller(False, True)
        poller.main_ui_marker = "menu.png"

        assert poller.is_in_main_ui() is True
        assert engine.loaded_paths == ["menu.png"]

    def test_false_when_marker_never_found(self, make_poller):
        poller, engine = make_poller()
        poller.main_ui_marker = "menu.png"

        assert poller.is_in_main_ui() is False

    def test_requires_configured_marker(self, make_poller):
        poller, _ = make_poller()

        with pytest.raises(ConfigurationError) as exc_info:
            poller.is_in_main_ui()

        assert exc_info.value.config_key == "main_ui_marker"


def test_match_result_click_requires_existing_match():
    with pytest.raises(InputControlError):
        MatchResult.empty().click()
