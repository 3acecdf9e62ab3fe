"""Tests for HALRecognitionEngine with in-memory backends."""

import pytest
from PIL import Image

from uipoll.engine import HALRecognitionEngine, MatchResult
from uipoll.exceptions import ScreenCaptureException
from uipoll.hal.interfaces import (
    IMouseController,
    IOCREngine,
    IPatternMatcher,
    IScreenCapture,
    Match,
    MouseButton,
    TextRegion,
)
from uipoll.model import Region


class FakeCapture(IScreenCapture):
    def __init__(self, size=(400, 300), origin=(0, 0)):
        self.size = size
        self.origin = origin
        self.images = []

    def capture_screen(self):
        image = Image.new("RGB", self.size, color="black")
        self.images.append(image)
        return image

    def get_screen_origin(self):
        return self.origin


class FakeMatcher(IPatternMatcher):
    def __init__(self, match=None):
        self.match = match
        self.calls = []

    def find_pattern(self, haystack, needle, confidence=0.9, grayscale=False):
        self.calls.append((haystack.size, needle, confidence))
        return self.match


class FakeOCR(IOCREngine):
    def __init__(self, regions=()):
        self.regions = list(regions)
        self.calls = []

    def get_text_regions(self, image, languages=None, min_confidence=0.0):
        self.calls.append((image.size, languages, min_confidence))
        return self.regions


class FakeMouse(IMouseController):
    def __init__(self):
        self.clicks = []

    def mouse_click(self, x=None, y=None, button=MouseButton.LEFT, clicks=1):
        self.clicks.append((x, y))
        return True


@pytest.fixture
def capture():
    return FakeCapture()


@pytest.fixture
def mouse():
    return FakeMouse()


def build_engine(capture, mouse, matcher=None, ocr=None, **kwargs):
    return HALRecognitionEngine(
        capture=capture,
        matcher=matcher or FakeMatcher(),
        ocr_engine=ocr or FakeOCR(),
        mouse=mouse,
        **kwargs,
    )


def test_load_image_returns_rgb_copy(tmp_path, capture, mouse):
    path = tmp_path / "marker.png"
    Image.new("RGBA", (8, 6), color=(255, 0, 0, 128)).save(path)
    engine = build_engine(capture, mouse)

    image = engine.load_image(path)

    assert image.mode == "RGB"
    assert image.size == (8, 6)


def test_load_image_missing_file_propagates(tmp_path, capture, mouse):
    engine = build_engine(capture, mouse)

    with pytest.raises(FileNotFoundError):
        engine.load_image(tmp_path / "missing.png")


def test_find_one_offsets_match_into_screen_coordinates(capture, mouse):
    matcher = FakeMatcher(Match(x=5, y=6, width=10, height=12, confidence=0.93))
    engine = build_engine(capture, mouse, matcher=matcher)
    needle = Image.new("RGB", (10, 12))

    with engine.capture_region() as handle:
        result = handle.find_one(engine.template_match(needle, Region(100, 50, 200, 100), 0.7))

    assert result.exists
    assert result.bounds == (105, 56, 10, 12)
    assert result.confidence == pytest.approx(0.93)
    haystack_size, passed_needle, confidence = matcher.calls[0]
    assert haystack_size == (200, 100)
    assert passed_needle is needle
    assert confidence == 0.7


def test_find_one_falls_back_to_engine_threshold(capture, mouse):
    matcher = FakeMatcher()
    engine = build_engine(capture, mouse, matcher=matcher, threshold=0.66)

    with engine.capture_region() as handle:
        result = handle.find_one(engine.template_match(Image.new("RGB", (2, 2)), Region()))

    assert result.is_empty()
    assert matcher.calls[0][2] == 0.66


def test_region_is_clipped_to_capture(capture, mouse):
    matcher = FakeMatcher()
    engine = build_engine(capture, mouse, matcher=matcher)

    with engine.capture_region() as handle:
        handle.find_one(engine.template_match(Image.new("RGB", (2, 2)), Region(300, 200, 500, 500)))

    assert matcher.calls[0][0] == (100, 100)


def test_region_outside_capture_finds_nothing(capture, mouse):
    matcher = FakeMatcher(Match(0, 0, 1, 1, 1.0))
    ocr = FakeOCR([TextRegion("x", 0, 0, 1, 1, 1.0)])
    engine = build_engine(capture, mouse, matcher=matcher, ocr=ocr)
    outside = Region(1000, 1000, 10, 10)

    with engine.capture_region() as handle:
        assert handle.find_one(engine.template_match(Image.new("RGB", (1, 1)), outside)).is_empty()
        assert handle.find_all(engine.ocr(outside)) == []

    assert matcher.calls == []
    assert ocr.calls == []


def test_monitor_origin_is_applied(mouse):
    capture = FakeCapture(origin=(1920, 0))
    matcher = FakeMatcher(Match(x=1, y=2, width=4, height=4, confidence=1.0))
    engine = build_engine(capture, mouse, matcher=matcher)

    with engine.capture_region() as handle:
        result = handle.find_one(engine.template_match(Image.new("RGB", (4, 4)), Region(1930, 10, 50, 50)))

    assert matcher.calls[0][0] == (50, 50)
    assert result.bounds == (1931, 12, 4, 4)


def test_find_all_returns_fragments_in_order(capture, mouse):
    ocr = FakeOCR(
        [
            TextRegion("Start Game", 10, 20, 80, 16, 0.97),
            TextRegion("Options", 10, 50, 60, 16, 0.91),
        ]
    )
    engine = build_engine(capture, mouse, ocr=ocr, languages=["en", "ch_sim"], min_confidence=0.4)

    with engine.capture_region() as handle:
        fragments = handle.find_all(engine.ocr(Region(100, 100, 200, 150)))

    assert [fragment.text for fragment in fragments] == ["Start Game", "Options"]
    assert all(fragment.exists for fragment in fragments)
    assert fragments[0].bounds == (110, 120, 80, 16)
    assert ocr.calls == [((200, 150), ["en", "ch_sim"], 0.4)]


def test_click_targets_match_center(capture, mouse):
    matcher = FakeMatcher(Match(x=0, y=0, width=20, height=10, confidence=1.0))
    engine = build_engine(capture, mouse, matcher=matcher)

    with engine.capture_region() as handle:
        result = handle.find_one(engine.template_match(Image.new("RGB", (20, 10)), Region(40, 60, 100, 100)))

    result.click()

    assert mouse.clicks == [(50, 65)]


def test_descriptor_kind_is_checked(capture, mouse):
    engine = build_engine(capture, mouse)

    with engine.capture_region() as handle:
        with pytest.raises(TypeError):
            handle.find_one(engine.ocr(Region()))
        with pytest.raises(TypeError):
            handle.find_all(engine.template_match(None, Region()))


def test_dispose_releases_screenshot(capture, mouse):
    engine = build_engine(capture, mouse)

    handle = engine.capture_region()
    handle.dispose()
    handle.dispose()

    assert handle.disposed
    with pytest.raises(ScreenCaptureException):
        handle.find_all(engine.ocr(Region()))


def test_context_manager_disposes_on_error(capture, mouse):
    engine = build_engine(capture, mouse)

    with pytest.raises(RuntimeError):
        with engine.capture_region() as handle:
            raise RuntimeError("boom")

    assert handle.disposed


def test_match_result_is_created_per_attempt(capture, mouse):
    matcher = FakeMatcher(Match(x=0, y=0, width=2, height=2, confidence=1.0))
    engine = build_engine(capture, mouse, matcher=matcher)
    descriptor = engine.template_match(Image.new("RGB", (2, 2)), Region())

    with engine.capture_region() as first:
        a = first.find_one(descriptor)
    with engine.capture_region() as second:
        b = second.find_one(descriptor)

    assert isinstance(a, MatchResult)
    assert a is not b
    assert len(capture.images) == 2


def test_text_region_from_quad():
    region = TextRegion.from_quad(
        [[10.4, 20.0], [58.9, 21.0], [58.9, 40.7], [10.4, 40.0]], "Start", 0.93
    )

    assert region.bounds == (10, 20, 48, 20)
    assert region.text == "Start"
    assert region.confidence == pytest.approx(0.93)
