"""Tests for RecognitionPoller.load_images argument handling."""

from pathlib import Path

import pytest

from uipoll.exceptions import InvalidArgumentError, UipollRuntimeException
from uipoll.mock import MockImage


def test_single_path_returns_one_image(make_poller):
    poller, engine = make_poller()

    image = poller.load_images("assets/start.png")

    assert image == MockImage("assets/start.png")
    assert engine.loaded_paths == ["assets/start.png"]


def test_path_objects_are_accepted(make_poller):
    poller, engine = make_poller()

    images = poller.load_images([Path("a.png"), "b.png"])

    assert images == [MockImage("a.png"), MockImage("b.png")]


def test_sequence_keeps_input_order(make_poller):
    poller, engine = make_poller()

    images = poller.load_images(("c.png", "a.png", "b.png"))

    assert [image.path for image in images] == ["c.png", "a.png", "b.png"]


def test_none_is_rejected(make_poller):
    poller, _ = make_poller()

    with pytest.raises(InvalidArgumentError) as exc_info:
        poller.load_images(None)

    assert exc_info.value.index is None


def test_empty_element_reports_its_index(make_poller):
    poller, engine = make_poller()

    with pytest.raises(InvalidArgumentError, match=r"paths\[1\]") as exc_info:
        poller.load_images(["a.png", "", "c.png"])

    assert exc_info.value.index == 1
    # Nothing is loaded when validation fails
    assert engine.loaded_paths == []


def test_non_string_element_reports_its_index(make_poller):
    poller, _ = make_poller()

    with pytest.raises(InvalidArgumentError) as exc_info:
        poller.load_images(["a.png", "b.png", 42])

    assert exc_info.value.index == 2


@pytest.mark.parametrize("value", [42, {"path": "a.png"}, b"a.png"])
def test_wrong_type_is_rejected(make_poller, value):
    poller, _ = make_poller()

    with pytest.raises(InvalidArgumentError):
        poller.load_images(value)


def test_invalid_argument_is_a_runtime_exception(make_poller):
    poller, _ = make_poller()

    with pytest.raises(UipollRuntimeException):
        poller.load_images("")


def test_engine_load_errors_propagate_unchanged(make_poller):
    poller, _ = make_poller(missing_paths=["missing.png"])

    with pytest.raises(FileNotFoundError):
        poller.load_images(["ok.png", "missing.png"])
