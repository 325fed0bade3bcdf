import json
from fractions import Fraction

import pytest

from flipbook.animation.frame_timing_generator import (
    effective_iterations,
    frame_windows,
    generate,
    parse_iterations,
)
from flipbook.animation.frame_timing_schema import (
    INFINITE,
    AnimationSpec,
    InvalidArgument,
    PlaybackDirection,
)


@pytest.mark.parametrize("frame_count", [1, 2, 3, 7, 12, 100])
def test_windows_cover_full_timeline(frame_count):
    spec = generate(frame_count)
    windows = spec.frame_windows
    assert len(windows) == frame_count
    assert windows[0].start_percent == 0
    assert windows[-1].end_percent == pytest.approx(100)
    assert [w.frame_index for w in windows] == list(range(1, frame_count + 1))
    for current, following in zip(windows, windows[1:]):
        assert current.end_percent == following.start_percent


def test_window_spans_are_equal():
    for window in frame_windows(8):
        assert window.span == pytest.approx(12.5)


def test_total_duration_is_count_times_rate():
    assert generate(12, 0.1).total_duration == 12 * 0.1
    assert generate(4, 0.5).total_duration == 2.0


def test_scenario_defaults():
    spec = generate(3)
    assert spec.frame_rate == 0.25
    assert spec.total_duration == pytest.approx(0.75)
    assert spec.direction is PlaybackDirection.ALTERNATE
    assert spec.effective_iterations == INFINITE
    assert spec.is_infinite
    assert spec.timing_function == "steps(1)"
    bounds = [(w.frame_index, w.start_percent, w.end_percent) for w in spec.frame_windows]
    assert bounds == [
        (1, 0, pytest.approx(33.33, abs=0.01)),
        (2, pytest.approx(33.33, abs=0.01), pytest.approx(66.67, abs=0.01)),
        (3, pytest.approx(66.67, abs=0.01), 100),
    ]


def test_scenario_finite_normal():
    spec = generate(12, 0.1, False, 2)
    assert spec.total_duration == pytest.approx(1.2)
    assert spec.direction is PlaybackDirection.NORMAL
    assert spec.effective_iterations == 2
    assert len(spec.frame_windows) == 12
    assert all(w.span == pytest.approx(8.33, abs=0.01) for w in spec.frame_windows)


def test_alternate_doubles_finite_iterations():
    assert generate(3, alternate=True, iterations=4).effective_iterations == 8
    assert effective_iterations(1, True) == 2


def test_normal_keeps_iterations():
    assert generate(3, alternate=False, iterations=5).effective_iterations == 5
    assert generate(3, alternate=False).effective_iterations == INFINITE


def test_infinite_passes_through_regardless_of_direction():
    assert effective_iterations(INFINITE, True) == INFINITE
    assert effective_iterations(INFINITE, False) == INFINITE


def test_generate_is_deterministic():
    first = generate(5, 0.2, True, 3)
    second = generate(5, 0.2, True, 3)
    assert first == second
    assert first.to_dict() == second.to_dict()


def test_spec_is_immutable():
    spec = generate(2)
    with pytest.raises(AttributeError):
        spec.frame_count = 4


@pytest.mark.parametrize(
    "args, parameter",
    [
        ((0,), "frame_count"),
        ((-1,), "frame_count"),
        ((2.5,), "frame_count"),
        ((3.0,), "frame_count"),
        ((True,), "frame_count"),
        ((3, 0), "frame_rate"),
        ((3, -0.5), "frame_rate"),
        ((3, float("nan")), "frame_rate"),
        ((3, float("inf")), "frame_rate"),
        ((3, "fast"), "frame_rate"),
        ((3, 10**400), "frame_rate"),
        ((3, 1e308), "frame_rate"),
        ((3, 0.25, "yes"), "alternate"),
        ((3, 0.25, True, 0), "iterations"),
        ((3, 0.25, True, -2), "iterations"),
        ((3, 0.25, True, 1.5), "iterations"),
        ((3, 0.25, True, "forever"), "iterations"),
    ],
)
def test_invalid_arguments_rejected(args, parameter):
    with pytest.raises(InvalidArgument) as excinfo:
        generate(*args)
    assert excinfo.value.parameter == parameter
    assert parameter in str(excinfo.value)


def test_invalid_argument_is_value_error():
    with pytest.raises(ValueError):
        generate(0)


def test_integer_frame_rate_accepted():
    assert generate(2, 1).total_duration == 2


@pytest.mark.parametrize("text, expected", [("infinite", INFINITE), ("INFINITE", INFINITE), (" 3 ", 3), ("1", 1)])
def test_parse_iterations(text, expected):
    assert parse_iterations(text) == expected


@pytest.mark.parametrize("text", ["0", "-1", "2.5", "", "always"])
def test_parse_iterations_rejects_malformed(text):
    with pytest.raises(InvalidArgument):
        parse_iterations(text)


def test_to_json_flattens_enums():
    data = generate(2, 0.5, True, 1).to_dict()
    assert data["direction"] == "alternate"
    assert data["effective_iterations"] == 2
    assert data["frame_windows"][1] == {"frame_index": 2, "start_percent": 50.0, "end_percent": 100.0}
    assert '"timing_function": "steps(1)"' in generate(2).to_json()


def test_spec_constructed_directly_compares_structurally():
    spec = generate(1)
    clone = AnimationSpec(**{f: getattr(spec, f) for f in spec.__dataclass_fields__})
    assert clone == spec


def test_rational_frame_rate_is_stored_as_float():
    spec = generate(3, Fraction(1, 4), True, 2)
    assert type(spec.frame_rate) is float
    assert spec.frame_rate == 0.25
    assert spec.total_duration == 0.75
    data = json.loads(spec.to_json())
    assert data["frame_rate"] == 0.25
    assert data["total_duration"] == 0.75
