"""
Test Command-Line Driver and Configuration
==========================================

Usage:
    pytest test_cli.py
"""

import json
import logging

import pytest

from hyperbox_cli.cli import EXIT_DIMENSION_MISMATCH, EXIT_ERROR, main
from hyperbox_cli.parsing import parse_shape
from hyperbox_geometry import (
    DimensionMismatchError,
    HyperboxConfig,
    LoggingConfig,
    Point,
    Point2D,
    Rectangle,
    RenderConfig,
    Volume,
)
from hyperbox_geometry.logging import configure_logging, create_logger
from hyperbox_geometry.logging.events import ERROR_EVENTS


# ========== Parsing ==========

def test_parse_each_shape_kind():
    assert parse_shape("point2d:1,2") == Point2D(1, 2)
    assert parse_shape("point:1,2,3") == Point.of(1, 2, 3)
    assert parse_shape("rect:4,3:0,0") == Rectangle(Point2D(0, 0), Point2D(4, 3))
    assert parse_shape("volume:0,0,0:2,-3,4") == Volume(Point.of(0, -3, 0), Point.of(2, 0, 4))
    assert parse_shape("RECT:0,0:1,1") == Rectangle(Point2D(0, 0), Point2D(1, 1))


@pytest.mark.parametrize("text", [
    "cube:1,1",
    "point2d",
    "point2d:1,2,3",
    "point:1",
    "point:a,b",
    "rect:0,0",
    "rect:0,0,0:1,1,1",
    "volume:0,0:",
])
def test_parse_rejects_malformed_text(text):
    with pytest.raises(ValueError):
        parse_shape(text)


def test_parse_volume_with_unequal_corners():
    with pytest.raises(DimensionMismatchError):
        parse_shape("volume:0,0:1,1,1")


# ========== Commands ==========

def test_encapsulate_command(capsys):
    main(["encapsulate", "point2d:0,0", "point2d:4,3"])

    out = capsys.readouterr().out
    assert out == "Rectangle[Point(0.00, 0.00), Point(4.00, 3.00)] (Area: 12.00)\n"


def test_encapsulate_many_shapes(capsys):
    main(["encapsulate", "volume:0,0,0:2,2,2", "point:3,3,3", "point:-1,0,0"])

    out = capsys.readouterr().out
    assert "(Volume: 36.00)" in out


def test_encapsulate_dimension_mismatch_exit_code(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["encapsulate", "point2d:1,1", "point:0,0,0"])

    assert exc.value.code == EXIT_DIMENSION_MISMATCH
    assert "Cannot encapsulate Point2D (2D) with Point (3D)" in capsys.readouterr().err


def test_encapsulate_needs_two_shapes(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["encapsulate", "point2d:1,1"])
    assert exc.value.code == EXIT_ERROR


def test_invalid_shape_exit_code(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["volume", "cube:1,2"])

    assert exc.value.code == EXIT_ERROR
    assert "Invalid shape" in capsys.readouterr().err


def test_volume_command_with_decimals(capsys):
    main(["--decimals", "3", "volume", "rect:0,0:4,3"])

    out = capsys.readouterr().out
    assert out == (
        "Rectangle[Point(0.000, 0.000), Point(4.000, 3.000)] (Area: 12.000)"
        " -> hypervolume 12.000\n"
    )


@pytest.mark.parametrize("decimals", ["20", "-1"])
def test_decimals_override_is_validated(decimals, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--decimals", decimals, "volume", "point2d:0,0"])

    assert exc.value.code == EXIT_ERROR
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "decimals must be in [0, 12]" in captured.err


def test_compare_command(capsys):
    main(["compare", "rect:0,0:2,2", "rect:0,0:3,3"])

    out = capsys.readouterr().out
    assert "is smaller than" in out
    assert out.rstrip().endswith("(-1)")


def test_demo_command(capsys):
    main(["demo"])

    out = capsys.readouterr().out
    assert "Rectangle[Point(0.00, 0.00), Point(4.00, 3.00)] (Area: 12.00)" in out
    assert "Rectangle[Point(0.00, 0.00), Point(5.00, 5.00)] (Area: 25.00)" in out
    assert "(Volume: 24.00)" in out
    assert "(Volume: 27.00)" in out
    assert "rejected:" in out
    assert "(-1)" in out and "(1)" in out and "(0)" in out


def test_no_command_prints_help(capsys):
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == EXIT_ERROR


# ========== Configuration ==========

def test_config_defaults():
    config = HyperboxConfig()
    assert config.render.decimals == 2
    assert config.logging.level == "WARNING"


def test_config_from_yaml(tmp_path):
    path = tmp_path / "hyperbox.yaml"
    path.write_text("render:\n  decimals: 4\nlogging:\n  level: info\n")

    config = HyperboxConfig.from_yaml(path)

    assert config.render == RenderConfig(decimals=4)
    assert config.logging == LoggingConfig(level="INFO")


def test_config_missing_sections_use_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")

    assert HyperboxConfig.from_yaml(path) == HyperboxConfig()


@pytest.mark.parametrize("content", [
    "render:\n  decimals: 20\n",
    "render:\n  decimals: two\n",
    "logging:\n  level: LOUD\n",
    "render:\n  precision: 3\n",
    "render: [1, 2\n",
    "- just\n- a list\n",
])
def test_config_rejects_invalid_values(tmp_path, content):
    path = tmp_path / "bad.yaml"
    path.write_text(content)

    with pytest.raises(ValueError):
        HyperboxConfig.from_yaml(path)


def test_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        HyperboxConfig.from_yaml(tmp_path / "missing.yaml")


def test_cli_uses_config_precision(tmp_path, capsys):
    path = tmp_path / "hyperbox.yaml"
    path.write_text("render:\n  decimals: 1\n")

    main(["--config", str(path), "encapsulate", "point:0,0", "point:1,2"])

    assert capsys.readouterr().out == "Volume[Point(0.0, 0.0), Point(1.0, 2.0)] (Volume: 2.0)\n"


# ========== Logging ==========

def test_configure_logging_applies_level():
    structured = create_logger("algebra")
    try:
        configure_logging(LoggingConfig(level="DEBUG"))
        assert structured.logger.level == logging.DEBUG
    finally:
        configure_logging(LoggingConfig())
    assert structured.logger.level == logging.WARNING


def test_parsed_shapes_are_logged(tmp_path, caplog):
    path = tmp_path / "hyperbox.yaml"
    path.write_text("logging:\n  level: DEBUG\n")
    caplog.set_level(logging.DEBUG)
    try:
        main(["--config", str(path), "encapsulate", "point2d:0,0", "point2d:4,3"])
    finally:
        configure_logging(LoggingConfig())

    entries = [json.loads(r.getMessage()) for r in caplog.records if r.name == "hyperbox.parsing"]
    assert [e['event'] for e in entries] == ["shape.created", "shape.created"]
    assert all(e['level'] == "DEBUG" for e in entries)
    assert all(e['metadata'] == {'kind': 'point2d', 'dimensions': 2} for e in entries)


def test_parsing_is_quiet_at_default_level(caplog):
    caplog.set_level(logging.DEBUG)

    parse_shape("volume:0,0,0:1,1,1")

    assert [r for r in caplog.records if r.name == "hyperbox.parsing"] == []


def test_command_failure_is_logged(caplog, capsys):
    caplog.set_level(logging.ERROR, logger="hyperbox.cli")
    error_event_names = {event.value for event in ERROR_EVENTS}

    with pytest.raises(SystemExit):
        main(["encapsulate", "point2d:1,1", "point:0,0,0"])

    entries = [json.loads(r.getMessage()) for r in caplog.records if r.name == "hyperbox.cli"]
    errors = [e for e in entries if e['event'] in error_event_names]
    assert len(errors) == 1
    assert errors[0]['metadata'] == {'expected': 2, 'actual': 3}
    assert errors[0]['exception']['type'] == "DimensionMismatchError"
