"""Tests for CLI rendering utilities."""
from protodemo.core.errors import ConstructorInvocationError
from protodemo.core.objects import ProtoObject
from protodemo.presentation.cli.render import (
    render_bullet_lines,
    render_diagnostic,
    render_heading,
    render_value,
)


def test_render_heading(capsys) -> None:
    render_heading("Factories")
    assert capsys.readouterr().out == "\n=== Factories ===\n"


def test_render_value_uses_object_literal_form(capsys) -> None:
    render_value("v1", ProtoObject(x=0, y=0))
    assert capsys.readouterr().out == "v1: {x: 0, y: 0}\n"


def test_render_bullet_lines(capsys) -> None:
    render_bullet_lines(["a", "b"])
    assert capsys.readouterr().out == "- a\n- b\n"


def test_render_diagnostic_names_error_type(capsys) -> None:
    render_diagnostic(ConstructorInvocationError("Class constructor Person cannot be invoked without 'new'"))
    assert capsys.readouterr().out == (
        "ConstructorInvocationError: Class constructor Person cannot be invoked without 'new'\n"
    )
