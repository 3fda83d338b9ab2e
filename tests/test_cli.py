from __future__ import annotations

from typer.testing import CliRunner

from creational_demos.cli.main import app

runner = CliRunner()


def test_runs_selected_demos():
    result = runner.invoke(app, ["--no-banner", "--factory-method", "windows", "--builder", "sport"])

    assert result.exit_code == 0
    assert "Windows button rendered!" in result.output
    assert "Button click handler added!" in result.output
    assert "2 seat(s)" in result.output


def test_missing_value_prints_usage_and_exits_zero():
    result = runner.invoke(app, ["--no-banner", "--builder"])

    assert result.exit_code == 0
    assert "Invalid value '' for argument '--builder'" in result.output
    assert "- sport" in result.output
    assert "- suv" in result.output


def test_every_demo_reports_its_own_options():
    result = runner.invoke(
        app,
        ["--no-banner", "--factory-method", "x", "--abstract-factory", "x", "--builder", "x"],
    )

    assert result.exit_code == 0
    for option in ("web", "mac", "windows", "sport", "suv"):
        assert f"- {option}" in result.output


def test_no_flags_prints_hint():
    result = runner.invoke(app, ["--no-banner"])

    assert result.exit_code == 0
    assert "No demo selected" in result.output
    assert "--abstract-factory" in result.output


def test_banner_shown_by_default():
    result = runner.invoke(app, ["--abstract-factory", "mac"])

    assert result.exit_code == 0
    assert "Creational Demos" in result.output
    assert "Mac button rendered!" in result.output


def test_language_option():
    result = runner.invoke(app, ["--no-banner", "--lang", "pt", "--factory-method", "web"])

    assert result.exit_code == 0
    assert "Botão no estilo HTML renderizado!" in result.output


def test_language_from_settings(monkeypatch):
    monkeypatch.setenv("CREATIONAL_DEMOS_DEFAULT_LANGUAGE", "pt")
    monkeypatch.setenv("CREATIONAL_DEMOS_SHOW_BANNER", "false")

    result = runner.invoke(app, ["--abstract-factory", "windows"])

    assert result.exit_code == 0
    assert "Creational Demos" not in result.output
    assert "Botão Windows renderizado!" in result.output


def test_invalid_log_level_setting_falls_back_to_defaults(monkeypatch):
    monkeypatch.setenv("CREATIONAL_DEMOS_LOG_LEVEL", "chatty")

    result = runner.invoke(app, ["--no-banner", "--builder", "suv"])

    assert result.exit_code == 0
    assert "5 seat(s)" in result.output


def test_invalid_language_setting_falls_back_to_english(monkeypatch):
    monkeypatch.setenv("CREATIONAL_DEMOS_DEFAULT_LANGUAGE", "fr")

    result = runner.invoke(app, ["--no-banner", "--factory-method", "web"])

    assert result.exit_code == 0
    assert "HTML button rendered!" in result.output


def test_demo_value_that_looks_like_a_global_option_reaches_the_demo():
    result = runner.invoke(app, ["--no-banner", "--builder", "-v"])

    assert result.exit_code == 0
    assert "Invalid value '-v' for argument '--builder'" in result.output
