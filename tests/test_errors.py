"""Tests for error handling, generation context and settings."""

import threading

import pytest
from slirules.config.settings import Settings
from slirules.core.context import GenerationContext, background
from slirules.core.errors import (
    ConfigurationError,
    ExitCode,
    GenerationCancelledError,
    SLIRuleGenerationError,
    SpecLoadError,
    TemplateRenderError,
    format_error_message,
    main_with_error_handling,
)


class TestErrorHierarchy:
    """Tests for exit codes of the error hierarchy."""

    def test_template_errors_are_configuration_errors(self):
        assert issubclass(TemplateRenderError, ConfigurationError)
        assert TemplateRenderError("x").exit_code == ExitCode.CONFIG_ERROR

    def test_generation_error_exit_code(self):
        assert SLIRuleGenerationError("x").exit_code == ExitCode.CONFIG_ERROR

    def test_spec_load_error_exit_code(self):
        assert SpecLoadError("x").exit_code == ExitCode.VALIDATION_ERROR

    def test_cancelled_exit_code(self):
        assert GenerationCancelledError("x").exit_code == ExitCode.CANCELLED

    def test_details_default_empty(self):
        assert ConfigurationError("x").details == {}


class TestFormatErrorMessage:
    """Tests for format_error_message."""

    def test_message_only(self):
        assert format_error_message(ConfigurationError("bad query")) == "bad query"

    def test_message_with_details(self):
        error = SLIRuleGenerationError("bad query", details={"slo_id": "a", "window": "5m"})

        assert format_error_message(error) == "bad query (slo_id=a, window=5m)"


class TestMainWithErrorHandling:
    """Tests for the CLI error handling decorator."""

    def test_success_passthrough(self):
        @main_with_error_handling()
        def command():
            return 0

        assert command() == 0

    def test_slirules_error_returns_exit_code(self):
        @main_with_error_handling()
        def command():
            raise SpecLoadError("missing", details={"path": "x.yaml"})

        assert command() == ExitCode.VALIDATION_ERROR

    def test_slirules_error_printed_with_details(self, capsys):
        """Test the user sees the message and its details."""

        @main_with_error_handling(log_errors=False)
        def command():
            raise SpecLoadError("bad label", details={"label": "enabled"})

        command()

        out = capsys.readouterr().out
        assert "bad label (label=enabled)" in out

    def test_query_brackets_survive_error_output(self, capsys):
        @main_with_error_handling(log_errors=False)
        def command():
            raise TemplateRenderError("no key in rate(x[{{.w}}])")

        command()

        assert "rate(x[{{.w}}])" in capsys.readouterr().out

    def test_keyboard_interrupt(self):
        @main_with_error_handling()
        def command():
            raise KeyboardInterrupt

        assert command() == ExitCode.CANCELLED

    def test_unexpected_error(self):
        @main_with_error_handling(log_errors=False)
        def command():
            raise RuntimeError("boom")

        assert command() == ExitCode.UNKNOWN_ERROR


class TestGenerationContext:
    """Tests for GenerationContext."""

    def test_background_never_cancelled(self):
        ctx = background()

        ctx.check()
        assert not ctx.cancelled
        assert not ctx.expired

    def test_cancel(self):
        ctx = GenerationContext()
        ctx.cancel()

        with pytest.raises(GenerationCancelledError, match="cancelled"):
            ctx.check()

    def test_shared_event(self):
        """Test a caller-owned event cancels the context."""
        event = threading.Event()
        ctx = GenerationContext(cancel_event=event)

        event.set()

        assert ctx.cancelled

    def test_deadline(self):
        ctx = GenerationContext.with_timeout(-1)

        with pytest.raises(GenerationCancelledError, match="deadline"):
            ctx.check()

    def test_future_deadline_ok(self):
        GenerationContext.with_timeout(3600).check()


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("SLIRULES_DEDUPE_TOTAL_WINDOW", raising=False)
        monkeypatch.delenv("SLIRULES_DEFAULT_TIME_WINDOW", raising=False)

        settings = Settings()

        assert settings.default_time_window == "30d"
        assert settings.dedupe_total_window is False
        assert settings.rule_group_interval == "30s"

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("SLIRULES_DEDUPE_TOTAL_WINDOW", "true")
        monkeypatch.setenv("SLIRULES_DEFAULT_TIME_WINDOW", "28d")

        settings = Settings()

        assert settings.dedupe_total_window is True
        assert settings.default_time_window == "28d"
