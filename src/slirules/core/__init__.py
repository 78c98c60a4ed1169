"""Core error handling and generation context."""

from slirules.core.context import GenerationContext, background
from slirules.core.errors import (
    ConfigurationError,
    ExitCode,
    GenerationCancelledError,
    SLIRuleBuildError,
    SLIRuleGenerationError,
    SliRulesError,
    SpecLoadError,
    TemplateError,
    TemplateParseError,
    TemplateRenderError,
    ValidationError,
)

__all__ = [
    "ConfigurationError",
    "ExitCode",
    "GenerationCancelledError",
    "GenerationContext",
    "SLIRuleBuildError",
    "SLIRuleGenerationError",
    "SliRulesError",
    "SpecLoadError",
    "TemplateError",
    "TemplateParseError",
    "TemplateRenderError",
    "ValidationError",
    "background",
]
