"""Settings resolution: build a SettingsContainer and validate it step by step.

Each validation step has the signature
``(SettingsContainer, raw_value) -> ValidationResult`` and may populate
the container. Steps run in order and the first failure stops the
pipeline, so a later step never sees (or writes to) a container that an
earlier step rejected.

The base steps always run first, in this order:

1. minimum package age
2. include pattern
3. exclude pattern

Commands may append their own steps after these.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Callable, NamedTuple, Optional, Sequence

from pkgkeeper.config.duration import parse_duration
from pkgkeeper.models.config import CommandOptions
from pkgkeeper.models.settings import (
    ModalSettings,
    NuGetSources,
    SettingsContainer,
    UserSettings,
)
from pkgkeeper.models.validation import ValidationResult

logger = logging.getLogger(__name__)

ValidationStepFunc = Callable[[SettingsContainer, Any], ValidationResult]


class ValidationStep(NamedTuple):
    """A validation function paired with the raw value it checks."""

    func: ValidationStepFunc
    raw_value: Any


class PatternResult(NamedTuple):
    """Outcome of compiling a filter pattern.

    Exactly one of pattern and error is set when the input was non-blank.
    Both are None when the input was blank, meaning no filter.
    """

    pattern: Optional[re.Pattern]
    error: Optional[str] = None

    @property
    def is_valid(self) -> bool:
        return self.error is None


def compile_pattern(value: Optional[str]) -> PatternResult:
    """Compile a regex filter, treating blank input as no filter.

    Args:
        value: Raw pattern text.

    Returns:
        PatternResult with the compiled pattern, the syntax error, or
        neither for blank input.
    """
    if value is None or not value.strip():
        return PatternResult(pattern=None)

    try:
        return PatternResult(pattern=re.compile(value))
    except re.error as e:
        return PatternResult(pattern=None, error=str(e))


def populate_minimum_package_age(
    settings: SettingsContainer, value: str
) -> ValidationResult:
    min_package_age = parse_duration(value)
    if min_package_age is None:
        return ValidationResult.failure(
            f"Min package age '{value}' could not be parsed"
        )

    settings.user_settings.minimum_package_age = min_package_age
    return ValidationResult.success()


def _populate_pattern(
    settings: SettingsContainer, value: Optional[str], axis: str
) -> ValidationResult:
    result = compile_pattern(value)
    if not result.is_valid:
        return ValidationResult.failure(
            f"Unable to parse regex '{value}' for {axis}: {result.error}"
        )

    if axis == "Include":
        settings.user_settings.package_includes = result.pattern
    else:
        settings.user_settings.package_excludes = result.pattern
    return ValidationResult.success()


def populate_package_includes(
    settings: SettingsContainer, value: Optional[str]
) -> ValidationResult:
    return _populate_pattern(settings, value, "Include")


def populate_package_excludes(
    settings: SettingsContainer, value: Optional[str]
) -> ValidationResult:
    return _populate_pattern(settings, value, "Exclude")


def base_validation_steps(options: CommandOptions) -> list[ValidationStep]:
    """The fixed leading steps every command runs.

    Args:
        options: Layered command options.

    Returns:
        Steps for age, include and exclude, in that order.
    """
    return [
        ValidationStep(populate_minimum_package_age, options.age),
        ValidationStep(populate_package_includes, options.include),
        ValidationStep(populate_package_excludes, options.exclude),
    ]


def run_validation_steps(
    settings: SettingsContainer, steps: Sequence[ValidationStep]
) -> ValidationResult:
    """Run steps in order, stopping at the first failure.

    Args:
        settings: Container the steps populate.
        steps: Ordered validation steps.

    Returns:
        The first failed result, or success if every step passed.
    """
    for step in steps:
        result = step.func(settings, step.raw_value)
        if not result.is_success:
            return result
    return ValidationResult.success()


def make_settings(
    options: CommandOptions, modal_settings: Optional[ModalSettings] = None
) -> SettingsContainer:
    """Create an unvalidated container from the options that need no parsing."""
    return SettingsContainer(
        modal_settings=modal_settings or ModalSettings(),
        user_settings=UserSettings(
            allowed_change=options.change,
            nuget_sources=NuGetSources.from_values(options.sources),
        ),
    )


def resolve_settings(
    options: CommandOptions,
    extra_steps: Sequence[ValidationStep] = (),
    modal_settings: Optional[ModalSettings] = None,
) -> tuple[SettingsContainer, ValidationResult]:
    """Build and validate the settings for one command invocation.

    Args:
        options: Layered command options.
        extra_steps: Command-specific steps, run after the base steps.
        modal_settings: Non-user settings supplied by the command.

    Returns:
        The container and the pipeline result. The container must not be
        used when the result is a failure.
    """
    settings = make_settings(options, modal_settings)
    steps = base_validation_steps(options) + list(extra_steps)

    result = run_validation_steps(settings, steps)
    if result.is_success:
        logger.debug(
            "Settings resolved: change=%s, age=%s, sources=%s",
            settings.user_settings.allowed_change.value,
            settings.user_settings.minimum_package_age,
            settings.user_settings.nuget_sources.items
            if settings.user_settings.nuget_sources
            else "ambient",
        )
    return settings, result
