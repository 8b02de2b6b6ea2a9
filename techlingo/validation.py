"""Validation report collecting errors, warnings and suggestions."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ValidationReport:
    """Outcome of validating a translation or document."""

    is_valid: bool
    confidence_score: float
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)

    def add_error(self, error: str) -> None:
        self.errors.append(error)

    def add_warning(self, warning: str) -> None:
        self.warnings.append(warning)

    def add_suggestion(self, suggestion: str) -> None:
        self.suggestions.append(suggestion)

    def update_confidence(self, new_score: float) -> None:
        self.confidence_score = new_score

    def has_errors(self) -> bool:
        return bool(self.errors)

    def has_warnings(self) -> bool:
        return bool(self.warnings)

    def has_suggestions(self) -> bool:
        return bool(self.suggestions)