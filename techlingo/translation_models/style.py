"""Detection of the writing style of a text."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from techlingo.translation_models.models import Style


@dataclass
class StyleFeatures:
    """Words and phrases typical of a style, with its formality level."""

    characteristic_words: list[str] = field(default_factory=list)
    syntax_patterns: list[str] = field(default_factory=list)
    formality_level: float = 0.0


def _default_features() -> dict[Style, StyleFeatures]:
    return {
        Style.FORMAL: StyleFeatures(
            ["להלן", "בהתאם", "לפיכך", "כדלקמן", "באמצעות", "בהתייחס"],
            ["יש לציין כי", "ניתן לקבוע כי", "בהתאם לאמור"],
            0.9,
        ),
        Style.PROFESSIONAL: StyleFeatures(
            ["מערכת", "מפרט", "תקן", "נתונים", "ביצועים", "יעילות"],
            ["בהתאם למפרט", "על פי התקן", "בהתאם לדרישות"],
            0.7,
        ),
        Style.CASUAL: StyleFeatures(
            ["בערך", "בסדר", "פשוט", "רגיל", "כזה", "ככה"],
            ["אפשר גם", "זה בסדר", "פשוט צריך"],
            0.3,
        ),
    }


class StyleModel:
    """Scores a text against per-style features and picks the best style."""

    def __init__(self) -> None:
        self._features = _default_features()
        self._weights: dict[Style, float] = {
            Style.FORMAL: 1.0,
            Style.PROFESSIONAL: 0.8,
            Style.CASUAL: 0.6,
        }

    @property
    def features(self) -> dict[Style, StyleFeatures]:
        """A copy of the features per style."""
        return {
            style: StyleFeatures(
                list(f.characteristic_words), list(f.syntax_patterns), f.formality_level
            )
            for style, f in self._features.items()
        }

    @property
    def weights(self) -> dict[Style, float]:
        """A copy of the weight per style."""
        return dict(self._weights)

    def detect(self, text: str) -> Style:
        """Return the style whose features score highest in the text."""
        if not self._features:
            return Style.CASUAL
        return max(self._features, key=lambda style: self._score(text, self._features[style]))

    @staticmethod
    def _score(text: str, features: StyleFeatures) -> float:
        lowered = text.lower()
        score = float(sum(lowered.count(w.lower()) for w in features.characteristic_words))
        score += 2.0 * sum(lowered.count(p.lower()) for p in features.syntax_patterns)
        word_count = len(lowered.split())
        if word_count:
            score /= word_count
        return score * features.formality_level

    def add_feature(self, style: Style, word: str, is_pattern: bool) -> None:
        """Add a word or a phrase pattern to a style that has features."""
        features = self._features.get(style)
        if features is None:
            return
        if is_pattern:
            features.syntax_patterns.append(word)
        else:
            features.characteristic_words.append(word)

    def update_formality(self, style: Style, level: float) -> None:
        features = self._features.get(style)
        if features is not None:
            features.formality_level = level

    def train(self, texts: Iterable[tuple[str, Style]]) -> None:
        """Move each style's weight halfway towards its score on verified texts."""
        for text, style in texts:
            features = self._features.get(style)
            if features is None:
                continue
            score = self._score(text, features)
            current = self._weights.get(style, 1.0)
            self._weights[style] = (current + score) / 2.0