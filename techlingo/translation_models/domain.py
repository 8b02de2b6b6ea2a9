"""Detection of the subject domain of a text by keyword frequency."""

from __future__ import annotations

from collections.abc import Iterable

from techlingo.translation_models.models import Domain, TranslationError

_TECHNICAL_TERMS = [
    "מערכת",
    "התקנה",
    "צינור",
    "משאבה",
    "לחץ",
    "ספיקה",
    "מגוף",
    "ברז",
    "מתזים",
    "ספרינקלרים",
]

_LEGAL_TERMS = [
    "חוזה",
    "תקנה",
    "תקן",
    "אישור",
    "רישיון",
    "הסכם",
    "התחייבות",
    "אחריות",
]


class DomainModel:
    """Scores a text against per-domain term lists and picks the best domain."""

    def __init__(self) -> None:
        self._terms: dict[Domain, list[str]] = {
            Domain.TECHNICAL: list(_TECHNICAL_TERMS),
            Domain.LEGAL: list(_LEGAL_TERMS),
        }
        self._weights: dict[Domain, float] = {
            Domain.TECHNICAL: 1.0,
            Domain.LEGAL: 0.8,
            Domain.GENERAL: 0.6,
        }

    @property
    def terms(self) -> dict[Domain, list[str]]:
        """A copy of the term lists per domain."""
        return {domain: list(terms) for domain, terms in self._terms.items()}

    @property
    def weights(self) -> dict[Domain, float]:
        """A copy of the weight per domain."""
        return dict(self._weights)

    def detect(self, text: str) -> Domain:
        """Return the domain whose terms score highest in the text."""
        if not self._terms:
            return Domain.GENERAL
        return max(self._terms, key=lambda domain: self._score(text, self._terms[domain]))

    def _score(self, text: str, terms: Iterable[str]) -> float:
        lowered = text.lower()
        score = float(sum(lowered.count(term.lower()) for term in terms))
        word_count = len(lowered.split())
        if word_count:
            score /= word_count
        # Scores are scaled by the technical weight for every domain.
        weight = self._weights.get(Domain.TECHNICAL)
        if weight is not None:
            score *= weight
        return score

    def add_term(self, domain: Domain, term: str) -> None:
        """Add a term to a domain that already has a term list."""
        terms = self._terms.get(domain)
        if terms is not None:
            terms.append(term)

    def update_weight(self, domain: Domain, weight: float) -> None:
        self._weights[domain] = weight

    def train(self, texts: Iterable[tuple[str, Domain]]) -> None:
        """Move each domain's weight halfway towards its score on verified texts."""
        for text, domain in texts:
            terms = self._terms.get(domain)
            if terms is None:
                raise TranslationError(
                    TranslationError.Kind.MODEL, f"no terms for domain {domain}"
                )
            score = self._score(text, terms)
            current = self._weights.get(domain, 1.0)
            self._weights[domain] = (current + score) / 2.0