"""Extraction of bilingual Hebrew/Russian technical terms from free text."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from techlingo.translation import Language

_HE_WORD = re.compile("[\u0590-\u05FF\u0483-\u0489]+")
_RU_WORD = re.compile("[\u0400-\u04FF\u0483-\u0489]+")
_HE_LETTER = re.compile("[\u05D0-\u05EA]")
_RU_LETTER = re.compile("[\u0400-\u04FF]")

_TERM_PATTERNS: dict[str, re.Pattern[str]] = {
    "standard": re.compile(
        r"(ГОСТ|СНиП|СП|ТУ|ISO|תקן ישראלי|ת״י)\s*[-\d.]+", re.IGNORECASE
    ),
    "requirement": re.compile("(?:דרישות|требования)\\s+[\u0590-\u05FF\u0400-\u04FF]+"),
    "system": re.compile("(?:מערכת|система)\\s+[\u0590-\u05FF\u0400-\u04FF]+"),
    "test": re.compile("(?:בדיקות|испытания)\\s+[\u0590-\u05FF\u0400-\u04FF]+"),
}

_DOMAINS = {
    "standard": "standards",
    "requirement": "requirements",
    "system": "systems",
    "test": "testing",
}

_CONTEXT_KEYWORDS = ("בהקשר של", "в контексте", "для", "עבור")

_SOURCE_PATTERNS = ("ГОСТ", "СНиП", "СП", "ТУ", "ISO", "תקן ישראלי", 'ת"י', "מפרט כללי")

_RU_ENDINGS = sorted(
    [
        "ениями", "ениях", "ением", "ения", "ение", "ости", "ость",
        "ами", "ями", "ого", "его", "ому", "ему", "ыми", "ими", "ция", "ции", "ией",
        "ой", "ей", "ий", "ый", "ая", "яя", "ое", "ее", "ые", "ие",
        "ам", "ям", "ах", "ях", "ов", "ев", "ом", "ем",
        "а", "я", "о", "е", "ы", "и", "у", "ю", "ь",
    ],
    key=len,
    reverse=True,
)

_HE_ENDINGS = ("ים", "ות")


def _strip_ending(word: str, endings: tuple[str, ...] | list[str]) -> str:
    for ending in endings:
        if word.endswith(ending) and len(word) - len(ending) >= 2:
            return word[: -len(ending)]
    return word


def _stem_russian(word: str) -> str:
    return _strip_ending(word.lower(), _RU_ENDINGS)


def _stem_hebrew(word: str) -> str:
    return _strip_ending(word, _HE_ENDINGS)


def _dedup_adjacent(items: list[str]) -> list[str]:
    result: list[str] = []
    for item in items:
        if not result or result[-1] != item:
            result.append(item)
    return result


@dataclass
class ExtractedTerm:
    """A Hebrew/Russian term pair found in a text, with supporting details."""

    term_he: str
    term_ru: str
    domain: str = "general"
    context: str = ""
    examples: list[str] = field(default_factory=list)
    synonyms: list[str] = field(default_factory=list)
    source: str = ""
    confidence: float = 0.0


class TextAnalyzer:
    """Finds technical terms paragraph by paragraph and merges similar ones."""

    def __init__(self) -> None:
        self._context_cache: dict[str, str] = {}
        self.term_confidence: dict[str, float] = {}

    def analyze_text(self, text: str) -> list[ExtractedTerm]:
        """Return the terms found in the text, with similar terms merged."""
        terms: list[ExtractedTerm] = []
        for paragraph in self._split_to_paragraphs(text):
            language = self._detect_main_language(paragraph)
            for term in self._extract_terms(paragraph, language):
                term.context = self._extract_context(paragraph)
                term.confidence = self._calculate_confidence(term)
                terms.append(term)
        return self._merge_similar_terms(terms)

    @staticmethod
    def _split_to_paragraphs(text: str) -> list[str]:
        return [p.strip() for p in text.split("\n\n") if p.strip()]

    @staticmethod
    def _detect_main_language(text: str) -> Language:
        hebrew = len(_HE_LETTER.findall(text))
        russian = len(_RU_LETTER.findall(text))
        if hebrew == 0 and russian == 0:
            return Language.ENGLISH
        return Language.HEBREW if hebrew >= russian else Language.RUSSIAN

    def _extract_terms(self, text: str, language: Language) -> list[ExtractedTerm]:
        terms: list[ExtractedTerm] = []
        for pattern_type, pattern in _TERM_PATTERNS.items():
            for match in pattern.finditer(text):
                term = self._process_capture(match.group(0), pattern_type, language)
                if term is not None:
                    terms.append(term)

        words = text.split()
        for first, second in zip(words, words[1:]):
            if (_HE_WORD.search(first) and _RU_WORD.search(second)) or (
                _RU_WORD.search(first) and _HE_WORD.search(second)
            ):
                terms.append(self._term_from_pair(first, second))
        return terms

    def _process_capture(
        self, text: str, pattern_type: str, language: Language
    ) -> ExtractedTerm | None:
        words = text.split()
        if len(words) < 2:
            return None
        if language is Language.HEBREW:
            term_he, term_ru = words[0], words[1]
        elif language is Language.RUSSIAN:
            term_he, term_ru = words[1], words[0]
        else:
            return None
        return ExtractedTerm(
            term_he=term_he,
            term_ru=term_ru,
            domain=_DOMAINS.get(pattern_type, "general"),
            examples=self._generate_examples(term_he, term_ru),
            synonyms=self._find_synonyms(term_ru),
            source=self._detect_source(text),
        )

    @staticmethod
    def _term_from_pair(first: str, second: str) -> ExtractedTerm:
        if _HE_WORD.search(first):
            return ExtractedTerm(term_he=first, term_ru=second)
        return ExtractedTerm(term_he=second, term_ru=first)

    def _extract_context(self, text: str) -> str:
        cached = self._context_cache.get(text)
        if cached is not None:
            return cached

        context = ""
        open_pos = text.find("(")
        if open_pos >= 0:
            close_pos = text.find(")")
            if close_pos > open_pos:
                context = text[open_pos + 1 : close_pos]
        else:
            for keyword in _CONTEXT_KEYWORDS:
                start = text.find(keyword)
                if start >= 0:
                    rest = text[start:]
                    stop = rest.find(".")
                    context = (rest if stop < 0 else rest[:stop]).strip()
                    break

        self._context_cache[text] = context
        return context

    def _calculate_confidence(self, term: ExtractedTerm) -> float:
        confidence = 0.8
        if term.source:
            confidence += 0.1
        if term.context:
            confidence += 0.05
        if term.synonyms:
            confidence += 0.05
        self.term_confidence[f"{term.term_he}:{term.term_ru}"] = confidence
        return min(confidence, 1.0)

    def _merge_similar_terms(self, terms: list[ExtractedTerm]) -> list[ExtractedTerm]:
        merged: list[ExtractedTerm] = []
        for term in terms:
            for index, kept in enumerate(merged):
                if self._are_similar(kept, term):
                    merged[index] = self._merge(kept, term)
                    break
            else:
                merged.append(term)
        return merged

    @staticmethod
    def _are_similar(first: ExtractedTerm, second: ExtractedTerm) -> bool:
        return _stem_hebrew(first.term_he) == _stem_hebrew(second.term_he) or _stem_russian(
            first.term_ru
        ) == _stem_russian(second.term_ru)

    @staticmethod
    def _merge(first: ExtractedTerm, second: ExtractedTerm) -> ExtractedTerm:
        merged = ExtractedTerm(
            term_he=first.term_he,
            term_ru=first.term_ru,
            domain=first.domain,
            context=first.context,
            examples=_dedup_adjacent(first.examples + second.examples),
            synonyms=_dedup_adjacent(first.synonyms + second.synonyms),
            source=first.source,
            confidence=first.confidence,
        )
        if second.confidence > first.confidence:
            merged.source = second.source
            merged.confidence = second.confidence
        return merged

    @staticmethod
    def _generate_examples(term_he: str, term_ru: str) -> list[str]:
        return [
            f"התקנת {term_he}",
            f"בדיקת {term_he}",
            f"установка {term_ru}",
            f"проверка {term_ru}",
        ]

    @staticmethod
    def _find_synonyms(term_ru: str) -> list[str]:
        synonyms: list[str] = []
        if " " in term_ru:
            synonyms.append("".join(word[0] for word in term_ru.split()))
        if term_ru.endswith("ция"):
            synonyms.append(term_ru.replace("ция", "ка"))
        return synonyms

    @staticmethod
    def _detect_source(text: str) -> str:
        for pattern in _SOURCE_PATTERNS:
            start = text.find(pattern)
            if start < 0:
                continue
            rest = text[start:]
            stops = [i for i in (rest.find(" "), rest.find("\n")) if i >= 0]
            return rest[: min(stops)] if stops else rest
        return ""