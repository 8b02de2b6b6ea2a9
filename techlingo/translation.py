"""Segment-based translation with memory, dictionary and manual edits."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum


class Language(Enum):
    HEBREW = "he"
    RUSSIAN = "ru"
    ENGLISH = "en"


class TranslationStatus(Enum):
    AUTOMATIC = "automatic"
    MANUALLY_EDITED = "manually_edited"
    IN_REVIEW = "in_review"


@dataclass
class TranslationRequest:
    text: str
    source_language: Language
    target_language: Language


@dataclass
class TranslationSegment:
    original: str
    translated: str
    confidence: float
    alternatives: list[str] = field(default_factory=list)
    has_manual_edit: bool = False


@dataclass
class TranslationResult:
    original_text: str
    translated_text: str
    source_language: Language
    target_language: Language
    segments: list[TranslationSegment]
    manual_edits: dict[str, str]
    status: TranslationStatus


_SEGMENT_BREAK = re.compile(r"[.!?;\n]")

_SUPPORTED_PAIRS = {
    (Language.HEBREW, Language.RUSSIAN),
    (Language.RUSSIAN, Language.HEBREW),
}


class TranslationEngine:
    """Translates text segment by segment, preferring stored translations."""

    def __init__(
        self,
        translation_memory: dict[str, str] | None = None,
        custom_dictionary: dict[str, str] | None = None,
    ) -> None:
        self.translation_memory = dict(translation_memory or {})
        self.custom_dictionary = dict(custom_dictionary or {})
        self.manual_edits: dict[str, str] = {}

    async def translate(self, request: TranslationRequest) -> TranslationResult:
        """Translate the request; manual edits override automatic segments."""
        segments = []
        for text in self._split_into_segments(request.text):
            segment = self._translate_segment(text, request)
            edited = self.manual_edits.get(text)
            if edited is not None:
                segment.translated = edited
                segment.has_manual_edit = True
            segments.append(segment)
        status = (
            TranslationStatus.MANUALLY_EDITED
            if any(s.has_manual_edit for s in segments)
            else TranslationStatus.AUTOMATIC
        )
        return TranslationResult(
            original_text=request.text,
            translated_text=" ".join(s.translated for s in segments),
            source_language=request.source_language,
            target_language=request.target_language,
            segments=segments,
            manual_edits=dict(self.manual_edits),
            status=status,
        )

    def apply_manual_edit(self, original: str, edited: str) -> None:
        if not original.strip():
            raise ValueError("Original text cannot be empty")
        self.manual_edits[original] = edited

    def get_translation_alternatives(self, text: str, count: int) -> list[str]:
        """Return at most count known translations of text."""
        alternatives = [
            found
            for found in (self.translation_memory.get(text), self.custom_dictionary.get(text))
            if found is not None
        ]
        return alternatives[:count]

    @staticmethod
    def _split_into_segments(text: str) -> list[str]:
        return [part.strip() for part in _SEGMENT_BREAK.split(text) if part.strip()]

    def _translate_segment(self, text: str, request: TranslationRequest) -> TranslationSegment:
        if text in self.translation_memory:
            translated, confidence = self.translation_memory[text], 1.0
        elif text in self.custom_dictionary:
            translated, confidence = self.custom_dictionary[text], 0.9
        else:
            pair = (request.source_language, request.target_language)
            if pair not in _SUPPORTED_PAIRS:
                raise ValueError("Unsupported language pair")
            # No automatic translator is available; the text is carried over as is.
            translated, confidence = text, 0.7
        return TranslationSegment(
            original=text,
            translated=translated,
            confidence=confidence,
            alternatives=self.get_translation_alternatives(text, 3),
        )