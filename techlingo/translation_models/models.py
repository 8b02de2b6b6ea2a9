"""Core value types shared by the translation models."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import ClassVar


@dataclass(frozen=True)
class Domain:
    """Subject area of a text; predefined areas or a custom one."""

    TECHNICAL: ClassVar[Domain]
    LEGAL: ClassVar[Domain]
    GENERAL: ClassVar[Domain]
    MEDICAL: ClassVar[Domain]

    label: str
    is_custom: bool = False

    @classmethod
    def custom(cls, label: str) -> Domain:
        return cls(label, True)

    def __str__(self) -> str:
        return self.label


Domain.TECHNICAL = Domain("technical")
Domain.LEGAL = Domain("legal")
Domain.GENERAL = Domain("general")
Domain.MEDICAL = Domain("medical")


@dataclass(frozen=True)
class Style:
    """Writing style of a text; predefined styles or a custom one."""

    FORMAL: ClassVar[Style]
    PROFESSIONAL: ClassVar[Style]
    CASUAL: ClassVar[Style]
    INFORMAL: ClassVar[Style]
    TECHNICAL: ClassVar[Style]

    label: str
    is_custom: bool = False

    @classmethod
    def custom(cls, label: str) -> Style:
        return cls(label, True)

    def __str__(self) -> str:
        return self.label


Style.FORMAL = Style("formal")
Style.PROFESSIONAL = Style("professional")
Style.CASUAL = Style("casual")
Style.INFORMAL = Style("informal")
Style.TECHNICAL = Style("technical")


@dataclass(frozen=True)
class Formality:
    """Level of formality; predefined levels or a custom one."""

    HIGH: ClassVar[Formality]
    MEDIUM: ClassVar[Formality]
    LOW: ClassVar[Formality]

    label: str
    is_custom: bool = False

    @classmethod
    def custom(cls, label: str) -> Formality:
        return cls(label, True)

    def __str__(self) -> str:
        return self.label


Formality.HIGH = Formality("high")
Formality.MEDIUM = Formality("medium")
Formality.LOW = Formality("low")


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class TranslationContext:
    """Domain, style and formality under which a text is translated."""

    domain: Domain
    style: Style
    formality: Formality
    metadata: dict[str, str] = field(default_factory=dict)


@dataclass
class TechnicalTerm:
    """A source/target pair of a technical term within a domain."""

    id: str
    source: str
    target: str
    domain: Domain
    notes: str | None = None
    updated_at: datetime = field(default_factory=_utc_now)
    metadata: dict[str, str] = field(default_factory=dict)


@dataclass
class TranslationRecord:
    """A stored translation with the time it was made and its context."""

    source: str
    target: str
    context: TranslationContext
    timestamp: datetime = field(default_factory=_utc_now)


class TranslationError(Exception):
    """Raised when a translation model cannot do its work."""

    class Kind(Enum):
        MODEL = "שגיאת מודל"
        VOCABULARY = "שגיאת אוצר מילים"
        CONTEXT = "שגיאת הקשר"
        TECHNICAL_TERM = "שגיאת מונח טכני"
        LEARNING = "שגיאת למידה"
        GENERAL = "שגיאה כללית"

    def __init__(self, kind: TranslationError.Kind, message: str) -> None:
        super().__init__(f"{kind.value}: {message}")
        self.kind = kind
        self.message = message


@dataclass
class QualityResult:
    """Outcome of a translation quality check."""

    score: float
    issues: list[str] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)


def _default_context() -> TranslationContext:
    return TranslationContext(Domain.TECHNICAL, Style.FORMAL, Formality.HIGH)


@dataclass
class TranslationCache:
    """A cached translation together with its context and quality score."""

    source: str = ""
    target: str = ""
    context: TranslationContext = field(default_factory=_default_context)
    quality_score: float = 0.0