"""Document templates stored as JSON files and rendered into text."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, ClassVar


@dataclass(frozen=True)
class _Variant:
    """A named variant that is either predefined or a custom label."""

    _known: ClassVar[frozenset[str]] = frozenset()

    label: str
    is_custom: bool = False

    @classmethod
    def custom(cls, label: str):
        return cls(label, True)

    def to_json(self) -> Any:
        return {"Custom": self.label} if self.is_custom else self.label

    @classmethod
    def from_json(cls, data: Any):
        if isinstance(data, dict):
            if set(data) != {"Custom"} or not isinstance(data["Custom"], str):
                raise ValueError(f"invalid {cls.__name__}: {data!r}")
            return cls.custom(data["Custom"])
        if isinstance(data, str) and data in cls._known:
            return cls(data)
        raise ValueError(f"unknown {cls.__name__}: {data!r}")

    def __str__(self) -> str:
        return self.label


class TemplateType(_Variant):
    """Kind of document a template produces."""

    _known = frozenset(
        {
            "TechnicalSpec",
            "StandardReport",
            "DrawingSheet",
            "CalculationSheet",
            "Inspection",
            "Approval",
        }
    )
    TECHNICAL_SPEC: ClassVar[TemplateType]
    STANDARD_REPORT: ClassVar[TemplateType]
    DRAWING_SHEET: ClassVar[TemplateType]
    CALCULATION_SHEET: ClassVar[TemplateType]
    INSPECTION: ClassVar[TemplateType]
    APPROVAL: ClassVar[TemplateType]


TemplateType.TECHNICAL_SPEC = TemplateType("TechnicalSpec")
TemplateType.STANDARD_REPORT = TemplateType("StandardReport")
TemplateType.DRAWING_SHEET = TemplateType("DrawingSheet")
TemplateType.CALCULATION_SHEET = TemplateType("CalculationSheet")
TemplateType.INSPECTION = TemplateType("Inspection")
TemplateType.APPROVAL = TemplateType("Approval")


class PlaceholderType(_Variant):
    """Kind of value a placeholder expects."""

    _known = frozenset(
        {
            "Text",
            "Number",
            "Date",
            "List",
            "Table",
            "StandardReference",
            "TechnicalTerm",
        }
    )
    TEXT: ClassVar[PlaceholderType]
    NUMBER: ClassVar[PlaceholderType]
    DATE: ClassVar[PlaceholderType]
    LIST: ClassVar[PlaceholderType]
    TABLE: ClassVar[PlaceholderType]
    STANDARD_REFERENCE: ClassVar[PlaceholderType]
    TECHNICAL_TERM: ClassVar[PlaceholderType]


PlaceholderType.TEXT = PlaceholderType("Text")
PlaceholderType.NUMBER = PlaceholderType("Number")
PlaceholderType.DATE = PlaceholderType("Date")
PlaceholderType.LIST = PlaceholderType("List")
PlaceholderType.TABLE = PlaceholderType("Table")
PlaceholderType.STANDARD_REFERENCE = PlaceholderType("StandardReference")
PlaceholderType.TECHNICAL_TERM = PlaceholderType("TechnicalTerm")


@dataclass
class TemplateSection:
    """A titled section of a template, possibly with subsections."""

    id: str
    title: str
    content: str
    required: bool
    order: int
    style: str
    subsections: list[TemplateSection] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TemplateSection:
        values = dict(data)
        values["subsections"] = [cls.from_dict(s) for s in values.get("subsections", [])]
        return cls(**values)


@dataclass
class FontStyle:
    family: str
    size: float
    weight: str
    style: str


@dataclass
class SpacingStyle:
    line_spacing: float
    paragraph_spacing: float
    margin_top: float
    margin_bottom: float
    margin_left: float
    margin_right: float


@dataclass
class PageLayout:
    size: str
    orientation: str
    margins: SpacingStyle
    header_height: float
    footer_height: float

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PageLayout:
        values = dict(data)
        values["margins"] = SpacingStyle(**values["margins"])
        return cls(**values)


@dataclass
class DocumentStyles:
    fonts: dict[str, FontStyle]
    colors: dict[str, str]
    spacing: SpacingStyle
    page_layout: PageLayout

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DocumentStyles:
        return cls(
            fonts={name: FontStyle(**font) for name, font in data["fonts"].items()},
            colors=dict(data["colors"]),
            spacing=SpacingStyle(**data["spacing"]),
            page_layout=PageLayout.from_dict(data["page_layout"]),
        )


@dataclass
class DocumentTemplate:
    """A document template with its structure, placeholders and styles."""

    name: str
    description: str
    version: str
    template_type: TemplateType
    sections: list[TemplateSection]
    placeholders: dict[str, PlaceholderType]
    styles: DocumentStyles
    rtl: bool
    default_language: str
    supported_languages: list[str]
    default_metadata: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready form of the template."""
        return {
            "name": self.name,
            "description": self.description,
            "version": self.version,
            "template_type": self.template_type.to_json(),
            "sections": [s.to_dict() for s in self.sections],
            "placeholders": {k: v.to_json() for k, v in self.placeholders.items()},
            "styles": self.styles.to_dict(),
            "rtl": self.rtl,
            "default_language": self.default_language,
            "supported_languages": list(self.supported_languages),
            "default_metadata": self.default_metadata,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DocumentTemplate:
        """Build a template from its JSON-ready form."""
        return cls(
            name=data["name"],
            description=data["description"],
            version=data["version"],
            template_type=TemplateType.from_json(data["template_type"]),
            sections=[TemplateSection.from_dict(s) for s in data["sections"]],
            placeholders={
                k: PlaceholderType.from_json(v) for k, v in data["placeholders"].items()
            },
            styles=DocumentStyles.from_dict(data["styles"]),
            rtl=data["rtl"],
            default_language=data["default_language"],
            supported_languages=list(data["supported_languages"]),
            default_metadata=data.get("default_metadata"),
        )


class TemplateNotFoundError(LookupError):
    """Raised when a template name is not known to the manager."""

    def __init__(self, name: str) -> None:
        super().__init__(f"תבנית לא נמצאה: {name}")
        self.name = name


def _technical_specification() -> DocumentTemplate:
    return DocumentTemplate(
        name="technical_specification",
        description="תבנית למפרט טכני של מערכת כיבוי אש",
        version="1.0.0",
        template_type=TemplateType.TECHNICAL_SPEC,
        sections=[
            TemplateSection(
                id="general",
                title="כללי",
                content="{{project_description}}",
                required=True,
                order=1,
                style="heading1",
            ),
            TemplateSection(
                id="requirements",
                title="דרישות מערכת",
                content="{{system_requirements}}",
                required=True,
                order=2,
                style="heading1",
            ),
        ],
        placeholders={
            "project_description": PlaceholderType.TEXT,
            "system_requirements": PlaceholderType.TEXT,
        },
        styles=DocumentStyles(
            fonts={"default": FontStyle("David CLM", 12.0, "normal", "normal")},
            colors={"text": "#000000", "heading": "#333333"},
            spacing=SpacingStyle(1.5, 1.0, 20.0, 20.0, 25.0, 25.0),
            page_layout=PageLayout(
                size="A4",
                orientation="portrait",
                margins=SpacingStyle(1.0, 1.0, 25.4, 25.4, 25.4, 25.4),
                header_height=12.7,
                footer_height=12.7,
            ),
        ),
        rtl=True,
        default_language="he",
        supported_languages=["he", "ru"],
        default_metadata=None,
    )


def _render(content: str, values: dict[str, str]) -> str:
    for key, value in values.items():
        content = content.replace("{{" + key + "}}", value)
    return content


class TemplateManager:
    """Loads templates from a directory of JSON files and renders documents."""

    def __init__(self, template_dir: str | Path) -> None:
        self.template_dir = Path(template_dir)
        self._templates: dict[str, DocumentTemplate] = {}
        self.load_templates()

    @property
    def templates(self) -> dict[str, DocumentTemplate]:
        return dict(self._templates)

    def load_templates(self) -> None:
        """Read every .json template; a missing directory is created with defaults."""
        if not self.template_dir.exists():
            self.template_dir.mkdir(parents=True)
            self._write_default_templates()
        for path in sorted(self.template_dir.iterdir()):
            if path.suffix != ".json":
                continue
            template = DocumentTemplate.from_dict(
                json.loads(path.read_text(encoding="utf-8"))
            )
            self._templates[template.name] = template

    def _write_default_templates(self) -> None:
        template = _technical_specification()
        path = self.template_dir / "technical_specification.json"
        path.write_text(
            json.dumps(template.to_dict(), ensure_ascii=False, indent=2), encoding="utf-8"
        )

    def get_template(self, name: str) -> DocumentTemplate | None:
        return self._templates.get(name)

    def create_document_from_template(
        self,
        template_name: str,
        values: dict[str, str],
        metadata: dict[str, Any] | None = None,
    ) -> str:
        """Render a template into markdown-style text with placeholders filled in."""
        template = self.get_template(template_name)
        if template is None:
            raise TemplateNotFoundError(template_name)
        parts: list[str] = []
        for section in template.sections:
            parts.append(f"# {section.title}\n\n")
            parts.append(_render(section.content, values) + "\n\n")
            for subsection in section.subsections:
                parts.append(f"## {subsection.title}\n\n")
                parts.append(_render(subsection.content, values) + "\n\n")
        return "".join(parts)