import json

import pytest

from techlingo.templates import (
    DocumentTemplate,
    PlaceholderType,
    TemplateManager,
    TemplateNotFoundError,
    TemplateSection,
    TemplateType,
)


@pytest.fixture
def manager(tmp_path):
    return TemplateManager(tmp_path / "templates")


def _write_custom(directory, name="custom_doc"):
    source = TemplateManager(directory / "seed")
    data = source.get_template("technical_specification").to_dict()
    data["name"] = name
    data["template_type"] = {"Custom": "memo"}
    data["sections"] = [
        TemplateSection(
            id="main",
            title="Main",
            content="Hello {{who}}",
            required=True,
            order=1,
            style="heading1",
            subsections=[
                TemplateSection(
                    id="sub", title="Sub", content="[{{who}}]", required=False,
                    order=1, style="heading2",
                )
            ],
        ).to_dict()
    ]
    target = directory / "custom"
    target.mkdir()
    (target / f"{name}.json").write_text(json.dumps(data), encoding="utf-8")
    (target / "notes.txt").write_text("not a template", encoding="utf-8")
    return target


def test_missing_directory_gets_default_template(tmp_path, manager):
    assert (tmp_path / "templates" / "technical_specification.json").is_file()
    template = manager.get_template("technical_specification")
    assert template.template_type == TemplateType.TECHNICAL_SPEC
    assert template.rtl is True
    assert template.supported_languages == ["he", "ru"]
    assert template.placeholders["project_description"] == PlaceholderType.TEXT


def test_default_template_renders(manager):
    text = manager.create_document_from_template(
        "technical_specification",
        {"project_description": "desc", "system_requirements": "reqs"},
        None,
    )
    assert text == "# כללי\n\ndesc\n\n# דרישות מערכת\n\nreqs\n\n"


def test_missing_values_leave_placeholders(manager):
    text = manager.create_document_from_template("technical_specification", {}, None)
    assert "{{project_description}}" in text
    assert "{{system_requirements}}" in text


def test_unknown_template_raises(manager):
    assert manager.get_template("nope") is None
    with pytest.raises(TemplateNotFoundError) as info:
        manager.create_document_from_template("nope", {}, None)
    assert "nope" in str(info.value)


def test_dict_round_trip(manager):
    template = manager.get_template("technical_specification")
    assert DocumentTemplate.from_dict(template.to_dict()) == template
    assert template.to_dict()["template_type"] == "TechnicalSpec"


def test_custom_template_loaded_and_subsections_rendered(tmp_path):
    directory = _write_custom(tmp_path)
    loaded = TemplateManager(directory)
    assert set(loaded.templates) == {"custom_doc"}
    template = loaded.get_template("custom_doc")
    assert template.template_type == TemplateType.custom("memo")
    text = loaded.create_document_from_template("custom_doc", {"who": "X"}, None)
    assert text == "# Main\n\nHello X\n\n## Sub\n\n[X]\n\n"


def test_variant_json_round_trip():
    for variant in (PlaceholderType.DATE, PlaceholderType.custom("Money")):
        assert PlaceholderType.from_json(variant.to_json()) == variant
    with pytest.raises(ValueError):
        TemplateType.from_json("Unknown")


def test_invalid_json_file_raises(tmp_path):
    directory = tmp_path / "bad"
    directory.mkdir()
    (directory / "broken.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError):
        TemplateManager(directory)