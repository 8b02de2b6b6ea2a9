# techlingo

Tools for technical documents written in Hebrew and Russian, for example
specifications for fire-suppression systems. The package is a library and has
no dependencies outside the standard library.

## What is in it

- **Domain and style detection** (`techlingo.translation_models`).
  - `techlingo.translation_models.models` holds the shared value types:
    `Domain`, `Style` and `Formality` (predefined values such as
    `Domain.TECHNICAL` or `Style.FORMAL`, or custom ones made with
    `.custom(label)`), `TranslationContext`, `TechnicalTerm`,
    `TranslationRecord`, `QualityResult`, `TranslationCache` and the
    `TranslationError` exception with its `TranslationError.Kind`.
  - `techlingo.translation_models.domain.DomainModel` counts Hebrew term
    lists for the technical and the legal domain in a text. It normalises the
    count by the number of words and returns the best-scoring domain from
    `detect(text)`. You can add terms with `add_term`, set weights with
    `update_weight`, and call `train` on `(text, domain)` pairs. Training on a
    domain that has no term list raises `TranslationError`.
  - `techlingo.translation_models.style.StyleModel` scores a text against
    `StyleFeatures` for the formal, professional and casual styles. The
    features are characteristic words, phrase patterns that count double, and
    a formality level. `detect(text)` returns the best style. You can add
    words or patterns with `add_feature`, change levels with
    `update_formality`, and call `train` on `(text, style)` pairs.
- **Document templates** (`techlingo.templates`). `TemplateManager(template_dir)`
  loads every `.json` file in a directory as a `DocumentTemplate`. If the
  directory does not exist, it creates it and writes a default
  `technical_specification` template first.
  `create_document_from_template(name, values, metadata=None)` renders the
  sections as `# title` and the subsections as `## title`, and fills in
  `{{placeholder}}` values. An unknown name raises `TemplateNotFoundError`.
  The `metadata` argument is accepted and not used. `DocumentTemplate.to_dict`
  and `DocumentTemplate.from_dict` convert a template to and from its JSON form.
- **Translation memory** (`techlingo.translation`). `TranslationEngine` splits
  text into segments at `. ! ? ;` and at newlines. For each segment it uses, in
  this order, the translation memory (confidence 1.0) and the custom
  dictionary (0.9). A manual edit registered with `apply_manual_edit`
  replaces the result and marks the `TranslationResult` as
  `TranslationStatus.MANUALLY_EDITED`. `get_translation_alternatives(text, count)`
  returns up to `count` known translations. `translate` is a coroutine.
- **Term extraction** (`techlingo.text_analyzer`). `TextAnalyzer.analyze_text`
  splits text into paragraphs at blank lines. It finds standard references
  (ГОСТ, СНиП, СП, ТУ, ISO, ת״י, תקן ישראלי), requirement, system and test
  phrases, and adjacent Hebrew–Russian word pairs. It returns `ExtractedTerm`
  objects with domain, context, examples, synonyms, source and confidence, and
  it merges terms with similar stems.
- **Validation reports** (`techlingo.validation`). `ValidationReport` collects
  errors, warnings and suggestions together with a confidence score.
- **QA runners** (`techlingo.testing`). `LoadTester`, `IntegrationTester` and
  `SecurityTester` are asynchronous. They hold `LoadScenario`,
  `IntegrationTest` and `SecurityTest` entries and keep their latest results
  by name. `QaManager` groups the three runners.

## Installation

```
pip install .
```

To install with the test dependencies:

```
pip install ".[test]"
```

## Examples

```python
from techlingo.translation_models.domain import DomainModel

model = DomainModel()
print(model.detect("התקנה של מערכת ספרינקלרים"))   # technical
```

```python
from techlingo.templates import TemplateManager

manager = TemplateManager("templates")
text = manager.create_document_from_template(
    "technical_specification",
    {"project_description": "...", "system_requirements": "..."},
)
```

```python
import asyncio
from techlingo.translation import (
    Language, TranslationEngine, TranslationRequest,
)

engine = TranslationEngine(translation_memory={"שלום": "привет"})
request = TranslationRequest("שלום", Language.HEBREW, Language.RUSSIAN)
result = asyncio.run(engine.translate(request))
print(result.translated_text)   # привет
```

## What it does not do

- There is no machine translator. When a Hebrew↔Russian segment is in neither
  the translation memory nor the custom dictionary, it is carried over
  unchanged with confidence 0.7. Any other language pair raises `ValueError`.
- The language and stem handling in `TextAnalyzer` is simple. It counts Hebrew
  and Cyrillic letters and strips common endings; there is no real language
  detector or stemmer.
- The QA runners only simulate their checks. Load scenarios start no-op tasks
  and report a fixed success rate of 0.95. Integration and security checks
  always succeed.
- There is no command-line tool, server or storage beyond the template
  directory.

## Running the tests

```
pytest
```