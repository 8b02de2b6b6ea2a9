import pytest

from techlingo.text_analyzer import ExtractedTerm, TextAnalyzer


@pytest.fixture
def analyzer():
    return TextAnalyzer()


def test_empty_text_has_no_terms(analyzer):
    assert analyzer.analyze_text("") == []
    assert analyzer.analyze_text("\n\n   \n\n") == []


def test_text_without_hebrew_or_russian_has_no_terms(analyzer):
    assert analyzer.analyze_text("Fire system inspection") == []


def test_hebrew_system_term(analyzer):
    terms = analyzer.analyze_text("מערכת כיבוי")
    assert len(terms) == 1
    term = terms[0]
    assert term.term_he == "מערכת"
    assert term.term_ru == "כיבוי"
    assert term.domain == "systems"
    assert term.source == ""
    assert term.synonyms == []
    assert term.examples == [
        "התקנת מערכת",
        "בדיקת מערכת",
        "установка כיבוי",
        "проверка כיבוי",
    ]
    assert term.confidence == pytest.approx(0.8)


def test_russian_text_swaps_words(analyzer):
    terms = analyzer.analyze_text("система пожаротушения")
    assert len(terms) == 1
    assert terms[0].term_ru == "система"
    assert terms[0].term_he == "пожаротушения"
    assert "установка система" in terms[0].examples


def test_standard_reference_sets_source(analyzer):
    terms = analyzer.analyze_text("ГОСТ 12.3.046")
    assert len(terms) == 1
    term = terms[0]
    assert term.domain == "standards"
    assert term.term_ru == "ГОСТ"
    assert term.term_he == "12.3.046"
    assert term.source == "ГОСТ"
    assert term.confidence == pytest.approx(0.9)


def test_capture_with_single_word_is_dropped(analyzer):
    assert analyzer.analyze_text("ГОСТ12.3") == []


def test_context_from_parentheses(analyzer):
    terms = analyzer.analyze_text("מערכת כיבוי (ספרינקלרים)")
    assert len(terms) == 1
    assert terms[0].context == "ספרינקלרים"
    assert terms[0].confidence == pytest.approx(0.85)


def test_context_from_keyword(analyzer):
    terms = analyzer.analyze_text("עבור מבנים. מערכת כיבוי")
    assert len(terms) == 1
    assert terms[0].context == "עבור מבנים"
    assert terms[0].confidence > 0.8


def test_mixed_word_pair_becomes_general_term(analyzer):
    terms = analyzer.analyze_text("насос משאבה")
    assert len(terms) == 1
    assert terms[0].term_he == "משאבה"
    assert terms[0].term_ru == "насос"
    assert terms[0].domain == "general"
    assert terms[0].examples == []


def test_similar_terms_across_paragraphs_are_merged(analyzer):
    terms = analyzer.analyze_text("מערכת כיבוי\n\nמערכת ספרינקלרים")
    assert len(terms) == 1
    assert terms[0].term_ru == "כיבוי"
    assert "התקנת מערכת" in terms[0].examples
    assert "установка ספרינקלרים" in terms[0].examples


def test_synonym_for_cia_ending(analyzer):
    terms = analyzer.analyze_text("דרישות информация לבניין הגבוה והחדש")
    assert len(terms) == 1
    assert terms[0].term_he == "דרישות"
    assert terms[0].term_ru == "информация"
    assert terms[0].domain == "requirements"
    assert terms[0].synonyms == ["информака"]
    assert terms[0].confidence > 0.8


def test_confidence_never_exceeds_one(analyzer):
    terms = analyzer.analyze_text("ГОСТ 12.3 (для зданий)")
    assert terms
    assert all(0.0 < t.confidence <= 1.0 for t in terms)


def test_confidence_is_recorded_per_pair(analyzer):
    terms = analyzer.analyze_text("מערכת כיבוי")
    key = f"{terms[0].term_he}:{terms[0].term_ru}"
    assert analyzer.term_confidence[key] == pytest.approx(terms[0].confidence)


def test_repeated_analysis_is_stable(analyzer):
    text = "מערכת כיבוי (ספרינקלרים)\n\nבדיקות לחץ"
    first = analyzer.analyze_text(text)
    second = analyzer.analyze_text(text)
    assert first
    assert first[0].term_he == "מערכת"
    assert first[0].context == "ספרינקלרים"
    assert [(t.term_he, t.term_ru, t.context) for t in second] == [
        (t.term_he, t.term_ru, t.context) for t in first
    ]
    assert [t.confidence for t in second] == pytest.approx([t.confidence for t in first])


def test_extracted_term_defaults():
    term = ExtractedTerm("א", "б")
    assert term.domain == "general"
    assert term.confidence == 0.0
    assert term.examples == [] and term.synonyms == []