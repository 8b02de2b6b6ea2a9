import pytest

from techlingo.translation_models.domain import DomainModel
from techlingo.translation_models.models import Domain, TranslationError


def test_detects_technical_text():
    model = DomainModel()
    assert model.detect("צינור משאבה ברז") == Domain.TECHNICAL


def test_detects_legal_text():
    model = DomainModel()
    assert model.detect("חוזה הסכם אחריות") == Domain.LEGAL


def test_initial_weights():
    weights = DomainModel().weights
    assert weights[Domain.TECHNICAL] == 1.0
    assert weights[Domain.LEGAL] == 0.8
    assert weights[Domain.GENERAL] == 0.6


def test_add_term_changes_detection():
    model = DomainModel()
    model.add_term(Domain.LEGAL, "widget")
    assert "widget" in model.terms[Domain.LEGAL]
    assert model.detect("widget widget צינור") == Domain.LEGAL


def test_add_term_to_unknown_domain_is_ignored():
    model = DomainModel()
    model.add_term(Domain.MEDICAL, "תרופה")
    assert Domain.MEDICAL not in model.terms


def test_update_weight_inserts():
    model = DomainModel()
    model.update_weight(Domain.MEDICAL, 0.3)
    assert model.weights[Domain.MEDICAL] == 0.3


def test_train_with_unrelated_text_halves_weight():
    model = DomainModel()
    before = model.weights[Domain.LEGAL]
    model.train([("hello world", Domain.LEGAL)])
    assert model.weights[Domain.LEGAL] == pytest.approx(before / 2)


def test_train_with_matching_text_stays_between_weight_and_score():
    model = DomainModel()
    model.train([("חוזה", Domain.LEGAL)])
    weight = model.weights[Domain.LEGAL]
    assert 0.8 <= weight <= 1.0


def test_train_unknown_domain_raises():
    model = DomainModel()
    with pytest.raises(TranslationError) as info:
        model.train([("text", Domain.GENERAL)])
    assert info.value.kind is TranslationError.Kind.MODEL


def test_terms_property_is_a_copy():
    model = DomainModel()
    model.terms[Domain.TECHNICAL].append("x")
    assert "x" not in model.terms[Domain.TECHNICAL]