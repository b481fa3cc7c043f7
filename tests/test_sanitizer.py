"""Tests for value sanitizing."""

from form_validator.validators.sanitizer import Sanitizer

from tests.forms import CustomerForm, EmailForm, PersonForm, PrefsForm, ProfileForm


def test_coerces_declared_types():
    sanitizer = Sanitizer(ProfileForm)

    assert sanitizer.sanitize({"name": "John Doe", "age": "30"}) == {"name": "John Doe", "age": 30}


def test_drops_undeclared_fields():
    sanitizer = Sanitizer(ProfileForm)

    assert sanitizer.sanitize({"name": "Jane", "age": 41, "csrf": "t0k3n"}) == {"name": "Jane", "age": 41}


def test_any_failure_returns_empty_dict():
    sanitizer = Sanitizer(PersonForm)

    assert sanitizer.sanitize({"name": "Johnny", "age": 12}) == {}
    assert sanitizer.sanitize({}) == {}
    assert sanitizer.sanitize(None) == {}


def test_applies_schema_field_validators():
    sanitizer = Sanitizer(EmailForm)

    assert sanitizer.sanitize({"email": "A@B.C"}) == {"email": "a@b.c"}
    assert sanitizer.sanitize({"email": "nope"}) == {}


def test_fills_defaults_for_absent_fields():
    assert Sanitizer(PrefsForm).sanitize({}) == {"age": 18, "theme": None}


def test_nested_models_are_dumped_as_dicts():
    sanitizer = Sanitizer(CustomerForm)

    assert sanitizer.sanitize({"name": "Ada", "address": {"city": "London"}}) == {
        "name": "Ada",
        "address": {"city": "London"},
    }
    assert sanitizer.model.__name__ == "CustomerFormSanitized"
    assert issubclass(sanitizer.model, CustomerForm)
