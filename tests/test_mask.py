"""Tests for the mask engine, its tokens and presets."""

import pytest

from textutils import MaskEngine, MaskOptions, MaskToken, create_mask, default_mask
from textutils.core.exceptions import MaskError, UnknownPresetError
from textutils.logic.mask import process_value
from textutils.logic.tokens import default_tokens


@pytest.fixture
def engine():
    return MaskEngine()


# ── Presets ──────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "preset,value,expected",
    [
        ("phone", "1234567890", "(123) 456-7890"),
        ("phoneInt", "15551234567", "+1 (555) 123-4567"),
        ("date", "12252023", "12/25/2023"),
        ("time", "0930", "09:30"),
        ("datetime", "122520230930", "12/25/2023 09:30"),
        ("ssn", "123456789", "123-45-6789"),
        ("creditCard", "4111111111111111", "4111 1111 1111 1111"),
        ("ipv4", "192168001001", "192.168.001.001"),
        ("mac", "a1b2c3d4e5f6", "A1:B2:C3:D4:E5:F6"),
    ],
)
def test_preset_formats_raw_value(engine, preset, value, expected):
    assert engine.apply(value, preset) == expected


def test_preset_output_is_idempotent(engine):
    for preset, value in [
        ("phone", "1234567890"),
        ("date", "12252023"),
        ("ssn", "123456789"),
        ("mac", "a1b2c3d4e5f6"),
    ]:
        formatted = engine.apply(value, preset)
        assert engine.apply(formatted, preset) == formatted


def test_short_value_fails_to_empty(engine):
    assert engine.apply("12345", "phone") == ""
    assert engine.apply("1225", "date") == ""


def test_currency_template_on_short_amount_is_empty(engine):
    assert engine.apply("1234.5", "currency") == ""
    assert engine.apply("123456789.12", "currency") == "$123,456,789.12"


def test_currency_accepts_empty_input(engine):
    assert engine.apply("", "currency") == ""


def test_unknown_preset_raises(engine):
    with pytest.raises(UnknownPresetError) as exc_info:
        engine.apply("123", "zipcode")
    assert exc_info.value.name == "zipcode"
    assert isinstance(exc_info.value, MaskError)


def test_unsupported_selector_type_raises(engine):
    with pytest.raises(MaskError):
        engine.apply("123", 42)


def test_preset_names_cover_fixed_table():
    names = MaskEngine.preset_names()
    for name in [
        "phone", "phoneExt", "phoneInt", "date", "time", "datetime",
        "ssn", "creditCard", "currency", "ipv4", "mac",
    ]:
        assert name in names


def test_preset_placeholder_is_informational():
    assert MaskEngine.preset("date").placeholder == "mm/dd/yyyy"
    assert MaskEngine.preset("phone").placeholder == "_"


def test_presets_available_regardless_of_instance_options():
    engine = MaskEngine(MaskOptions(templates="AA"))
    assert engine.apply("1234567890", "phone") == "(123) 456-7890"


# ── Templates ────────────────────────────────────────────────────────

def test_optional_marker_allows_partial_tail():
    options = MaskOptions(templates="999?-99", auto_clear=False)
    engine = MaskEngine(options)

    assert engine.apply("12345") == "123-45"
    assert engine.apply("1234") == "123-4"
    assert engine.apply("123ab4") == "123-4"
    # Input runs out before the marker is reached.
    assert engine.apply("123") == ""


def test_letter_tokens_transform_case():
    engine = MaskEngine(MaskOptions(templates="aa-AA"))
    assert engine.apply("XyzW") == "xy-ZW"


def test_literal_is_consumed_only_on_exact_match():
    engine = MaskEngine(MaskOptions(templates="99-99"))
    assert engine.apply("12-34") == "12-34"
    assert engine.apply("1234") == "12-34"


def test_first_fitting_template_wins():
    options = MaskOptions(templates=["99-99", "AA-99"], auto_clear=False)
    assert MaskEngine(options).apply("ab12") == "AB-12"


def test_auto_clear_returns_empty_instead_of_failing():
    tokens = default_tokens()
    cleared = MaskOptions(templates="999", auto_clear=True)
    strict = MaskOptions(templates="999", auto_clear=False)

    assert process_value("1a", "999", tokens, cleared) == ""
    assert process_value("1a", "999", tokens, strict) is None


def test_token_overrides_win_over_defaults():
    letters = MaskToken.from_pattern("[a-z]")
    engine = MaskEngine(MaskOptions(templates="99", tokens={"9": letters}))

    assert engine.apply("ab") == "ab"
    assert engine.apply("12") == ""


def test_explicit_options_replace_instance_options():
    engine = MaskEngine(MaskOptions(templates="999"))
    assert engine.apply("1234", MaskOptions(templates="99.99")) == "12.34"


def test_default_options_pass_empty_template():
    # The default template is empty, so nothing is written.
    assert MaskEngine().apply("abc") == ""


# ── is_complete / strip_mask ─────────────────────────────────────────

def test_is_complete():
    engine = MaskEngine(MaskOptions(templates="99/99", auto_clear=False))
    assert engine.is_complete("1231")
    assert not engine.is_complete("12")
    assert engine.is_complete("12/25/2023", "date")
    assert not engine.is_complete("12/25", "date")


def test_is_complete_with_auto_clear_never_fails(engine):
    # An auto-cleared result is an empty string, not a failure.
    assert engine.is_complete("123", "phone")


def test_strip_mask_only_when_enabled():
    assert MaskEngine().strip_mask("(123) 456-7890") == "(123) 456-7890"

    stripping = MaskEngine(MaskOptions(strip_mask=True))
    assert stripping.strip_mask("(123) 456-7890") == "1234567890"
    assert stripping.strip_mask("A1:B2") == "A1B2"


# ── Factories ────────────────────────────────────────────────────────

def test_create_mask_and_default_mask():
    engine = create_mask(MaskOptions(templates="99-99"))
    assert engine.apply("1234") == "12-34"
    assert default_mask() is default_mask()
    assert default_mask().apply("12252023", "date") == "12/25/2023"
