"""
Testes do Value Validator (validate_value).

Cobrem as regras required / YAML / multi, a ordem entre elas e a
representação explícita de ausência (None vs 0/False/"").
"""

import pytest

from datasource_validation.core.config.settings import ValidationSettings
from datasource_validation.core.package.schema import VarDefinition
from datasource_validation.core.validation.values import is_present, validate_value


def _var(**kwargs) -> VarDefinition:
    kwargs.setdefault("name", "my-var")
    return VarDefinition(**kwargs)


@pytest.mark.parametrize("value", [None, "", "   ", "\n\t "])
def test_required_scalar_missing_or_blank(value):
    assert validate_value(value, _var(type="text", required=True)) == ["my-var is required"]


@pytest.mark.parametrize("value", [None, "", "  "])
def test_optional_absence_is_valid(value):
    assert validate_value(value, _var(type="text")) is None


@pytest.mark.parametrize("value", [0, False, "x", 1.5])
def test_falsy_scalars_are_present(value):
    assert is_present(value) is True
    assert validate_value(value, _var(type="integer", required=True)) is None


def test_required_message_prefers_title():
    var = _var(type="text", required=True, title="Hosts")
    assert validate_value(None, var) == ["Hosts is required"]


def test_yaml_valid_and_invalid():
    var = _var(type="yaml")
    assert validate_value("test_yaml: value", var) is None
    assert validate_value("invalidyaml: test\n foo bar:", var) == ["Invalid YAML format"]


def test_yaml_blank_is_absent():
    assert validate_value("    \n\n", _var(type="yaml")) is None
    assert validate_value("    \n\n", _var(type="yaml", required=True)) == ["my-var is required"]


def test_yaml_required_check_short_circuits():
    # valor ausente não pode também ser "YAML inválido"
    assert validate_value(None, _var(type="yaml", required=True)) == ["my-var is required"]


def test_yaml_check_only_for_structured_types():
    assert validate_value("invalidyaml: test\n foo bar:", _var(type="text")) is None


def test_multi_rejects_scalar():
    var = _var(type="text", multi=True)
    assert validate_value("invalid value for multi", var) == ["Invalid format"]
    assert validate_value(0, var) == ["Invalid format"]


def test_multi_accepts_sequences_regardless_of_elements():
    var = _var(type="text", multi=True)
    assert validate_value(["value1", "value2"], var) is None
    assert validate_value([1, {"a": 2}, None], var) is None
    assert validate_value(("a",), var) is None
    assert validate_value([], var) is None


def test_required_multi():
    var = _var(type="text", multi=True, required=True)
    assert validate_value([], var) == ["my-var is required"]
    assert validate_value(None, var) == ["my-var is required"]
    assert validate_value("  ", var) == ["my-var is required"]
    assert validate_value(["test"], var) is None
    assert validate_value("scalar", var) == ["Invalid format"]


def test_yaml_multi_uses_parsed_value():
    var = _var(type="yaml", multi=True)
    assert validate_value("- a\n- b", var) is None
    assert validate_value("key: value", var) == ["Invalid format"]


def test_exactly_one_message_per_variable():
    var = _var(type="yaml", multi=True, required=True)
    out = validate_value("invalidyaml: test\n foo bar:", var)
    assert out == ["Invalid YAML format"]


def test_custom_settings_messages_and_types():
    settings = ValidationSettings.from_config(
        {
            "validation": {
                "messages": {"required": "{name} must be set", "invalid_yaml": "Bad YAML"},
                "structured_text_types": ["yaml", "config"],
            }
        }
    )
    assert validate_value(None, _var(required=True), settings=settings) == ["my-var must be set"]
    assert validate_value("a: b\n c d:", _var(type="config"), settings=settings) == ["Bad YAML"]
