# src/datasource_validation/core/config/settings.py
"""
Settings materializadas do validador.

Converte a seção `validation` da configuração resolvida em uma estrutura
imutável consumida pelo Value Validator e pelo Validator.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from string import Formatter
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from .errors import InvalidSettingsError
from .loader import DEFAULT_CONFIG


# placeholders aceitos por chave de mensagem
_MESSAGE_FIELDS = {
    "name_required": frozenset(),
    "required": frozenset({"name"}),
    "invalid_yaml": frozenset(),
    "invalid_format": frozenset(),
}


def _default_messages() -> Mapping[str, str]:
    return MappingProxyType(dict(DEFAULT_CONFIG["validation"]["messages"]))


def _check_template(key: str, template: str) -> None:
    try:
        fields = {f for _, f, _, _ in Formatter().parse(template) if f is not None}
    except ValueError as e:
        raise InvalidSettingsError(f"validation.messages.{key} is not a valid template: {e}") from e
    unknown = {f for f in fields if f not in _MESSAGE_FIELDS[key]}
    if unknown:
        allowed = ", ".join(sorted(_MESSAGE_FIELDS[key])) or "none"
        raise InvalidSettingsError(
            f"validation.messages.{key} uses unknown placeholders {sorted(unknown)} (allowed: {allowed})"
        )


@dataclass(frozen=True)
class ValidationSettings:
    """Catálogo de mensagens e tipos com checagem de sintaxe YAML."""

    messages: Mapping[str, str] = field(default_factory=_default_messages)
    structured_text_types: Tuple[str, ...] = ("yaml",)

    def message(self, key: str, **fmt: Any) -> str:
        return self.messages[key].format(**fmt)

    def is_structured_text(self, var_type: Optional[str]) -> bool:
        return var_type in self.structured_text_types

    @classmethod
    def from_config(cls, config: Optional[Dict[str, Any]]) -> "ValidationSettings":
        """Materializa settings a partir de uma configuração resolvida.

        Chaves ausentes caem nos defaults embutidos.

        Raises:
            InvalidSettingsError: se `validation` ou seus campos tiverem tipo inválido.
        """
        section = (config or {}).get("validation") or {}
        if not isinstance(section, dict):
            raise InvalidSettingsError("validation must be a mapping")

        messages = dict(_default_messages())
        raw_messages = section.get("messages") or {}
        if not isinstance(raw_messages, dict):
            raise InvalidSettingsError("validation.messages must be a mapping")
        for key, value in raw_messages.items():
            if key not in _MESSAGE_FIELDS:
                raise InvalidSettingsError(f"unknown message key: {key}")
            if not isinstance(value, str) or not value.strip():
                raise InvalidSettingsError(f"validation.messages.{key} must be a non-empty string")
            _check_template(key, value)
            messages[key] = value

        types = section.get("structured_text_types", ["yaml"])
        if not isinstance(types, list) or not all(isinstance(t, str) for t in types):
            raise InvalidSettingsError("validation.structured_text_types must be a list of strings")

        return cls(messages=MappingProxyType(messages), structured_text_types=tuple(types))


DEFAULT_SETTINGS = ValidationSettings()
