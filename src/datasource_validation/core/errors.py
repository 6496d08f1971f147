"""
Estruturas canônicas de erro do validador de datasources (v1).

Existem dois tipos de "erro" no projeto e eles nunca se misturam:

- erros de campo (required, YAML inválido, formato inválido) são **dados**:
  vivem na árvore de erros retornada pelo Validator;
- falhas de carregamento (arquivo ausente, parse, formato) são exceções
  tipadas das camadas de loader, convertidas em `ValidationErrorPayload`
  quando atravessam o `runner`.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ValidationErrorPayload:
    """
    Payload canônico de falha de execução do validador.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao operador (onde corrigir)
    - decision_required: indica se a validação está bloqueada aguardando correção humana
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None
    decision_required: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

# Package definition
PACKAGE_NOT_FOUND = "PACKAGE_NOT_FOUND"
PACKAGE_INVALID = "PACKAGE_INVALID"

# Datasource instance
DATASOURCE_NOT_FOUND = "DATASOURCE_NOT_FOUND"
DATASOURCE_INVALID = "DATASOURCE_INVALID"

# Configuração do validador
VALIDATOR_CONFIGURATION_ERROR = "VALIDATOR_CONFIGURATION_ERROR"


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def load_failure(
    *,
    error_type: str,
    message: str,
    path: Optional[str],
    exception_class: str,
    hint: Optional[str] = None,
) -> ValidationErrorPayload:
    return ValidationErrorPayload(
        type=error_type,
        message=message,
        details={
            "path": path,
            "exception_class": exception_class,
        },
        hint=hint,
        decision_required=True,
    )


def configuration_failure(*, message: str, exception_class: str) -> ValidationErrorPayload:
    return ValidationErrorPayload(
        type=VALIDATOR_CONFIGURATION_ERROR,
        message=message,
        details={"exception_class": exception_class},
        hint="Fix the validator configuration files (validation.messages / structured_text_types)",
        decision_required=True,
    )
