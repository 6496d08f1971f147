"""Validação de datasources: valores, árvore de erros e predicados."""

from .flatten import count_errors, flatten_errors  # noqa: F401
from .predicates import (  # noqa: F401
    config_has_errors,
    datasource_has_errors,
    validation_has_errors,
    vars_have_errors,
)
from .validator import validate_datasource  # noqa: F401
from .values import is_present, validate_value  # noqa: F401
