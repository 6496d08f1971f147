# src/datasource_validation/core/context.py
"""
Contexto de execução de uma validação.

Este módulo define o `ValidationContext`, a estrutura canônica utilizada
para registrar eventos estruturados e warnings durante a indexação do
package e a validação de um datasource.

O contexto é opcional: o Indexer e o Validator funcionam sem ele e
produzem exatamente o mesmo resultado com ou sem contexto. Ele existe
apenas para observabilidade.

Princípios fundamentais:
    - Isolamento por execução (cada validação possui seu próprio contexto)
    - Ausência de estado global compartilhado
    - Eventos estruturados e serializáveis

Invariantes:
    - Logs sempre incluem `run_id` e `step_id`
    - Warnings são agrupados por `step_id`
    - O contexto nunca influencia a árvore de erros

Limites explícitos:
    - Não valida dados
    - Não persiste eventos automaticamente
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List


@dataclass
class ValidationContext:
    """
    Contexto de uma execução de validação.

    Consolida:
        - identidade da execução (run_id, created_at)
        - metadados livres fornecidos pelo chamador
        - eventos de log estruturados
        - warnings associados a etapas específicas
          (`package.index`, `datasource.validate`, ...)
    """
    run_id: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    meta: Dict[str, Any] = field(default_factory=dict)

    events: List[Dict[str, Any]] = field(default_factory=list, init=False)
    warnings: Dict[str, List[str]] = field(default_factory=dict, init=False)

    # -----------------------------
    # Logging & warnings
    # -----------------------------
    def log(self, *, step_id: str, level: str, message: str, **extra: Any) -> None:
        event = {
            "run_id": self.run_id,
            "step_id": step_id,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def add_warning(self, *, step_id: str, message: str) -> None:
        if step_id not in self.warnings:
            self.warnings[step_id] = []
        self.warnings[step_id].append(message)

    def events_for(self, step_id: str) -> List[Dict[str, Any]]:
        return [e for e in self.events if e.get("step_id") == step_id]
