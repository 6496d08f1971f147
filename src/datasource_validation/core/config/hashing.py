# src/datasource_validation/core/config/hashing.py
"""
Hashing canônico de mapeamentos (configuração, package, datasource).

O hash gerado representa a **identidade estrutural** do documento e é
utilizado para rastreabilidade de execuções de validação: o mesmo par
(package, datasource) sempre produz os mesmos hashes.

Princípios fundamentais:
    - Hashing determinístico e reprodutível
    - Independente da ordem original das chaves
    - Baseado em serialização JSON canônica (SHA-256)

Invariantes:
    - Documentos estruturalmente equivalentes produzem o mesmo hash
    - O valor gerado é sempre uma string hexadecimal de 64 caracteres
"""

import hashlib
import json
from typing import Any, Dict


def compute_config_hash(config: Dict[str, Any]) -> str:
    """
    Calcula o hash SHA-256 canônico de um mapeamento.

    Args:
        config (Dict[str, Any]): Configuração efetiva, package ou datasource.

    Returns:
        str: Hash SHA-256 hexadecimal do documento.

    Raises:
        TypeError: Se o objeto fornecido não for um dicionário.
    """
    if not isinstance(config, dict):
        raise TypeError(
            f"Hashing requires a dict, got: {type(config).__name__}"
        )

    canonical_json = json.dumps(
        config,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        default=str,
    )
    return hashlib.sha256(canonical_json.encode("utf-8")).hexdigest()
