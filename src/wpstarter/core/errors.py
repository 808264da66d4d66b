"""
WP Starter — Canonical Error Structures (v1)

Este módulo define o padrão canônico de erros do WP Starter.
Erros de configuração fazem parte do contrato operacional do setup,
devendo ser:

- explícitos
- serializáveis
- acionáveis

Nenhuma decisão implícita é permitida.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ErrorPayload:
    """
    Payload canônico de erro do WP Starter.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao operador (onde corrigir)
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

# Configuração append-only
CONFIG_DUPLICATE_KEY = "CONFIG_DUPLICATE_KEY"
CONFIG_MISSING_VALIDATOR = "CONFIG_MISSING_VALIDATOR"
CONFIG_IMMUTABLE = "CONFIG_IMMUTABLE"
CONFIG_KEY_NOT_FOUND = "CONFIG_KEY_NOT_FOUND"
CONFIG_INVALID_KEY = "CONFIG_INVALID_KEY"

# Entrada bruta
CONFIG_INVALID_ROOT = "CONFIG_INVALID_ROOT"
CONFIG_UNSUPPORTED_FORMAT = "CONFIG_UNSUPPORTED_FORMAT"
CONFIG_SYNTAX_ERROR = "CONFIG_SYNTAX_ERROR"

# Genérico
CONFIG_ERROR = "CONFIG_ERROR"


_HINTS = {
    CONFIG_DUPLICATE_KEY: "Verifique a existência da chave com `has()` antes de chamar `append_config`.",
    CONFIG_MISSING_VALIDATOR: "Forneça uma função de validação ao registrar uma chave customizada.",
    CONFIG_IMMUTABLE: "Use `append_config` para adicionar chaves novas; valores existentes nunca são alterados.",
    CONFIG_KEY_NOT_FOUND: "Verifique a existência da chave com `has()` antes da leitura.",
    CONFIG_INVALID_KEY: "Nomes de chave devem ser strings não vazias.",
    CONFIG_INVALID_ROOT: "A configuração deve ser um objeto chave-valor.",
    CONFIG_UNSUPPORTED_FORMAT: "Formatos suportados: yaml, yml, json.",
    CONFIG_SYNTAX_ERROR: "Corrija a sintaxe do documento de configuração.",
}


def config_error_payload(
    *,
    type: str,
    message: str,
    key: Optional[str] = None,
    details: Optional[Dict[str, Any]] = None,
) -> ErrorPayload:
    merged: Dict[str, Any] = {"key": key}
    merged.update(details or {})
    return ErrorPayload(
        type=type,
        message=message,
        details=merged,
        hint=_HINTS.get(type),
    )
