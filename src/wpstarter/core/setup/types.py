# src/wpstarter/core/setup/types.py
"""
Tipos canônicos de resultado dos steps de setup.

Componentes principais:
    - StepStatus → enum de estados finais (SUCCESS, SKIPPED, FAILED)
    - StepResult → estrutura imutável de resultado de execução

Invariantes:
    - Enums possuem valores textuais canônicos
    - StepResult é imutável
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List


class StepStatus(str, Enum):
    """
    Estados finais possíveis da execução de um step de setup.

    Estados definidos:
        - SUCCESS: execução concluída com sucesso
        - SKIPPED: step não permitido pela configuração (`allowed` falso)
        - FAILED: execução interrompida por erro
    """
    SUCCESS = "success"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class StepResult:
    """
    Resultado imutável da execução de um step de setup.

    Campos:
        - step: nome do step
        - status: estado final da execução
        - summary: resumo textual
        - warnings: avisos não fatais
        - payload: dados adicionais livres
    """
    step: str
    status: StepStatus
    summary: str
    warnings: List[str] = field(default_factory=list)
    payload: Dict[str, Any] = field(default_factory=dict)
