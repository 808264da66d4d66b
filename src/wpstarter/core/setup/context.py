# src/wpstarter/core/setup/context.py
"""
Contexto compartilhado de uma run de setup.

Este módulo define o `SetupContext`, a estrutura entregue aos steps de
setup. Ele reúne a configuração validada, os caminhos resolvidos pelo
colaborador externo e os sinais de observabilidade da run.

Responsabilidades do módulo:
    - Manter identidade e metadados da run
    - Expor a configuração validada (`Config`)
    - Registrar eventos de log estruturados
    - Coletar warnings por step

Invariantes:
    - Logs sempre incluem `run_id` e `step_id`
    - Warnings são agrupados por `step_id`
    - Chaves descartadas na validação viram warnings do step `config`

Limites explícitos:
    - Não executa steps
    - Não persiste eventos
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional

from ..config.config import Config
from ..config.registry import ValidatorRegistry

CONFIG_STEP_ID = "config"


@dataclass
class SetupContext:
    """
    Contexto de execução compartilhado de uma run de setup.

    Decisões arquiteturais:
        - Steps interagem com a configuração apenas via `config`
        - Logs e warnings são estruturados, nunca texto livre
        - Nenhum logger global é utilizado
    """
    run_id: str
    config: Config
    paths: Dict[str, str] = field(default_factory=dict)
    meta: Dict[str, Any] = field(default_factory=dict)

    events: List[Dict[str, Any]] = field(default_factory=list, init=False)
    warnings: Dict[str, List[str]] = field(default_factory=dict, init=False)

    @classmethod
    def create(
        cls,
        raw: Mapping[str, Any],
        *,
        run_id: str,
        registry: Optional[ValidatorRegistry] = None,
        paths: Optional[Dict[str, str]] = None,
        meta: Optional[Dict[str, Any]] = None,
    ) -> "SetupContext":
        """
        Valida a configuração bruta e cria o contexto da run.

        Registra um evento `config validated` e um warning para cada chave
        cujo valor foi descartado pelo validador.
        """
        config = Config(raw, registry=registry)
        ctx = cls(run_id=run_id, config=config, paths=dict(paths or {}), meta=dict(meta or {}))

        for key in config.discarded:
            ctx.add_warning(
                step_id=CONFIG_STEP_ID,
                message=f"invalid value for '{key}' ignored, default kept",
            )

        ctx.log(
            step_id=CONFIG_STEP_ID,
            level="info",
            message="config validated",
            keys=len(config),
            discarded=list(config.discarded),
            wp_version=config["wp-version"],
        )
        return ctx

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
