# src/wpstarter/core/setup/step.py
"""
Contrato canônico de step de setup do WP Starter.

Este módulo define o protocolo que uma classe referenciada em
`custom-steps` deve satisfazer para ser aceita pela configuração.

Princípios fundamentais:
    - Conformidade é garantida por duck typing (@runtime_checkable)
    - O protocolo declara apenas métodos, permitindo checagem de classes
      com `issubclass`
    - A configuração verifica apenas conformidade de tipo, nunca comportamento

Limites explícitos:
    - Não executa steps
    - Não define ordem de execução
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from .types import StepResult

if TYPE_CHECKING:
    from ..config.config import Config
    from .context import SetupContext


@runtime_checkable
class SetupStep(Protocol):
    """
    Contrato mínimo de um step de setup.

    Métodos obrigatórios:
        - name(): identificador estável do step
        - allowed(config): se o step deve rodar para a configuração dada
        - run(ctx): executa o step e retorna um `StepResult`

    Decisões arquiteturais:
        - O protocolo não impõe herança, apenas conformidade estrutural
        - Steps podem registrar valores derivados via
          `ctx.config.append_config`
    """

    def name(self) -> str:
        """Identificador estável do step."""
        ...

    def allowed(self, config: "Config") -> bool:
        """Indica se o step deve ser executado para esta configuração."""
        ...

    def run(self, ctx: "SetupContext") -> StepResult:
        """Executa o step uma única vez usando o SetupContext."""
        ...
