# src/wpstarter/core/config/registry.py
"""
Registro de validadores por chave de configuração.

Este módulo define o `ValidatorRegistry`, a tabela que associa cada chave
de configuração à função responsável por validá-la.

Responsabilidades do módulo:
    - Expor a tabela canônica de validadores embutidos
    - Permitir o registro de validadores para chaves customizadas
    - Preservar a ordem de registro

Decisões arquiteturais:
    - O registry é um objeto explícito, passado por referência
    - Não existe tabela global mutável: cada run cria (ou reutiliza) a sua
    - Uma chave registrada nunca tem seu validador substituído

Invariantes:
    - Cada chave possui no máximo um validador
    - Todo validador registrado é chamável

Limites explícitos:
    - Não executa validação de configuração completa
    - Não conhece defaults
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Mapping

from .validators import (
    Validator,
    validate_bool_or_ask,
    validate_bool_or_ask_or_url,
    validate_content_dev_operation,
    validate_gitignore,
    validate_overwrite,
    validate_path,
    validate_path_array,
    validate_scripts,
    validate_steps,
    validate_verbosity,
)

BUILTIN_VALIDATORS: Mapping[str, Validator] = {
    "gitignore": validate_gitignore,
    "env-example": validate_bool_or_ask_or_url,
    "env-file": validate_path,
    "register-theme-folder": validate_bool_or_ask,
    "move-content": validate_bool_or_ask,
    "content-dev-dir": validate_path,
    "content-dev-op": validate_content_dev_operation,
    "dropins": validate_path_array,
    "unknown-dropins": validate_bool_or_ask,
    "prevent-overwrite": validate_overwrite,
    "verbosity": validate_verbosity,
    "custom-steps": validate_steps,
    "scripts": validate_scripts,
}


class DuplicateValidatorError(ValueError):
    """
    Exceção levantada ao registrar um validador para uma chave que já
    possui um.

    Limites explícitos:
        - Não substitui o validador existente
    """


@dataclass
class ValidatorRegistry:
    """
    Tabela de validadores por chave, extensível em runtime.

    Uso típico:
        - `ValidatorRegistry.with_builtins()` no início do setup
        - a mesma instância é passada a todo `Config` da run
        - `Config.append_config` registra validadores de chaves customizadas
    """

    _validators: Dict[str, Validator] = field(default_factory=dict, init=False, repr=False)
    _order: List[str] = field(default_factory=list, init=False, repr=False)

    @classmethod
    def with_builtins(cls) -> "ValidatorRegistry":
        registry = cls()
        for name, validator in BUILTIN_VALIDATORS.items():
            registry.add(name, validator)
        return registry

    def add(self, name: str, validator: Validator) -> None:
        if not isinstance(name, str) or not name.strip():
            raise ValueError("validator name must be a non-empty string")

        if not callable(validator):
            raise TypeError(f"Validator for '{name}' must be callable")

        if name in self._validators:
            raise DuplicateValidatorError(f"Duplicate validator: {name}")

        self._validators[name] = validator
        self._order.append(name)

    def has(self, name: str) -> bool:
        return name in self._validators

    def __contains__(self, name: object) -> bool:
        return name in self._validators

    def get(self, name: str) -> Validator:
        return self._validators[name]

    def names(self) -> List[str]:
        return list(self._order)
