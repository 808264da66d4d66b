# src/wpstarter/core/config/config.py
"""
Configuração de setup validada, somente leitura e append-only.

Este módulo define `Config`, o objeto de configuração entregue aos steps
de setup. Ele é construído uma única vez a partir da configuração bruta
do usuário e só pode crescer via `append_config`.

Política de construção (v1):
    1. `wp-version` é lido sem validação (`"0.0.0"` quando ausente ou vazio)
    2. os defaults formam a base
    3. cada chave fornecida passa pelo seu validador (quando registrado);
       resultado `None` mantém o default
    4. `register-theme-folder` verdadeiro força `move-content = False`
    5. `wp-version` é aplicado por último

Decisões arquiteturais:
    - Configuração inválida degrada para defaults, nunca aborta o setup
    - Escrita e remoção pela interface de mapeamento sempre falham
    - O registry de validadores é recebido por referência

Invariantes:
    - Uma chave definida nunca é sobrescrita ou removida
    - Chaves presentes vêm dos defaults, da entrada validada ou de
      `append_config`

Limites explícitos:
    - Não lê arquivos de configuração
    - Não executa steps
    - Não é thread-safe: `append_config` deve ser sincronizado externamente
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

from .defaults import WP_VERSION_FALLBACK, WP_VERSION_KEY, fresh_defaults
from .errors import (
    DuplicateKeyError,
    ImmutableConfigError,
    InvalidConfigKeyError,
    InvalidConfigRootTypeError,
    KeyNotFoundError,
    MissingValidatorError,
)
from .registry import ValidatorRegistry
from .validators import Validator


def _detached(value: Any) -> Any:
    """Cópia dos contêineres (list/dict) mantendo as folhas originais."""
    if isinstance(value, list):
        return [_detached(item) for item in value]
    if isinstance(value, dict):
        return {key: _detached(item) for key, item in value.items()}
    return value


class Config(Mapping[str, Any]):
    """
    Mapa de configuração imutável consumido pelos steps de setup.

    Leitura:
        - `config.has(key)` / `key in config`
        - `config[key]` (levanta `KeyNotFoundError` se ausente)
        - demais helpers de `Mapping` (`get`, `keys`, `items`, ...)

    Escrita:
        - apenas `append_config`, para chaves ainda não definidas

    Args:
        raw (Mapping[str, Any]): Configuração bruta do usuário.
        registry (Optional[ValidatorRegistry]): Registry compartilhado da
            run. Quando omitido, um registry com os validadores embutidos
            é criado.

    Raises:
        InvalidConfigRootTypeError: Se `raw` não for um mapa.
    """

    def __init__(
        self,
        raw: Mapping[str, Any],
        registry: Optional[ValidatorRegistry] = None,
    ) -> None:
        if not isinstance(raw, Mapping):
            raise InvalidConfigRootTypeError(
                f"Config root deve ser dict, recebido: {type(raw).__name__}"
            )

        self._registry = registry if registry is not None else ValidatorRegistry.with_builtins()
        self._discarded: List[str] = []
        self._configs: Dict[str, Any] = self._validate(raw)

    def _validate(self, raw: Mapping[str, Any]) -> Dict[str, Any]:
        wp_version = raw.get(WP_VERSION_KEY) or WP_VERSION_FALLBACK
        parsed = fresh_defaults()

        for key, value in raw.items():
            if key == WP_VERSION_KEY:
                continue

            validated = value
            if self._registry.has(key):
                validated = self._registry.get(key)(value)

            if validated is None:
                self._discarded.append(key)
                continue

            parsed[key] = _detached(validated)

        # regra cruzada: sempre aplicada depois de todas as chaves
        if parsed.get("register-theme-folder"):
            parsed["move-content"] = False

        parsed[WP_VERSION_KEY] = wp_version
        return parsed

    # -----------------------------
    # Append-only
    # -----------------------------
    def append_config(
        self,
        name: str,
        value: Any,
        validator: Optional[Validator] = None,
    ) -> "Config":
        """
        Adiciona uma chave nova à configuração.

        Permite usar a configuração como DTO entre steps: um step pode
        registrar valores derivados (ex.: um caminho resolvido) para os
        steps seguintes.

        Regras:
            - nome que não é string não vazia → `InvalidConfigKeyError`
            - chave já definida → `DuplicateKeyError`
            - chave sem validador registrado exige `validator`, que passa a
              ser registrado para a chave (`MissingValidatorError` se ausente)
            - o `validator` fornecido tem precedência sobre o registrado
            - resultado `None` não escreve nada (o registro permanece)

        Returns:
            Config: a própria instância, para encadeamento.
        """
        if not isinstance(name, str) or not name.strip():
            raise InvalidConfigKeyError(
                f"Config name must be a non-empty string, got {name!r}",
                key=name if isinstance(name, str) else None,
            )

        if name in self._configs:
            raise DuplicateKeyError(
                f"Config is append-only: '{name}' is already set",
                key=name,
            )

        if not self._registry.has(name):
            if validator is None:
                raise MissingValidatorError(
                    f"Custom config '{name}' needs a validation callback",
                    key=name,
                )
            self._registry.add(name, validator)

        validate = validator if validator is not None else self._registry.get(name)
        validated = validate(value)

        if validated is not None:
            self._configs[name] = _detached(validated)

        return self

    # -----------------------------
    # Leitura
    # -----------------------------
    def has(self, key: str) -> bool:
        return key in self._configs

    def __getitem__(self, key: str) -> Any:
        if key not in self._configs:
            raise KeyNotFoundError(f"Config '{key}' is not set", key=key)
        return _detached(self._configs[key])

    def __contains__(self, key: object) -> bool:
        return key in self._configs

    def __iter__(self) -> Iterator[str]:
        return iter(self._configs)

    def __len__(self) -> int:
        return len(self._configs)

    # -----------------------------
    # Escrita genérica (bloqueada)
    # -----------------------------
    def __setitem__(self, key: str, value: Any) -> None:
        raise ImmutableConfigError("Configs can't be set on the fly.", key=key)

    def __delitem__(self, key: str) -> None:
        raise ImmutableConfigError("Configs can't be unset on the fly.", key=key)

    # -----------------------------
    # Diagnóstico
    # -----------------------------
    @property
    def registry(self) -> ValidatorRegistry:
        return self._registry

    @property
    def discarded(self) -> Tuple[str, ...]:
        """Chaves fornecidas cujo valor foi rejeitado pelo validador."""
        return tuple(self._discarded)

    def to_dict(self) -> Dict[str, Any]:
        return {key: _detached(value) for key, value in self._configs.items()}

    def __repr__(self) -> str:
        return f"Config({self._configs!r})"
