# src/wpstarter/core/config/errors.py
"""
Exceções canônicas da camada de configuração do WP Starter.

Este módulo define a hierarquia oficial de exceções utilizadas durante
a construção, leitura e extensão da configuração do setup.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Validadores nunca levantam exceções (entrada inválida vira `None`)
    - Apenas violações de contrato da API geram erro

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Toda exceção pode ser convertida em `ErrorPayload`

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não depende de steps ou do contexto de setup
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from ..errors import (
    CONFIG_DUPLICATE_KEY,
    CONFIG_ERROR,
    CONFIG_IMMUTABLE,
    CONFIG_INVALID_KEY,
    CONFIG_INVALID_ROOT,
    CONFIG_KEY_NOT_FOUND,
    CONFIG_MISSING_VALIDATOR,
    CONFIG_SYNTAX_ERROR,
    CONFIG_UNSUPPORTED_FORMAT,
    ErrorPayload,
    config_error_payload,
)


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração do WP Starter.

    Todas as exceções levantadas durante construção, leitura e extensão
    da configuração devem herdar desta classe, permitindo captura
    genérica e conversão para `ErrorPayload`.
    """

    error_type: str = CONFIG_ERROR

    def __init__(
        self,
        message: str,
        *,
        key: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.key = key
        self.details = dict(details or {})

    def __str__(self) -> str:
        return self.message

    def to_payload(self) -> ErrorPayload:
        return config_error_payload(
            type=self.error_type,
            message=self.message,
            key=self.key,
            details=self.details,
        )


class DuplicateKeyError(ConfigError):
    """
    Exceção levantada quando `append_config` recebe uma chave já definida.

    Decisões arquiteturais:
        - A configuração é append-only
        - O valor novo é irrelevante: mesmo valores idênticos são rejeitados

    Limites explícitos:
        - Não tenta mesclar nem substituir o valor existente
    """

    error_type = CONFIG_DUPLICATE_KEY


class MissingValidatorError(ConfigError):
    """
    Exceção levantada quando uma chave customizada é adicionada sem
    função de validação e nenhuma está registrada para ela.
    """

    error_type = CONFIG_MISSING_VALIDATOR


class ImmutableConfigError(ConfigError):
    """
    Exceção levantada em qualquer tentativa de escrita ou remoção pela
    interface genérica de mapeamento (`config[k] = v`, `del config[k]`).

    Invariantes:
        - Nenhuma entrada é alterada ou removida após definida
    """

    error_type = CONFIG_IMMUTABLE


class KeyNotFoundError(ConfigError, KeyError):
    """
    Exceção levantada na leitura de uma chave ausente.

    Herda de `KeyError` para manter compatibilidade com o protocolo
    de `Mapping` (`get`, `in`).
    """

    error_type = CONFIG_KEY_NOT_FOUND

    def __str__(self) -> str:
        return self.message


class InvalidConfigKeyError(ConfigError, ValueError):
    """
    Exceção levantada quando `append_config` recebe um nome de chave que
    não é uma string não vazia.
    """

    error_type = CONFIG_INVALID_KEY


class InvalidConfigRootTypeError(ConfigError):
    """
    Exceção levantada quando a configuração bruta (ou a seção extraída
    de um documento) não é um dicionário.

    Limites explícitos:
        - Não tenta normalizar ou encapsular estruturas inválidas
    """

    error_type = CONFIG_INVALID_ROOT


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando o formato declarado do texto de configuração
    não é suportado pelo loader.

    Formatos suportados (v1):
        - YAML (yaml, yml)
        - JSON (json)
    """

    error_type = CONFIG_UNSUPPORTED_FORMAT


class ConfigSyntaxError(ConfigError):
    """Exceção levantada quando o texto de configuração não pode ser parseado."""

    error_type = CONFIG_SYNTAX_ERROR
