# src/wpstarter/core/config/loader.py
"""
Loader em memória da configuração de setup.

Este módulo converte texto de configuração (YAML ou JSON) já lido por um
colaborador externo em um dicionário bruto e, a partir dele, em `Config`.

Responsabilidades do módulo:
    - Parsear texto YAML ou JSON
    - Validar requisitos estruturais mínimos (tipo raiz)
    - Extrair a seção `extra.wpstarter` de um documento estilo composer.json

Princípios fundamentais:
    - Formatos são declarados explicitamente, nunca inferidos
    - Erros estruturais são falhas fatais
    - Validação semântica fica a cargo de `Config`

Limites explícitos:
    - Não lê arquivos do disco
    - Não realiza merge entre múltiplas fontes
"""

from __future__ import annotations

import json
from typing import Any, Dict, Mapping, Optional

import yaml  # PyYAML

from .config import Config
from .errors import (
    ConfigSyntaxError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)
from .registry import ValidatorRegistry

YAML_FORMATS = frozenset({"yaml", "yml"})
JSON_FORMATS = frozenset({"json"})
DEFAULT_SECTION = "wpstarter"


def parse_config_text(text: str, *, fmt: str) -> Dict[str, Any]:
    """
    Parseia texto de configuração e valida sua estrutura básica.

    Formatos suportados (v1):
        - YAML (yaml, yml)
        - JSON (json)

    Decisões arquiteturais:
        - Documentos vazios são interpretados como dicionários vazios
        - O conteúdo raiz deve ser um dicionário (`dict`)

    Args:
        text (str): Conteúdo do documento.
        fmt (str): Formato declarado (sem diferenciar caixa, ponto inicial aceito).

    Returns:
        Dict[str, Any]: Documento parseado.

    Raises:
        UnsupportedConfigFormatError: Se o formato não for suportado.
        ConfigSyntaxError: Se o texto não puder ser parseado.
        InvalidConfigRootTypeError: Se o conteúdo raiz não for um dicionário.
    """
    normalized = fmt.strip().lower().lstrip(".")

    if normalized in YAML_FORMATS:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ConfigSyntaxError(
                f"YAML inválido: {e}",
                details={"format": normalized},
            ) from e

    elif normalized in JSON_FORMATS:
        if not text.strip():
            data = None
        else:
            try:
                data = json.loads(text)
            except json.JSONDecodeError as e:
                raise ConfigSyntaxError(
                    f"JSON inválido: {e.msg} (linha {e.lineno}, coluna {e.colno})",
                    details={"format": normalized, "line": e.lineno, "column": e.colno},
                ) from e

    else:
        raise UnsupportedConfigFormatError(
            f"Formato não suportado: {fmt}",
            details={"format": fmt},
        )

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Config root deve ser dict, recebido: {type(data).__name__}"
        )

    return data


def extract_section(document: Mapping[str, Any], section: str = DEFAULT_SECTION) -> Dict[str, Any]:
    """
    Extrai `document["extra"][section]` de um documento estilo composer.json.

    Seção ausente (ou `extra` ausente) resulta em dicionário vazio.

    Raises:
        InvalidConfigRootTypeError: Se `extra` ou a seção não forem dicionários.
    """
    extra = document.get("extra")
    if extra is None:
        return {}
    if not isinstance(extra, Mapping):
        raise InvalidConfigRootTypeError(
            f"'extra' deve ser dict, recebido: {type(extra).__name__}",
            key="extra",
        )

    raw = extra.get(section)
    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        raise InvalidConfigRootTypeError(
            f"'extra.{section}' deve ser dict, recebido: {type(raw).__name__}",
            key=section,
        )

    return dict(raw)


def load_config(
    text: str,
    *,
    fmt: str = "json",
    section: Optional[str] = DEFAULT_SECTION,
    registry: Optional[ValidatorRegistry] = None,
) -> Config:
    """
    Parseia o texto, extrai a seção do WP Starter e constrói o `Config`.

    Com `section=None` o documento inteiro é tratado como configuração bruta.
    """
    document = parse_config_text(text, fmt=fmt)
    raw = document if section is None else extract_section(document, section)
    return Config(raw, registry=registry)
