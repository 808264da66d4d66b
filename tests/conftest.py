# tests/conftest.py
"""
Fixtures compartilhados para testes do WP Starter.

Este módulo define fixtures reutilizáveis que fornecem:
- configurações brutas mínimas e determinísticas
- documentos composer.json / YAML como string (sem I/O)
- registry de validadores isolado por teste
- referências de classes de step para `custom-steps`

Decisões arquiteturais:
    - Fixtures são mantidas simples e explícitas
    - Nenhuma fixture lê ou escreve arquivos
    - Imports do core são realizados de forma lazy para
      melhorar a clareza de erros durante falhas

Invariantes:
    - Nenhuma fixture compartilha estado mutável entre testes
    - Todas as fixtures são seguras para execução em paralelo
"""

import pytest


STEPS_MODULE = "tests.fixtures.steps.dummy_steps"


# =====================================================
# Config fixtures
# =====================================================

@pytest.fixture
def raw_config() -> dict:
    """
    Fixture que fornece uma configuração bruta semelhante ao uso real.

    Mistura valores válidos, grafias alternativas e valores inválidos para
    exercitar a política tolerante de validação.

    Returns:
        dict: Configuração bruta (seção `extra.wpstarter`).
    """
    return {
        "wp-version": "5.2",
        "gitignore": {"custom": ["node_modules", 3], "vendor": "no"},
        "env-example": "https://example.com/.env.example",
        "env-file": "config\\.env",
        "register-theme-folder": "false",
        "move-content": "Yes",
        "content-dev-op": "COPY",
        "dropins": ["dropins\\object-cache.php", "", "dropins/object-cache.php"],
        "verbosity": "9",
        "project-name": "acme",
    }


@pytest.fixture
def registry():
    """Registry com os validadores embutidos, isolado por teste."""
    from wpstarter.core.config.registry import ValidatorRegistry

    return ValidatorRegistry.with_builtins()


@pytest.fixture
def composer_json_text() -> str:
    """
    Fixture que fornece um composer.json com a seção `extra.wpstarter`.

    Returns:
        str: Documento JSON.
    """
    return """\
{
  "name": "acme/site",
  "require": {"wecodemore/wpstarter": "^2.0"},
  "extra": {
    "wordpress-install-dir": "public/wp",
    "wpstarter": {
      "prevent-overwrite": "hard",
      "unknown-dropins": "prompt",
      "verbosity": 2
    }
  }
}
"""


@pytest.fixture
def wpstarter_yaml_text() -> str:
    """Configuração do WP Starter em YAML (documento inteiro, sem seção)."""
    return """\
gitignore: false
content-dev-op: symlink
register-theme-folder: ask
dropins:
  - dropins/db.php
"""


# =====================================================
# Step fixtures
# =====================================================

@pytest.fixture
def step_refs() -> dict:
    """
    Fixture que fornece referências de classe para `custom-steps`.

    Inclui referências válidas nos dois formatos aceitos
    ("modulo:Classe" e "modulo.Classe") e referências inválidas.
    """
    return {
        "content-dev": f"{STEPS_MODULE}:DummyContentDevStep",
        "noop": f"{STEPS_MODULE}.DummyNoopStep",
        "not-a-step": f"{STEPS_MODULE}:NotAStep",
        "function": f"{STEPS_MODULE}:make_step",
        "missing-module": "tests.fixtures.steps.nope:Step",
        "missing-class": f"{STEPS_MODULE}:Nope",
    }


@pytest.fixture
def setup_ctx(raw_config):
    """SetupContext determinístico construído a partir de `raw_config`."""
    from wpstarter.core.setup.context import SetupContext

    return SetupContext.create(
        raw_config,
        run_id="run-test-001",
        paths={"root": "/srv/site"},
        meta={"source": "pytest"},
    )
