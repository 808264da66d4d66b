# tests/core/setup/test_setup_context.py
"""
Testes de logging estruturado e coleta de warnings no SetupContext.

Os testes asseguram que:
- a criação do contexto valida a configuração e registra um evento
- chaves descartadas pela validação viram warnings do step `config`
- eventos de log contêm metadados mínimos de rastreabilidade
- campos adicionais são preservados sem perda

Decisões arquiteturais:
    - Logs não são strings livres, mas eventos estruturados
    - Warnings são sinais não fatais e não interrompem o setup
"""

from wpstarter.core.config.config import Config
from wpstarter.core.setup.context import CONFIG_STEP_ID, SetupContext


def test_create_builds_config_and_logs(setup_ctx):
    assert isinstance(setup_ctx.config, Config)
    assert setup_ctx.paths == {"root": "/srv/site"}
    assert setup_ctx.meta == {"source": "pytest"}

    ev = setup_ctx.events[-1]
    assert ev["run_id"] == "run-test-001"
    assert ev["step_id"] == CONFIG_STEP_ID
    assert ev["level"] == "info"
    assert ev["message"] == "config validated"
    assert ev["keys"] == len(setup_ctx.config)
    assert ev["discarded"] == ["verbosity"]
    assert ev["wp_version"] == "5.2"
    assert ev["timestamp"].endswith("+00:00")


def test_discarded_keys_become_warnings(setup_ctx):
    assert setup_ctx.warnings[CONFIG_STEP_ID] == [
        "invalid value for 'verbosity' ignored, default kept"
    ]


def test_clean_config_has_no_warnings(registry):
    ctx = SetupContext.create({"verbosity": 1}, run_id="run-clean", registry=registry)
    assert ctx.warnings == {}
    assert ctx.config.registry is registry
    assert len(ctx.events) == 1


def test_structured_log_event(setup_ctx):
    setup_ctx.log(step_id="dropins", level="warning", message="unknown dropin", name="db.php")
    ev = setup_ctx.events[-1]
    assert ev["run_id"] == setup_ctx.run_id
    assert ev["step_id"] == "dropins"
    assert ev["level"] == "warning"
    assert ev["name"] == "db.php"


def test_warning_collection(setup_ctx):
    setup_ctx.add_warning(step_id="gitignore", message="custom entry skipped")
    setup_ctx.add_warning(step_id="gitignore", message="second")
    assert setup_ctx.warnings["gitignore"] == ["custom entry skipped", "second"]
