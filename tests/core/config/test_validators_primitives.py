# tests/core/config/test_validators_primitives.py
"""
Testes dos validadores primitivos da configuração.

Os testes asseguram que:
- todas as grafias booleanas reconhecidas são convertidas corretamente
- qualquer outro valor resulta em `None` (sem override)
- sentinelas de pergunta são normalizadas para "ask"
- inteiros e strings numéricas são aceitos, demais valores não

Invariantes:
    - Validadores nunca levantam exceções
    - `None` é o único sinal de valor inválido
"""

import math

import pytest

try:
    from wpstarter.core.config.validators import (
        validate_bool,
        validate_bool_or_ask,
        validate_bool_or_ask_or_url,
        validate_int,
        validate_url,
    )
except Exception as e:  # noqa: BLE001
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    """
    Garante que os validadores primitivos estejam disponíveis para os testes.

    Falha imediatamente, com mensagem explícita, quando o módulo de
    validadores não pode ser importado.
    """
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing config validators. Implement:"
            "- src/wpstarter/core/config/validators.py (validate_bool, validate_bool_or_ask, ...)"
            f"Import error: {_IMPORT_ERR}"
        )


@pytest.mark.parametrize(
    "value, expected",
    [
        (True, True),
        (False, False),
        (1, True),
        (0, False),
        ("true", True),
        ("false", False),
        ("1", True),
        ("0", False),
        ("yes", True),
        ("no", False),
        ("on", True),
        ("off", False),
        ("TRUE", True),
        ("Off", False),
        ("YeS", True),
    ],
)
def test_bool_accepts_recognized_spellings(value, expected):
    """
    Verifica que todas as grafias booleanas reconhecidas são convertidas.

    Decisões arquiteturais:
        - A comparação de strings não diferencia caixa
        - `1` e `0` inteiros são booleanos válidos
    """
    _require_imports()
    assert validate_bool(value) is expected


@pytest.mark.parametrize("value", [2, -1, 1.0, "maybe", " yes", "", None, [], {}, "ask"])
def test_bool_rejects_everything_else(value):
    _require_imports()
    assert validate_bool(value) is None


@pytest.mark.parametrize("value", ["ask", " Prompt ", "QUERY", "interrogate", "demand\n"])
def test_bool_or_ask_normalizes_ask_aliases(value):
    _require_imports()
    assert validate_bool_or_ask(value) == "ask"


def test_bool_or_ask_falls_back_to_bool():
    _require_imports()
    assert validate_bool_or_ask("no") is False
    assert validate_bool_or_ask(1) is True
    assert validate_bool_or_ask("whatever") is None


def test_bool_or_ask_or_url():
    """
    Verifica a cadeia booleano → "ask" → URL.

    Invariantes:
        - Formas literais exatas resultam em booleano
        - Sentinelas de pergunta resultam em "ask"
        - Demais strings são sanitizadas como URL
        - Valores que não são string nem booleano resultam em `None`
    """
    _require_imports()
    assert validate_bool_or_ask_or_url(True) is True
    assert validate_bool_or_ask_or_url("off") is False
    assert validate_bool_or_ask_or_url(0) is False
    assert validate_bool_or_ask_or_url("Demand") == "ask"
    assert validate_bool_or_ask_or_url("https://example.com/.env.example") == "https://example.com/.env.example"
    assert validate_bool_or_ask_or_url("http://exa mple.com/é") == "http://example.com/"
    assert validate_bool_or_ask_or_url(42) is None
    assert validate_bool_or_ask_or_url(None) is None


def test_bool_or_ask_or_url_only_exact_literals_are_booleans():
    _require_imports()
    # "TRUE" não é forma literal exata: segue como URL
    assert validate_bool_or_ask_or_url("TRUE") == "TRUE"


def test_url_strips_unsafe_characters():
    _require_imports()
    assert validate_url("a b\tc") == "abc"
    assert validate_url("   ") is None
    assert validate_url(b"https://x") is None


@pytest.mark.parametrize(
    "value, expected",
    [
        (3, 3),
        (-4, -4),
        (3.9, 3),
        ("12", 12),
        (" 2 ", 2),
        ("+7", 7),
        ("1.9", 1),
        ("1e2", 100),
        (".5", 0),
    ],
)
def test_int_accepts_numbers_and_numeric_strings(value, expected):
    _require_imports()
    assert validate_int(value) == expected


@pytest.mark.parametrize("value", [True, False, "abc", "1a", "", None, [1], math.nan, math.inf, "inf", "1e400"])
def test_int_rejects_non_numeric(value):
    _require_imports()
    assert validate_int(value) is None


@pytest.mark.parametrize("value", ["٣", "１２", "²"])
def test_int_rejects_non_ascii_digits(value):
    _require_imports()
    assert validate_int(value) is None
