# tests/core/config/test_merge.py
"""
Testes da política de deep-merge de configuração.

Os testes asseguram que:
- valores escalares são sobrescritos corretamente
- dicionários são mesclados de forma recursiva
- listas são sobrescritas integralmente
- conflitos de tipo são detectados e rejeitados explicitamente
- objetos de entrada não são mutados durante o merge

Invariantes:
    - Chaves não sobrescritas são preservadas
    - Nenhum merge parcial é produzido em caso de erro
"""

import pytest

try:
    from pipeline_entities.core.config.merge import deep_merge, merge_layers
    from pipeline_entities.core.config.errors import ConfigTypeConflictError
except Exception as e:  # noqa: BLE001
    deep_merge = None
    ConfigTypeConflictError = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing config merge modules. Implement:\n"
            "- src/pipeline_entities/core/config/merge.py (deep_merge)\n"
            "- src/pipeline_entities/core/config/errors.py (ConfigTypeConflictError)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_merge_simple_override():
    """
    Verifica o comportamento básico de override de valores escalares.

    Invariantes:
        - O valor sobrescrito reflete exatamente o override
        - `base` e `override` não sofrem mutação
    """
    _require_imports()
    base = {"a": 1, "b": 2}
    override = {"b": 99}
    out = deep_merge(base, override)
    assert out == {"a": 1, "b": 99}
    assert base == {"a": 1, "b": 2}
    assert override == {"b": 99}


def test_merge_nested_dict():
    _require_imports()
    base = {"status": {"tag": "wip", "label": "Work in progress"}}
    override = {"status": {"tag": "ready"}}
    out = deep_merge(base, override)
    assert out == {"status": {"tag": "ready", "label": "Work in progress"}}


def test_merge_list_override_total():
    _require_imports()
    base = {"meta": {"tags": ["ui", "atoms"]}}
    override = {"meta": {"tags": ["ui"]}}
    out = deep_merge(base, override)
    assert out == {"meta": {"tags": ["ui"]}}


def test_merge_none_is_not_a_conflict():
    _require_imports()
    assert deep_merge({"label": None}, {"label": "x"}) == {"label": "x"}
    assert deep_merge({"label": "x"}, {"label": None}) == {"label": None}


def test_merge_type_conflict_raises():
    """
    Verifica que conflitos estruturais de tipo são rejeitados.

    Invariantes:
        - dict vs str levanta `ConfigTypeConflictError`
    """
    _require_imports()
    base = {"status": {"tag": "wip"}}
    override = {"status": "ready"}  # dict vs str
    with pytest.raises(ConfigTypeConflictError):
        deep_merge(base, override)


def test_merge_conflict_reports_full_key_path():
    _require_imports()
    base = {"status": {"meta": {"draft": True}}}
    override = {"status": {"meta": {"draft": "no"}}}
    with pytest.raises(ConfigTypeConflictError, match="status.meta.draft"):
        deep_merge(base, override)


def test_merge_tuple_override_becomes_list():
    _require_imports()
    out = deep_merge({"tags": ["ui"]}, {"tags": ("ui", "atoms")})
    assert out == {"tags": ["ui", "atoms"]}


def test_merge_output_shares_no_references():
    _require_imports()
    base = {"status": {"tag": "wip"}}
    override = {"tags": ["ui"]}
    out = deep_merge(base, override)
    out["status"]["tag"] = "mutated"
    out["tags"].append("mutated")
    assert base == {"status": {"tag": "wip"}}
    assert override == {"tags": ["ui"]}


def test_merge_layers_applies_in_order():
    _require_imports()
    out = merge_layers([{"a": 1, "b": {"c": 1}}, {"b": {"c": 2}}, {"a": 3}])
    assert out == {"a": 3, "b": {"c": 2}}
    assert merge_layers([]) == {}
