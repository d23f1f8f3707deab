# tests/entities/test_file.py
"""
Testes da entidade File.

Os testes asseguram que:
- atributos de arquivo são roteados para o VirtualFile
- propriedades customizadas continuam nos stores de Entity
- `to_json` expõe atributos de arquivo e derivados, com conteúdo como texto
- `clone` produz um File independente
- escritas em atributos somente leitura são rejeitadas

Invariantes:
    - Atributos derivados refletem sempre o `path` atual
    - Atributos de arquivo nunca são sombreados por props customizadas
"""

import io
import json
import os
from types import SimpleNamespace

import pytest

try:
    from pipeline_entities import Entity, File, InvalidPathError
except Exception as e:  # noqa: BLE001
    File = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing File entity. Implement:\n"
            "- src/pipeline_entities/entities/file.py (File)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_file_is_an_entity(make_file):
    _require_imports()
    file = make_file()
    assert isinstance(file, Entity)
    assert File.is_file(file) is True
    assert File.is_file(Entity()) is False
    assert File.from_props(file) is file


def test_to_json_exposes_file_attributes(make_file, file_contents):
    """
    Verifica a projeção completa de um File relativo.

    Invariantes:
        - derivados (relative, dirname, basename, stem, extname) são incluídos
        - conteúdo em bytes é projetado como texto
        - `stat` ausente aparece como None
    """
    _require_imports()
    file = make_file()
    assert file.to_json() == {
        "cwd": "/",
        "relative": "file.js",
        "path": "test/file.js",
        "extname": ".js",
        "base": "test",
        "basename": "file.js",
        "contents": file_contents,
        "dirname": "test",
        "stem": "file",
        "stat": None,
        "symlink": None,
        "history": ["test/file.js"],
    }


def test_changing_path_base_and_dirname(make_file):
    _require_imports()
    file = make_file()
    file.path = "test/bar.jsx"
    file.base = "components"
    file.dirname = "components"

    assert file.relative == "bar.jsx"
    assert file.path == "components/bar.jsx"
    assert file.extname == ".jsx"
    assert file.get("history") == ["test/file.js", "test/bar.jsx", "components/bar.jsx"]
    assert file.get("history[0]") == "test/file.js"


def test_base_follows_cwd_when_not_set():
    _require_imports()
    file = File({"cwd": "/project", "path": "/project/src/app.js"})
    assert file.base == "/project"
    assert file.relative == "src/app.js"

    file.cwd = "/project/src"
    assert file.base == "/project/src"
    assert file.relative == "app.js"


def test_derived_attributes_on_construction():
    _require_imports()
    file = File({"cwd": "/", "path": "/src/a.js", "stem": "b", "extname": ".ts"})
    assert file.path == "/src/b.ts"
    assert file.get_config() == {}


def test_custom_props_live_in_entity_stores(make_file, base_file_data):
    _require_imports()
    file = make_file({**base_file_data, "title": "Button", "_hidden": "secret"})

    assert file.get("title") == "Button"
    assert file.get("_hidden") == "secret"
    assert file.get_config() == {"title": "Button", "_hidden": "secret"}

    data = file.to_json()
    assert data["title"] == "Button"
    assert "_hidden" not in data


def test_file_attributes_are_not_shadowed_by_custom_props(make_file):
    _require_imports()
    file = make_file()
    file.set("custom.path", "ignored")
    assert file.to_json()["path"] == "test/file.js"
    assert file.get("custom") == {"path": "ignored"}


def test_setters_apply_to_file_attributes(make_file):
    _require_imports()
    file = make_file()
    file.define_setter("basename", lambda value, f: value.lower())
    file.define_getter("stem", lambda value, f: value.upper())

    assert file.set("basename", "INDEX.JS") == "index.js"
    assert file.path == "test/index.js"
    assert file.stem == "INDEX"
    assert file.to_json()["stem"] == "index"


def test_read_only_file_paths_are_rejected(make_file):
    _require_imports()
    file = make_file()
    with pytest.raises(InvalidPathError):
        file.set("relative", "other.js")
    with pytest.raises(InvalidPathError):
        file.set("history[0]", "other.js")
    assert file.path == "test/file.js"


def test_custom_stat_is_kept_but_not_serialized(base_file_data):
    _require_imports()
    stat = os.stat(".")
    file = File({**base_file_data, "stat": stat})

    assert file.get("stat").st_mode == stat.st_mode
    assert file.stat.st_mode == stat.st_mode
    assert "stat" not in file.to_json()


def test_stat_like_objects_are_not_serialized():
    _require_imports()
    file = File({"path": "/x/a.txt", "stat": SimpleNamespace(st_mode=0o100644, st_size=3)})

    data = file.to_json()
    assert "stat" not in data
    json.dumps(data)
    assert len(file.hash()) == 64


def test_stream_contents_are_projected():
    """
    Verifica a projeção de conteúdo em stream.

    Política:
        - stream com `getvalue()` → texto, sem mover a posição de leitura
        - hash igual ao de um File com os mesmos bytes
        - stream sem `getvalue()` → None
    """
    _require_imports()
    stream = io.BytesIO(b"abc")
    stream.seek(1)
    file = File({"path": "/x/a.txt", "contents": stream})

    data = file.to_json()
    assert data["contents"] == "abc"
    json.dumps(data)
    assert stream.tell() == 1
    assert file.hash() == File({"path": "/x/a.txt", "contents": b"abc"}).hash()

    opaque = File({"path": "/x/b.txt", "contents": io.BufferedReader(io.BytesIO(b"abc"))})
    assert opaque.to_json()["contents"] is None
    assert len(opaque.hash()) == 64


def test_nested_entity_in_custom_props_is_serialized(make_file):
    _require_imports()
    file = make_file()
    file.set("owner", Entity({"name": "ui-team"}))
    assert file.to_json()["owner"] == {"name": "ui-team"}


def test_directory_classification():
    _require_imports()
    directory = File({"path": os.getcwd(), "stat": os.stat(".")})
    assert directory.is_directory()
    assert directory.is_null()
    assert not directory.is_buffer()
    assert not directory.is_stream()
    assert not directory.is_symbolic()


def test_str_returns_decoded_contents(make_file, file_contents):
    _require_imports()
    assert str(make_file()) == file_contents
    assert str(File({"path": "/empty.js"})) == ""


def test_membership(make_file):
    _require_imports()
    file = make_file()
    assert "relative" in file
    assert "contents" in file
    assert "title" not in file
    file.set("title", "Button")
    assert "title" in file


def test_clone_is_independent(make_file, base_file_data):
    _require_imports()
    file = make_file({**base_file_data, "title": "Button"})
    file.set("status", {"tag": "wip"})

    cloned = file.clone()
    assert isinstance(cloned, File)
    assert cloned is not file
    assert cloned.to_json() == file.to_json()
    assert cloned.get_config() == {"title": "Button"}
    assert cloned.get_data() == {"status": {"tag": "wip"}}

    cloned.path = "test/other.js"
    cloned.set("status.tag", "ready")
    assert file.path == "test/file.js"
    assert file.get("history") == ["test/file.js"]
    assert file.get("status.tag") == "wip"


def test_hash_covers_file_attributes(make_file, base_file_data):
    _require_imports()
    a = make_file()
    b = make_file()
    assert a.hash() == b.hash()

    b.contents = b"var y = 456"
    assert a.hash() != b.hash()
    assert a.hash() != File({**base_file_data, "path": "test/other.js"}).hash()
