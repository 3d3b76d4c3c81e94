"""Shared fixtures for the CodeGraph test suite."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture()
def sample_repo(tmp_path: Path) -> Path:
    """Create a small mixed-language project.

    Layout::

        sample_repo/
        +-- src/
        |   +-- app.py       (imports utils, class App with two methods)
        |   +-- utils.py     (top-level helper)
        +-- web/
        |   +-- main.ts      (imports ./api, class + function)
        |   +-- api.ts       (arrow function)
        +-- native/
        |   +-- calc.cpp     (#include "calc.h", prototype + definition)
        |   +-- calc.h       (prototype only)
        +-- node_modules/
        |   +-- dep/index.js (ignored)
        +-- README.md        (not allow-listed)
    """
    src = tmp_path / "src"
    src.mkdir()
    (src / "app.py").write_text(
        "import utils\n"
        "\n"
        "class App:\n"
        "    def start(self):\n"
        "        return utils.helper()\n"
        "\n"
        "    def stop(self):\n"
        "        pass\n",
        encoding="utf-8",
    )
    (src / "utils.py").write_text(
        "def helper():\n"
        "    return 42\n",
        encoding="utf-8",
    )

    web = tmp_path / "web"
    web.mkdir()
    (web / "main.ts").write_text(
        "import { fetchData } from './api';\n"
        "export class Page {\n"
        "  render() {\n"
        "    return fetchData();\n"
        "  }\n"
        "}\n"
        "function boot() {\n"
        "  new Page().render();\n"
        "}\n",
        encoding="utf-8",
    )
    (web / "api.ts").write_text(
        "export const fetchData = async () => {\n"
        "  return [];\n"
        "};\n",
        encoding="utf-8",
    )

    native = tmp_path / "native"
    native.mkdir()
    (native / "calc.cpp").write_text(
        '#include "calc.h"\n'
        "\n"
        "int add(int a, int b);\n"
        "\n"
        "int add(int a, int b) {\n"
        "    return a + b;\n"
        "}\n",
        encoding="utf-8",
    )
    (native / "calc.h").write_text("int add(int a, int b);\n", encoding="utf-8")

    dep = tmp_path / "node_modules" / "dep"
    dep.mkdir(parents=True)
    (dep / "index.js").write_text("function hidden() {}\n", encoding="utf-8")

    (tmp_path / "README.md").write_text("# Sample\n", encoding="utf-8")

    return tmp_path
