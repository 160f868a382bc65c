import textwrap
from pathlib import Path

import pytest

from tests.infrastructure.file_utils import write


@pytest.fixture
def ngproj(tmp_path: Path) -> Path:
    """Minimal project using the framework: settings, a script bundle and a page."""
    root = tmp_path
    write(
        root / "xinject-cfg" / "settings.yaml",
        textwrap.dedent("""
        enabled: auto
        expression_attributes: [my-expr]
        exclude: [build/]
        """).strip() + "\n",
    )
    write(root / "lib" / "angular.min.js", "/* framework */\n")
    write(
        root / "web" / "index.html",
        '<div ng-if="user.loggedIn" title="Hi {{user.name}}">\n'
        "  <!-- {{ignored}} -->\n"
        "  {{greeting}}\n"
        "</div>\n",
    )
    return root


@pytest.fixture
def pubproj(tmp_path: Path) -> Path:
    """Project with a pubspec.yaml, a packages/ folder and a nested source file."""
    root = tmp_path
    write(root / "pubspec.yaml", "name: my_app\nversion: 1.10\n")
    (root / "packages").mkdir()
    write(root / "lib" / "src" / "main.dart", "void main() {}\n")
    return root
