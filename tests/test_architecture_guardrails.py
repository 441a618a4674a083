from __future__ import annotations

import ast
from pathlib import Path


ROOT = Path(__file__).resolve().parents[1]


def _line_count(path: Path) -> int:
    return len(path.read_text(encoding="utf-8", errors="ignore").splitlines())


def _python_files(root: Path):
    for path in root.rglob("*.py"):
        # Keep architecture checks focused on source/test code, not packaged artifacts.
        if "dist" in path.parts or "build" in path.parts:
            continue
        yield path


def _imported_modules(path: Path):
    tree = ast.parse(path.read_text(encoding="utf-8", errors="ignore"))
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                yield alias.name
        elif isinstance(node, ast.ImportFrom):
            yield node.module or ""


def _layer_violations(layer: str, forbidden: str) -> list[tuple[str, str]]:
    violations: list[tuple[str, str]] = []
    for path in _python_files(ROOT / layer):
        for name in _imported_modules(path):
            if name == forbidden or name.startswith(forbidden + "."):
                violations.append((str(path.relative_to(ROOT)), name))
    return violations


def test_no_python_module_exceeds_hard_line_limit():
    offenders = []
    sources = [p for layer in ("core", "infra", "migration", "tests") for p in _python_files(ROOT / layer)]
    for path in sources + [ROOT / "main_cli.py"]:
        lines = _line_count(path)
        if lines > 600:
            offenders.append((str(path.relative_to(ROOT)), lines))
    assert not offenders, f"Modules exceed hard 600-line limit: {offenders}"


def test_core_layer_does_not_import_infra_layer():
    violations = _layer_violations("core", "infra")
    assert not violations, f"Core layer imports infra layer: {violations}"


def test_infra_layer_does_not_import_services():
    violations = _layer_violations("infra", "core.services")
    assert not violations, f"Infra layer imports services: {violations}"


def test_report_builder_does_no_io():
    forbidden = {"sqlalchemy", "openpyxl", "reportlab"}
    for name in ("builder.py", "weeks.py", "models.py"):
        path = ROOT / "core" / "services" / "reporting" / name
        imported = {m.split(".")[0] for m in _imported_modules(path)}
        assert not imported & forbidden, f"{name} imports {imported & forbidden}"


def test_infra_repositories_module_is_facade_only():
    repo_path = ROOT / "infra" / "db" / "repositories.py"
    text = repo_path.read_text(encoding="utf-8", errors="ignore")

    assert "from infra.db.catalog.repository import" in text
    assert "from infra.db.freight.repository import" in text
    assert "class SqlAlchemy" not in text
