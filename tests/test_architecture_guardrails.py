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


def test_no_python_module_exceeds_hard_line_limit():
    offenders = []
    for path in _python_files(ROOT):
        lines = _line_count(path)
        if lines > 1200:
            offenders.append((str(path.relative_to(ROOT)), lines))
    assert not offenders, f"Modules exceed hard 1200-line limit: {offenders}"


def test_core_layer_does_not_import_infra_or_ui_layer():
    violations: list[tuple[str, str]] = []

    for path in _python_files(ROOT / "core"):
        for name in _imported_modules(path):
            top = name.split(".")[0]
            if top in {"ui", "infra"}:
                violations.append((str(path.relative_to(ROOT)), name))

    assert not violations, f"Core layer imports outer layers: {violations}"


def test_only_the_event_bridge_touches_qt_in_core():
    qt_users = sorted(
        str(path.relative_to(ROOT))
        for path in _python_files(ROOT / "core")
        if any(name.startswith("PySide6") for name in _imported_modules(path))
    )

    assert qt_users == ["core/events/state_events.py"]


def test_read_only_services_never_write_to_the_store():
    offenders = [
        str(path.relative_to(ROOT))
        for package in ("dashboard", "availability")
        for path in _python_files(ROOT / "core" / "services" / package)
        if ".set(" in path.read_text(encoding="utf-8", errors="ignore")
    ]

    assert not offenders, f"Read-only services mutate state: {offenders}"
