#!/usr/bin/env python
"""Allow at most one behavioural class per package module.

Dataclasses and enums are plain records and may sit next to the class that
produces or consumes them.
"""

from __future__ import annotations

import ast
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
PACKAGE_DIR = ROOT / "spotidealer"

RECORD_BASES = {"Enum", "IntEnum", "StrEnum"}


def _decorator_name(decorator: ast.expr) -> str | None:
    target = decorator.func if isinstance(decorator, ast.Call) else decorator
    if isinstance(target, ast.Name):
        return target.id
    if isinstance(target, ast.Attribute):
        return target.attr
    return None


def _base_name(base: ast.expr) -> str | None:
    if isinstance(base, ast.Name):
        return base.id
    if isinstance(base, ast.Attribute):
        return base.attr
    return None


def _is_record(node: ast.ClassDef) -> bool:
    if any(_decorator_name(d) == "dataclass" for d in node.decorator_list):
        return True
    return any(_base_name(base) in RECORD_BASES for base in node.bases)


def behavioural_classes(filepath: Path) -> list[str]:
    try:
        tree = ast.parse(filepath.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, SyntaxError):
        return []
    return [node.name for node in tree.body if isinstance(node, ast.ClassDef) and not _is_record(node)]


def main() -> int:
    if not PACKAGE_DIR.is_dir():
        print(f"[one-class-per-file] Missing package directory: {PACKAGE_DIR}", file=sys.stderr)
        return 1

    violations: list[str] = []
    for py_file in sorted(PACKAGE_DIR.rglob("*.py")):
        classes = behavioural_classes(py_file)
        if len(classes) > 1:
            rel = py_file.relative_to(ROOT)
            violations.append(f"  {rel}: {len(classes)} classes ({', '.join(classes)})")

    if violations:
        print("One-behavioural-class-per-file violations:", file=sys.stderr)
        for violation in violations:
            print(violation, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
