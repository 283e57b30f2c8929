#!/usr/bin/env python
"""Reject module-level session state and lazy singletons in the package.

Every dealer client owns its own SessionState, connection and HTTP session;
creating one at import time would leak state between clients.
"""

from __future__ import annotations

import ast
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
PACKAGE_DIR = ROOT / "spotidealer"

SINGLETON_FN_NAMES = {"get_instance", "reset_instance", "get_client", "get_session"}
STATEFUL_CONSTRUCTORS = {
    "SessionState",
    "MessageRouter",
    "DealerConnection",
    "PlayerNotifications",
    "ClientSession",
    "DealerClient",
    "build_dealer_client",
}


def _call_name(value: ast.expr | None) -> str | None:
    if not isinstance(value, ast.Call):
        return None
    func = value.func
    if isinstance(func, ast.Name):
        return func.id
    if isinstance(func, ast.Attribute):
        return func.attr
    return None


def _target_names(node: ast.Assign | ast.AnnAssign) -> list[str]:
    targets = [node.target] if isinstance(node, ast.AnnAssign) else node.targets
    return [target.id for target in targets if isinstance(target, ast.Name)]


def collect_violations(filepath: Path) -> list[str]:
    try:
        tree = ast.parse(filepath.read_text(encoding="utf-8"), filename=str(filepath))
    except (OSError, UnicodeDecodeError, SyntaxError):
        return []

    rel = filepath.relative_to(ROOT)
    violations: list[str] = []
    for node in tree.body:
        if isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef)) and node.name in SINGLETON_FN_NAMES:
            violations.append(f"  {rel}:{node.lineno} function `{node.name}` suggests a shared instance")
            continue
        if not isinstance(node, (ast.Assign, ast.AnnAssign)):
            continue
        ctor = _call_name(node.value)
        if ctor in STATEFUL_CONSTRUCTORS:
            names = ", ".join(_target_names(node)) or "<expr>"
            violations.append(f"  {rel}:{node.lineno} module-level `{ctor}()` bound to {names}")
        elif isinstance(node.value, ast.Constant) and node.value.value is None:
            lazy = [name for name in _target_names(node) if name.lower().endswith(("_instance", "_client"))]
            if lazy:
                violations.append(f"  {rel}:{node.lineno} lazy singleton placeholder: {', '.join(lazy)}")
    return violations


def main() -> int:
    if not PACKAGE_DIR.is_dir():
        print(f"[no-runtime-singletons] Missing package directory: {PACKAGE_DIR}", file=sys.stderr)
        return 1

    violations: list[str] = []
    for py_file in sorted(PACKAGE_DIR.rglob("*.py")):
        if "__pycache__" in py_file.parts:
            continue
        violations.extend(collect_violations(py_file))

    if not violations:
        return 0

    print("Shared runtime state violations:", file=sys.stderr)
    for violation in violations:
        print(violation, file=sys.stderr)
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
