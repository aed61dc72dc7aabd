#!/usr/bin/env python3
"""Enforce barrel export budgets and mixed-layer import hygiene."""

from __future__ import annotations

import argparse
import ast
from pathlib import Path


DEFAULT_BUDGETS = {
    "statestack/__init__.py": 24,
    "statestack/api/__init__.py": 30,
    "statestack/runtime/__init__.py": 24,
}


def _extract_all_count(tree: ast.AST) -> int | None:
    for node in tree.body if isinstance(tree, ast.Module) else []:
        if isinstance(node, ast.Assign):
            for target in node.targets:
                if isinstance(target, ast.Name) and target.id == "__all__":
                    if isinstance(node.value, (ast.List, ast.Tuple)):
                        return len(node.value.elts)
    return None


def _layer_violation(rel_path: str, tree: ast.AST) -> str | None:
    forbidden = {
        "statestack/api/__init__.py": "statestack.runtime",
        "statestack/runtime/__init__.py": "statestack.api",
    }.get(rel_path)
    if forbidden is None:
        return None
    for node in tree.body if isinstance(tree, ast.Module) else []:
        if isinstance(node, ast.ImportFrom):
            module = str(node.module or "")
            if module == forbidden or module.startswith(f"{forbidden}."):
                return f"{rel_path}: barrel imports {module}"
    return None


def main() -> int:
    parser = argparse.ArgumentParser(description="Check barrel export budgets.")
    parser.add_argument("--root", default=".")
    args = parser.parse_args()

    root = Path(args.root)
    violations: list[str] = []
    for rel_path, budget in DEFAULT_BUDGETS.items():
        path = root / rel_path
        if not path.exists():
            continue
        tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
        count = _extract_all_count(tree)
        if count is not None and count > budget:
            violations.append(f"{rel_path}: __all__ size {count} exceeds budget {budget}")
        layer = _layer_violation(rel_path, tree)
        if layer is not None:
            violations.append(layer)

    if violations:
        print("Barrel export budget violations:")
        for line in violations:
            print(f"  {line}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
