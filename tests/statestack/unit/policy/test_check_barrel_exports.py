from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[4]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from scripts import check_barrel_exports


def _write(root: Path, rel_path: str, text: str) -> None:
    path = root / rel_path
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def test_repository_barrels_pass(monkeypatch) -> None:
    monkeypatch.setattr(sys, "argv", ["check_barrel_exports.py", "--root", str(ROOT)])
    assert check_barrel_exports.main() == 0


def test_runtime_barrel_importing_api_is_flagged(tmp_path: Path, monkeypatch, capsys) -> None:
    _write(
        tmp_path,
        "statestack/runtime/__init__.py",
        "from statestack.api.errors import PoppedTooMany\n__all__ = ['PoppedTooMany']\n",
    )
    monkeypatch.setattr(sys, "argv", ["check_barrel_exports.py", "--root", str(tmp_path)])
    assert check_barrel_exports.main() == 1
    assert "barrel imports statestack.api.errors" in capsys.readouterr().out


def test_oversized_barrel_is_flagged(tmp_path: Path, monkeypatch, capsys) -> None:
    names = ", ".join(repr(f"name_{i}") for i in range(40))
    _write(tmp_path, "statestack/api/__init__.py", f"__all__ = [{names}]\n")
    monkeypatch.setattr(sys, "argv", ["check_barrel_exports.py", "--root", str(tmp_path)])
    assert check_barrel_exports.main() == 1
    assert "exceeds budget 30" in capsys.readouterr().out
