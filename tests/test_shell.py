import importlib.util
import logging
import sys
from pathlib import Path

import pytest

from cosmic_signatures.core.session import SessionState
from cosmic_signatures.reference.catalogue import load_reference_data

SCRIPT_PATH = Path(__file__).resolve().parents[1] / "scripts" / "track_signatures.py"


def _load_shell():
    spec = importlib.util.spec_from_file_location("track_signatures", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def package_logger():
    root = logging.getLogger("cosmic_signatures")
    saved = list(root.handlers)
    for handler in saved:
        root.removeHandler(handler)
    yield root
    for handler in list(root.handlers):
        handler.close()
        root.removeHandler(handler)
    for handler in saved:
        root.addHandler(handler)


def test_render_shows_wspace_header(capsys):
    shell = _load_shell()
    session = SessionState(reference=load_reference_data())
    session.select_system("J164710")
    session.paste("ABC-123\tCosmic Signature\tWormhole\tUnstable Wormhole\t100.0%\t5 AU")
    shell.render(session)
    output = capsys.readouterr().out
    assert "J164710  [Class-2]  Pulsar  静态：B274, D382" in output
    assert "ABC-123" in output


@pytest.mark.parametrize("interrupt", [EOFError, KeyboardInterrupt])
def test_main_exits_cleanly_on_interrupt(tmp_path, monkeypatch, package_logger, interrupt):
    paste_file = tmp_path / "paste.txt"
    paste_file.write_text("ABC-123\tCosmic Signature\tRelic Site\tRuined Temple\t100.0%\t1 AU", encoding="utf-8")
    commands = iter(["p"])

    def _input(prompt):
        for command in commands:
            return command
        raise interrupt

    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.setattr(sys, "argv", ["track_signatures.py", "--system", "Thera", "--file", str(paste_file)])
    monkeypatch.setattr("builtins.input", _input)

    _load_shell().main()

    for handler in package_logger.handlers:
        handler.flush()
    log_text = (tmp_path / "app.log").read_text(encoding="utf-8")
    assert "粘贴 1 条候选记录到 Thera" in log_text
    assert "退出" in log_text
