"""
L4 Execution — Core subprocess runner.

The SINGLE PLACE where ``subprocess.run`` is called for operations
that change the system (package installs, downloads, file moves).
Sudo handling, logging and error mapping are centralised here.
"""

from __future__ import annotations

import logging
import os
import subprocess
import time
from typing import Any

logger = logging.getLogger(__name__)

_OUTPUT_TAIL = 2000


def _is_root() -> bool:
    return os.geteuid() == 0


def _run_subprocess(
    cmd: list[str],
    *,
    needs_sudo: bool = False,
    sudo_password: str = "",
    timeout: int = 120,
) -> dict[str, Any]:
    """Run a command, elevating with sudo when asked to.

    Sudo rules:
    - Already root → no prefix.
    - Password given → ``sudo -S -k``, password piped via stdin only,
      never logged and never part of the argv.
    - No password → plain ``sudo``, which uses cached credentials or
      prompts on the controlling terminal.

    Args:
        cmd: Command list for ``subprocess.run()``.
        needs_sudo: Whether the command requires root.
        sudo_password: Sudo password (piped to stdin).
        timeout: Seconds before ``TimeoutExpired``.

    Returns:
        ``{"ok": True, "stdout": "...", "elapsed_ms": N}`` on success,
        ``{"ok": False, "error": "...", ...}`` on failure.
    """
    stdin_data = None
    if needs_sudo and not _is_root():
        if sudo_password:
            cmd = ["sudo", "-S", "-k", *cmd]
            stdin_data = sudo_password + "\n"
        else:
            cmd = ["sudo", *cmd]

    logger.debug("Running: %s", " ".join(cmd))
    start = time.monotonic()
    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            timeout=timeout,
            input=stdin_data,
        )
    except subprocess.TimeoutExpired:
        return {"ok": False, "error": f"Command timed out ({timeout}s): {' '.join(cmd)}"}
    except FileNotFoundError:
        return {"ok": False, "error": f"Command not found: {cmd[0]}"}
    except OSError as e:
        logger.exception("Subprocess error: %s", cmd)
        return {"ok": False, "error": str(e)}

    elapsed_ms = int((time.monotonic() - start) * 1000)
    stdout = result.stdout[-_OUTPUT_TAIL:] if result.stdout else ""

    if result.returncode == 0:
        return {"ok": True, "stdout": stdout, "elapsed_ms": elapsed_ms}

    stderr = result.stderr[-_OUTPUT_TAIL:] if result.stderr else ""

    if stdin_data is not None and (
        "incorrect password" in stderr.lower() or "sorry" in stderr.lower()
    ):
        return {"ok": False, "needs_sudo": True, "error": "Wrong sudo password."}

    logger.debug("Command failed (exit %d): %s", result.returncode, stderr.strip())
    return {
        "ok": False,
        "error": f"Command failed (exit {result.returncode}): {' '.join(cmd)}",
        "returncode": result.returncode,
        "stderr": stderr,
        "stdout": stdout,
        "elapsed_ms": elapsed_ms,
    }


def _needs_sudo(directory: str) -> bool:
    """Whether writing into ``directory`` requires root."""
    if _is_root():
        return False
    target = directory
    # Walk up to the closest existing ancestor (mkdir -p case)
    while target and not os.path.exists(target):
        parent = os.path.dirname(target.rstrip("/"))
        if parent == target:
            break
        target = parent
    return not os.access(target or "/", os.W_OK)
