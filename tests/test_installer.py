"""
Tests for the install and rollback workflows.

Every external step of ``install_kubectl`` is patched at its import site
in ``orchestration.installer``; rollback tests use real backup files.
"""

from datetime import datetime
from pathlib import Path
from unittest.mock import patch

import pytest

from kubectl_installer.core.models.platform import Platform
from kubectl_installer.core.services.kubectl.orchestration import (
    get_backups,
    install_kubectl,
    prefer_backup,
    rollback,
    select_backup,
)

_INST = "kubectl_installer.core.services.kubectl.orchestration.installer"

_UBUNTU = Platform(
    distro="ubuntu", machine="x86_64", arch="amd64", package_manager="apt",
)


@pytest.fixture
def steps():
    """Patch every install step with a succeeding default."""
    with (
        patch(f"{_INST}.detect_platform", return_value={"ok": True, "platform": _UBUNTU}) as detect,
        patch(f"{_INST}.install_dependencies", return_value={"ok": True, "installed": ["curl"]}) as deps,
        patch(f"{_INST}.resolve_version", return_value={"ok": True, "version": "v1.30.2"}) as resolve,
        patch(f"{_INST}.find_kubectl", return_value="/usr/local/bin/kubectl") as find,
        patch(f"{_INST}.get_kubectl_version", return_value="v1.29.0") as current,
        patch(f"{_INST}.create_backup", return_value={"ok": True, "backup_path": "/usr/local/bin/kubectl.backup.20240101000000"}) as backup,
        patch(f"{_INST}.download_file", return_value={"ok": True}) as download,
        patch(f"{_INST}.verify_download", return_value={"ok": True, "sha256": "ab"}) as checksum,
        patch(f"{_INST}.install_binary", return_value={"ok": True}) as place,
        patch(f"{_INST}.verify_installation", return_value={"ok": True, "output": "Client Version: v1.30.2"}) as verify,
    ):
        yield {
            "detect": detect, "deps": deps, "resolve": resolve, "find": find,
            "current": current, "backup": backup, "download": download,
            "checksum": checksum, "place": place, "verify": verify,
        }


# ═══════════════════════════════════════════════════════════════════
#  install_kubectl
# ═══════════════════════════════════════════════════════════════════


class TestInstallKubectl:
    def test_happy_path(self, settings, steps):
        messages: list[str] = []
        result = install_kubectl(settings, progress=messages.append)

        assert result["ok"] is True
        assert result["version"] == "v1.30.2"
        assert result["previous_version"] == "v1.29.0"
        assert result["message"] == "kubectl v1.30.2 installed successfully on ubuntu (amd64)!"
        assert result["backup_path"].endswith("kubectl.backup.20240101000000")

        url = steps["download"].call_args[0][0]
        assert url == "https://dl.k8s.io/release/v1.30.2/bin/linux/amd64/kubectl"
        steps["verify"].assert_called_once_with(settings.target_path)
        assert "No version provided. Fetching latest stable version..." in messages

    def test_explicit_version_passed_through(self, settings, steps):
        install_kubectl(settings, "v1.29.3", progress=lambda _m: None)
        assert steps["resolve"].call_args[0][0] == "v1.29.3"

    def test_fresh_install_no_backup(self, settings, steps):
        steps["find"].return_value = None
        messages: list[str] = []
        result = install_kubectl(settings, progress=messages.append)
        assert result["ok"] is True
        assert result["backup_path"] is None
        steps["backup"].assert_not_called()
        assert "No existing kubectl found. Fresh install." in messages

    def test_backup_uses_given_time(self, settings, steps):
        when = datetime(2024, 6, 1, 12, 0, 0)
        install_kubectl(settings, now=when, progress=lambda _m: None)
        assert steps["backup"].call_args[1]["now"] == when

    def test_skip_deps(self, settings, steps):
        install_kubectl(settings, skip_deps=True, progress=lambda _m: None)
        steps["deps"].assert_not_called()
        steps["detect"].assert_called_once()

    def test_checksum_disabled(self, settings, steps):
        install_kubectl(settings, verify_checksum=False, progress=lambda _m: None)
        steps["checksum"].assert_not_called()

    def test_checksum_setting(self, settings, steps):
        settings = settings.model_copy(update={"verify_checksum": False})
        install_kubectl(settings, progress=lambda _m: None)
        steps["checksum"].assert_not_called()

    @pytest.mark.parametrize("error", [
        "Cannot detect OS.",
        "Unsupported architecture: s390x",
        "Unsupported Linux distribution: arch",
    ])
    def test_detection_failure_is_fatal(self, settings, steps, error):
        steps["detect"].return_value = {"ok": False, "error": error}
        result = install_kubectl(settings, progress=lambda _m: None)
        assert result["ok"] is False
        assert result["error"] == error
        assert result["stage"] == "detect"
        steps["deps"].assert_not_called()
        steps["download"].assert_not_called()

    def test_dependency_failure(self, settings, steps):
        steps["deps"].return_value = {"ok": False, "error": "Failed to install curl with apt"}
        result = install_kubectl(settings, progress=lambda _m: None)
        assert result["stage"] == "dependencies"
        steps["resolve"].assert_not_called()

    def test_version_lookup_failure(self, settings, steps):
        steps["resolve"].return_value = {"ok": False, "error": "Failed to fetch stable.txt"}
        result = install_kubectl(settings, "stable", progress=lambda _m: None)
        assert result["stage"] == "version"
        steps["backup"].assert_not_called()

    def test_malformed_version_rejected_before_dependencies(self, settings, steps):
        result = install_kubectl(settings, "lsit", progress=lambda _m: None)

        assert result["ok"] is False
        assert result["stage"] == "version"
        assert "Invalid kubectl version: 'lsit'" in result["error"]
        steps["deps"].assert_not_called()
        steps["resolve"].assert_not_called()
        steps["find"].assert_not_called()

    def test_malformed_version_runs_no_package_manager(self, settings):
        with (
            patch(f"{_INST}.detect_platform", return_value={"ok": True, "platform": _UBUNTU}),
            patch(
                "kubectl_installer.core.services.kubectl.execution.dependencies.check_system_deps",
                return_value={"ok": False, "missing": ["curl"], "installed": []},
            ),
            patch(
                "kubectl_installer.core.services.kubectl.execution.dependencies._run_subprocess",
                return_value={"ok": True, "stdout": "", "stderr": ""},
            ) as run,
        ):
            result = install_kubectl(settings, "lsit", progress=lambda _m: None)

        assert result["stage"] == "version"
        run.assert_not_called()

    def test_download_failure_leaves_binary(self, settings, steps):
        steps["download"].return_value = {"ok": False, "error": "Download failed"}
        result = install_kubectl(settings, progress=lambda _m: None)
        assert result["stage"] == "download"
        steps["place"].assert_not_called()

    def test_checksum_failure(self, settings, steps):
        steps["checksum"].return_value = {"ok": False, "error": "Checksum mismatch"}
        result = install_kubectl(settings, progress=lambda _m: None)
        assert result["stage"] == "checksum"
        steps["place"].assert_not_called()

    def test_verify_failure_reports_backup(self, settings, steps):
        steps["verify"].return_value = {"ok": False, "error": "Verification failed: exit 126"}
        result = install_kubectl(settings, progress=lambda _m: None)
        assert result["ok"] is False
        assert result["verify_failed"] is True
        assert result["error"] == "kubectl installation failed."
        assert result["backup_path"].endswith("20240101000000")


# ═══════════════════════════════════════════════════════════════════
#  rollback
# ═══════════════════════════════════════════════════════════════════


class TestRollback:
    def test_no_backups(self, settings):
        result = rollback(settings, lambda _b: "0")
        assert result["ok"] is False
        assert result["error"] == "No kubectl backups found."

    def test_selector_sees_newest_first(self, settings, bin_dir: Path, make_backup):
        make_backup(bin_dir, "20240101000000", b"oldest")
        make_backup(bin_dir, "20240301000000", b"newest")
        seen = []

        def selector(backups):
            seen.extend(b.filename for b in backups)
            return "1"

        result = rollback(settings, selector)
        assert seen == ["kubectl.backup.20240301000000", "kubectl.backup.20240101000000"]
        assert result["ok"] is True
        assert (bin_dir / "kubectl").read_bytes() == b"oldest"
        assert result["message"] == "kubectl has been rolled back to the selected backup."

    @pytest.mark.parametrize("choice", ["2", "99", "-1", "one", "", None])
    def test_invalid_choice(self, settings, bin_dir: Path, make_backup, choice):
        make_backup(bin_dir, "20240101000000")
        make_backup(bin_dir, "20240201000000")
        result = rollback(settings, lambda _b: choice)
        assert result == {"ok": False, "error": "Invalid choice.", "choice": choice}
        assert not (bin_dir / "kubectl").exists()

    def test_backups_survive_rollback(self, settings, bin_dir: Path, make_backup):
        make_backup(bin_dir, "20240101000000")
        rollback(settings, lambda _b: "0")
        assert len(get_backups(settings)["backups"]) == 1


class TestSelectors:
    def test_prefer_backup_by_path(self, settings, bin_dir: Path, make_backup):
        target = make_backup(bin_dir, "20240101000000")
        make_backup(bin_dir, "20240301000000")
        backups = get_backups(settings)["backups"]
        assert prefer_backup(str(target))(backups) == "1"

    def test_prefer_backup_falls_back_to_newest(self, settings, bin_dir: Path, make_backup):
        make_backup(bin_dir, "20240101000000")
        backups = get_backups(settings)["backups"]
        assert prefer_backup(None)(backups) == "0"
        assert prefer_backup("/elsewhere")(backups) == "0"

    def test_select_backup(self, settings, bin_dir: Path, make_backup):
        make_backup(bin_dir, "20240101000000")
        backups = get_backups(settings)["backups"]
        assert select_backup(backups, "0")["backup"] == backups[0]
        assert select_backup(backups, "1")["ok"] is False
