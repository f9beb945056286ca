"""
Tests for the dispatcher — command building, execution, error wrapping.
"""

import subprocess

import pytest

from crobrew.adapters.shell import command as shell_command
from crobrew.adapters.shell.command import ShellCommandAdapter
from crobrew.core.models.action import Receipt
from crobrew.core.models.profile import Profile
from crobrew.core.registry import find_profile, profiles_for
from crobrew.core.services.dispatcher import DispatchError, Dispatcher, build_command


class TestBuildCommand:
    def test_install_appends_name(self, apt_profile):
        assert build_command(apt_profile, "install", "htop") == [
            "sudo", "apt-get", "install", "htop",
        ]

    def test_update_takes_no_argument(self, apt_profile):
        assert build_command(apt_profile, "update") == ["sudo", "apt-get", "update"]

    def test_empty_query_still_appended(self, apt_profile):
        assert build_command(apt_profile, "search", "") == ["apt-cache", "search", ""]

    def test_argument_with_spaces_is_one_token(self, apt_profile):
        argv = build_command(apt_profile, "search", "text editor")
        assert argv[-1] == "text editor"
        assert len(argv) == 3

    @pytest.mark.parametrize("profile", [p for pid in ("linux", "windows", "darwin") for p in profiles_for(pid)])
    def test_tokens_then_name(self, profile):
        argv = build_command(profile, "remove", "git")
        assert argv == profile.remove.split() + ["git"]

    def test_does_not_mutate_profile(self, apt_profile):
        build_command(apt_profile, "install", "htop")
        assert apt_profile.tokens("install") == ["sudo", "apt-get", "install"]


class TestDispatcherWithMock:
    def test_search(self, apt_profile, mock_adapter):
        out = Dispatcher(apt_profile, mock_adapter).search("vim")
        assert mock_adapter.last_argv == ["apt-cache", "search", "vim"]
        assert out == "[mock] apt-cache search vim"

    def test_search_empty_lists_all(self, apt_profile, mock_adapter):
        Dispatcher(apt_profile, mock_adapter).search("")
        assert mock_adapter.last_argv == ["apt-cache", "search", ""]

    def test_update(self, mock_adapter):
        Dispatcher(find_profile("choco"), mock_adapter).update()
        assert mock_adapter.last_argv == ["choco", "upgrade", "all", "-y"]

    def test_install(self, mock_adapter):
        Dispatcher(find_profile("brew"), mock_adapter).install("wget")
        assert mock_adapter.last_argv == ["brew", "install", "wget"]

    def test_remove(self, mock_adapter):
        Dispatcher(find_profile("wsl-apt"), mock_adapter).remove("curl")
        assert mock_adapter.last_argv == ["wsl", "sudo", "apt-get", "remove", "curl"]

    def test_search_always_captures(self, apt_profile, mock_adapter):
        Dispatcher(apt_profile, mock_adapter, stream_output=True).search("vim")
        assert mock_adapter.call_log[-1].action.params["capture"] is True

    def test_mutations_stream_by_default(self, apt_profile, mock_adapter):
        Dispatcher(apt_profile, mock_adapter).install("htop")
        assert mock_adapter.call_log[-1].action.params["capture"] is False

    def test_mutations_capture_when_streaming_off(self, apt_profile, mock_adapter):
        Dispatcher(apt_profile, mock_adapter, stream_output=False).update()
        assert mock_adapter.call_log[-1].action.params["capture"] is True

    def test_success_codes_forwarded(self, mock_adapter):
        Dispatcher(find_profile("dnf"), mock_adapter).update()
        assert mock_adapter.call_log[-1].action.params["success_codes"] == [0, 100]

    def test_action_id(self, apt_profile, mock_adapter):
        Dispatcher(apt_profile, mock_adapter).remove("nano")
        assert mock_adapter.call_log[-1].action.id == "apt:remove"

    @pytest.mark.parametrize("name", ["", "   "])
    def test_install_requires_name(self, apt_profile, mock_adapter, name):
        with pytest.raises(DispatchError, match="package name is required"):
            Dispatcher(apt_profile, mock_adapter).install(name)
        assert mock_adapter.call_count == 0

    def test_remove_requires_name(self, apt_profile, mock_adapter):
        with pytest.raises(DispatchError):
            Dispatcher(apt_profile, mock_adapter).remove("")

    def test_failure_wrapped(self, apt_profile, mock_adapter):
        mock_adapter.set_failure("apt:install", error="exit status 100")
        with pytest.raises(DispatchError) as exc:
            Dispatcher(apt_profile, mock_adapter).install("nosuchpkg")
        message = str(exc.value)
        assert "error installing package: exit status 100" in message
        assert "This might be because:" in message
        assert "sudo permissions" in message
        assert exc.value.raw == "exit status 100"
        assert exc.value.operation == "install"

    def test_search_failure_hint(self, apt_profile, mock_adapter):
        mock_adapter.set_failure("apt:search", error="boom")
        with pytest.raises(DispatchError) as exc:
            Dispatcher(apt_profile, mock_adapter).search("x")
        assert "error searching packages: boom" in str(exc.value)
        assert "required permissions" in str(exc.value)

    def test_failure_quotes_captured_output(self, apt_profile, mock_adapter):
        mock_adapter.set_response(
            "apt:search",
            Receipt.failure(
                adapter="mock",
                action_id="apt:search",
                error="apt-cache: exit status 100",
                output="E: Could not open lock file\n",
            ),
        )
        with pytest.raises(DispatchError) as exc:
            Dispatcher(apt_profile, mock_adapter).search("x")
        assert "E: Could not open lock file" in str(exc.value)


class TestDispatcherWithShell:
    def test_missing_binary_error_contains_process_error(self):
        ghost = Profile(
            name="ghost",
            search="crobrew-no-such-binary search",
            update="crobrew-no-such-binary update",
            install="crobrew-no-such-binary install",
            remove="crobrew-no-such-binary remove",
        )
        with pytest.raises(DispatchError) as exc:
            Dispatcher(ghost, ShellCommandAdapter()).search("vim")
        assert "crobrew-no-such-binary" in exc.value.raw
        assert exc.value.raw in str(exc.value)

    def test_nonzero_exit(self, apt_profile, monkeypatch):
        monkeypatch.setattr(
            shell_command.subprocess,
            "run",
            lambda argv, **kw: subprocess.CompletedProcess(argv, 100, stdout="E: Unable to locate package zzz\n"),
        )
        with pytest.raises(DispatchError) as exc:
            Dispatcher(apt_profile, ShellCommandAdapter(), stream_output=False).install("zzz")
        assert "exit status 100" in str(exc.value)
        assert "Unable to locate package zzz" in str(exc.value)

    def test_combined_output_returned(self, apt_profile, monkeypatch):
        seen = {}

        def fake_run(argv, **kwargs):
            seen.update(kwargs)
            return subprocess.CompletedProcess(argv, 0, stdout="vim - Vi IMproved\n")

        monkeypatch.setattr(shell_command.subprocess, "run", fake_run)
        out = Dispatcher(apt_profile, ShellCommandAdapter()).search("vim")
        assert out == "vim - Vi IMproved\n"
        assert seen["stderr"] is subprocess.STDOUT

    def test_dnf_check_update_100_is_success(self, monkeypatch):
        monkeypatch.setattr(
            shell_command.subprocess,
            "run",
            lambda argv, **kw: subprocess.CompletedProcess(argv, 100, stdout="kernel.x86_64 6.9\n"),
        )
        out = Dispatcher(find_profile("dnf"), ShellCommandAdapter(), stream_output=False).update()
        assert "kernel" in out
