"""Tests for external command execution."""

import sys

from keystone_preflight.preflight.shell import CommandResult, run_command


class TestRunCommand:
    """Test run_command against real subprocesses."""

    def test_success_captures_stdout(self):
        """Test a successful command returns its output."""
        result = run_command([sys.executable, "-c", "print('hello')"])
        assert result.ok is True
        assert result.returncode == 0
        assert result.stdout.strip() == "hello"

    def test_nonzero_exit(self):
        """Test a failing command reports its status and stderr."""
        result = run_command([
            sys.executable, "-c",
            "import sys; sys.stderr.write('permission denied\\n'); sys.exit(3)",
        ])
        assert result.ok is False
        assert result.returncode == 3
        assert result.error_text == "permission denied"

    def test_timeout(self):
        """Test a command exceeding the timeout is reported, not raised."""
        result = run_command([sys.executable, "-c", "import time; time.sleep(10)"], timeout=0.5)
        assert result.ok is False
        assert result.timed_out is True
        assert result.returncode is None
        assert "timed out" in result.error_text

    def test_missing_executable(self):
        """Test a missing executable is reported, not raised."""
        result = run_command(["definitely-not-a-real-tool-xyz", "--version"])
        assert result.ok is False
        assert result.returncode is None
        assert result.error.startswith("Command not found")
        assert "definitely-not-a-real-tool-xyz" in result.error_text

    def test_undecodable_output_is_replaced(self):
        """Test invalid UTF-8 output is decoded with replacement characters."""
        result = run_command([
            sys.executable, "-c",
            "import sys; sys.stdout.buffer.write(b'\\xff\\xfe ok\\n')",
        ])
        assert result.ok is True
        assert "\ufffd" in result.stdout
        assert result.stdout.strip().endswith("ok")


class TestCommandResult:
    """Test CommandResult helpers."""

    def test_error_text_without_stderr(self):
        """Test the fallback error text names the exit status."""
        result = CommandResult(args=("x",), returncode=2)
        assert result.error_text == "Command exited with status 2"

