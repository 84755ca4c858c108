"""Shell execution utilities.

Provides subprocess execution with proper error handling, including
two-stage pipelines (``producer | consumer > file``).
"""

import contextlib
import shutil
import subprocess
import tempfile
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Result of a shell command execution.

    Attributes:
        stdout: Standard output from the command.
        stderr: Standard error from the command.
        returncode: Exit code of the command.
    """

    stdout: str
    stderr: str
    returncode: int

    @property
    def success(self) -> bool:
        """Check if command executed successfully."""
        return self.returncode == 0


@dataclass(frozen=True, slots=True)
class PipelineResult:
    """Result of a two-stage pipeline.

    Attributes:
        producer_returncode: Exit code of the first command.
        consumer_returncode: Exit code of the second command.
        stderr: Combined standard error of both commands (empty if not captured).
    """

    producer_returncode: int
    consumer_returncode: int
    stderr: str = ""

    @property
    def success(self) -> bool:
        """True only if every stage exited with 0 (pipefail semantics)."""
        return self.producer_returncode == 0 and self.consumer_returncode == 0


def run_command(
    args: list[str],
    *,
    check: bool = False,
    timeout: float | None = 60.0,
    cwd: str | None = None,
) -> CommandResult:
    """Execute a shell command and return the result.

    Args:
        args: Command and arguments to execute.
        check: If True, raise CalledProcessError on non-zero exit.
        timeout: Maximum time in seconds to wait for command.
        cwd: Working directory for the command. If None, uses current directory.

    Returns:
        CommandResult with stdout, stderr, and returncode.

    Raises:
        subprocess.CalledProcessError: If check=True and command fails.
        subprocess.TimeoutExpired: If command exceeds timeout.
        FileNotFoundError: If command executable is not found.
    """
    result = subprocess.run(
        args,
        capture_output=True,
        text=True,
        check=check,
        timeout=timeout,
        cwd=cwd,
    )
    return CommandResult(
        stdout=result.stdout,
        stderr=result.stderr,
        returncode=result.returncode,
    )


def run_pipeline(
    producer: list[str],
    consumer: list[str],
    output: Path,
    *,
    capture_stderr: bool = True,
) -> PipelineResult:
    """Run ``producer | consumer > output`` and wait for both processes.

    The output file is created (or truncated) before the processes start.
    With capture_stderr=False both commands write diagnostics straight to
    the terminal, which is how tar's verbose listing reaches the user.

    Args:
        producer: First command; its stdout feeds the consumer.
        consumer: Second command; its stdout is written to output.
        output: File receiving the consumer's stdout.
        capture_stderr: Capture stderr of both commands into the result.

    Returns:
        PipelineResult with both exit codes.

    Raises:
        FileNotFoundError: If either executable is not found.
        OSError: If the output file cannot be opened.
    """
    # stderr goes to a spool file, not a pipe, so a chatty producer cannot
    # block while the consumer is still draining stdout
    with (
        open(output, "wb") as out,
        tempfile.TemporaryFile() if capture_stderr else contextlib.nullcontext() as err,
    ):
        first = subprocess.Popen(producer, stdout=subprocess.PIPE, stderr=err)
        try:
            second = subprocess.Popen(consumer, stdin=first.stdout, stdout=out, stderr=err)
        except OSError:
            first.kill()
            first.wait()
            raise
        finally:
            # Let the producer receive SIGPIPE if the consumer exits early
            if first.stdout is not None:
                first.stdout.close()

        second.wait()
        first.wait()

        stderr = ""
        if err is not None:
            err.seek(0)
            stderr = err.read().decode(errors="replace")

    return PipelineResult(
        producer_returncode=first.returncode,
        consumer_returncode=second.returncode,
        stderr=stderr,
    )


def command_exists(name: str) -> bool:
    """Check if a command exists in the system PATH.

    Args:
        name: Command name to check.

    Returns:
        True if command exists, False otherwise.
    """
    return shutil.which(name) is not None
