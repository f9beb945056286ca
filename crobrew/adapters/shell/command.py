"""
Shell command adapter — run a package manager binary.

Commands are executed from an argument vector, never through a shell,
so package names and queries reach the package manager verbatim.
Commands run without a timeout.
"""

from __future__ import annotations

import logging
import shlex
import subprocess
import time

from crobrew.adapters.base import Adapter, ExecutionContext
from crobrew.core.models.action import Receipt

logger = logging.getLogger(__name__)


class ShellCommandAdapter(Adapter):
    """Execute commands and capture (or pass through) their output.

    Action params:
        argv (list[str]): The argument vector to execute.
        capture (bool): Capture stdout+stderr combined (default: True).
            When False the child inherits the terminal, so prompts from
            sudo or the package manager reach the user.
        success_codes (list[int]): Exit codes treated as success (default: [0]).

    Captured output is decoded as UTF-8 with undecodable bytes replaced,
    so a package description in a legacy encoding never fails a command
    that exited cleanly.
    """

    @property
    def name(self) -> str:
        return "shell"

    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        if not context.argv:
            return False, "Missing required param: 'argv'"
        return True, ""

    def execute(self, context: ExecutionContext) -> Receipt:
        argv = context.argv
        params = context.action.params
        capture = params.get("capture", True)
        success_codes = tuple(params.get("success_codes", (0,)))
        command = shlex.join(argv)

        logger.debug("Executing: %s (capture=%s)", command, capture)
        start = time.monotonic()

        try:
            if capture:
                result = subprocess.run(
                    argv,
                    stdout=subprocess.PIPE,
                    stderr=subprocess.STDOUT,
                    encoding="utf-8",
                    errors="replace",
                )
            else:
                result = subprocess.run(argv)

            elapsed_ms = int((time.monotonic() - start) * 1000)
            output = result.stdout or ""

            if result.returncode in success_codes:
                return Receipt.success(
                    adapter=self.name,
                    action_id=context.action.id,
                    output=output,
                    duration_ms=elapsed_ms,
                    return_code=result.returncode,
                    metadata={"command": command},
                )

            return Receipt.failure(
                adapter=self.name,
                action_id=context.action.id,
                error=f"{argv[0]}: exit status {result.returncode}",
                output=output,
                duration_ms=elapsed_ms,
                return_code=result.returncode,
                metadata={"command": command},
            )

        except Exception as e:
            logger.debug("Execution error for %s", command, exc_info=True)
            return Receipt.failure(
                adapter=self.name,
                action_id=context.action.id,
                error=str(e),
                metadata={"command": command},
            )
