import os
import shutil
import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from synctime.utils.constants import SUDO
from synctime.utils.exceptions import ToolError


@dataclass(frozen=True)
class CommandResult:
    argv: tuple
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def output(self) -> str:
        """stdout and stderr joined, the way `cmd 2>&1` would read."""
        if self.stdout and self.stderr:
            return self.stdout.rstrip("\n") + "\n" + self.stderr
        return self.stdout or self.stderr


class CommandRunner(ABC):
    @abstractmethod
    def run(self, argv: Sequence[str]) -> CommandResult:
        pass

    @abstractmethod
    def which(self, name: str) -> Optional[str]:
        pass

    def has(self, name: str) -> bool:
        return self.which(name) is not None

    def privileged(self, argv: Sequence[str], use_sudo: bool = True) -> CommandResult:
        if use_sudo:
            argv = [SUDO, *argv]
        return self.run(argv)


class SubprocessRunner(CommandRunner):
    """Blocking subprocess runner; no timeout is imposed on the child."""

    def __init__(self, echo: Optional[Callable[[Sequence[str]], None]] = None):
        self._echo = echo

    def run(self, argv: Sequence[str]) -> CommandResult:
        argv = tuple(argv)
        if self._echo is not None:
            self._echo(argv)
        try:
            proc = subprocess.run(
                list(argv),
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                errors="replace",
            )
        except OSError as e:
            raise ToolError(f"Failed to run {argv[0]}: {e}") from e
        return CommandResult(argv, proc.returncode, proc.stdout or "", proc.stderr or "")

    def which(self, name: str) -> Optional[str]:
        return shutil.which(name)


def needs_sudo(no_sudo: bool = False) -> bool:
    if no_sudo:
        return False
    geteuid = getattr(os, "geteuid", None)
    return geteuid is None or geteuid() != 0
