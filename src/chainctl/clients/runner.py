"""Binary discovery and async process execution for the MultiChain binaries.

Discovery order: the configured ``[binaries] location``, then ``PATH``,
then the default install directories. Execution captures stdout/stderr
as text; interpreting the return code is left to the clients. A detached
run waits only for the launched process itself, so a daemon that forks
and keeps its output streams open does not block the caller.
"""

from __future__ import annotations

import asyncio
import logging
import shutil
import tempfile
from dataclasses import dataclass
from pathlib import Path

from chainctl.config.models import BinariesConfig

logger = logging.getLogger(__name__)


class BinaryNotFoundError(FileNotFoundError):
    """A node binary could not be located in any search location."""

    def __init__(self, binary: str, searched: list[str]) -> None:
        self.binary = binary
        self.searched = searched
        super().__init__(f"Unable to locate '{binary}' (searched: {', '.join(searched)})")


@dataclass(frozen=True)
class CompletedCommand:
    """Outcome of one binary invocation."""

    argv: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def message(self) -> str:
        """Best human-readable description of what the binary reported."""
        return (self.stderr or self.stdout).strip() or f"exit code {self.returncode}"


class BinaryLocator:
    """Resolve MultiChain binary names to executable paths."""

    def __init__(self, config: BinariesConfig | None = None) -> None:
        self._config = config or BinariesConfig()
        self._cache: dict[str, Path] = {}

    @property
    def config(self) -> BinariesConfig:
        return self._config

    def find(self, binary: str) -> Path:
        """Return the path to *binary*, raising BinaryNotFoundError if absent."""
        cached = self._cache.get(binary)
        if cached is not None:
            return cached

        searched: list[str] = []
        if self._config.location is not None:
            searched.append(str(self._config.location))
            found = self._lookup(self._config.location, binary)
            if found is not None:
                return self._remember(binary, found)

        searched.append("PATH")
        on_path = shutil.which(binary)
        if on_path:
            return self._remember(binary, Path(on_path))

        for directory in self._config.search_paths:
            searched.append(str(directory))
            found = self._lookup(directory, binary)
            if found is not None:
                return self._remember(binary, found)

        raise BinaryNotFoundError(binary, searched)

    def _remember(self, binary: str, path: Path) -> Path:
        logger.debug("Located %s at %s", binary, path)
        self._cache[binary] = path
        return path

    @staticmethod
    def _lookup(directory: Path, binary: str) -> Path | None:
        for name in (binary, f"{binary}.exe"):
            candidate = directory / name
            if candidate.is_file():
                return candidate
        return None


class CommandRunner:
    """Run node binaries as child processes and capture their output."""

    def __init__(self, locator: BinaryLocator) -> None:
        self._locator = locator

    @property
    def locator(self) -> BinaryLocator:
        return self._locator

    async def run(self, binary: str, *args: str, detach: bool = False) -> CompletedCommand:
        """Locate *binary* and run it with *args*.

        With *detach*, output is spooled to temporary files and the call
        returns as soon as the launched process exits, even if a child it
        forked still holds the streams open.

        Raises BinaryNotFoundError when the binary cannot be located and
        OSError when the process cannot be spawned.
        """
        path = self._locator.find(binary)
        argv = (str(path), *args)
        logger.debug("Running %s%s", " ".join(argv), " (detached)" if detach else "")

        if detach:
            returncode, stdout, stderr = await self._spool(argv)
        else:
            returncode, stdout, stderr = await self._capture(argv)

        completed = CompletedCommand(
            argv=argv,
            returncode=returncode,
            stdout=stdout.decode("utf-8", errors="replace"),
            stderr=stderr.decode("utf-8", errors="replace"),
        )
        if completed.ok:
            logger.debug("%s exited with 0", binary)
        else:
            logger.warning("%s exited with %d: %s", binary, returncode, completed.message)
        return completed

    @staticmethod
    async def _capture(argv: tuple[str, ...]) -> tuple[int, bytes, bytes]:
        process = await asyncio.create_subprocess_exec(
            *argv,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
        stdout, stderr = await process.communicate()
        return _exit_code(process), stdout, stderr

    @staticmethod
    async def _spool(argv: tuple[str, ...]) -> tuple[int, bytes, bytes]:
        # Whatever a forked child writes after the parent exits is discarded.
        with tempfile.TemporaryFile() as out, tempfile.TemporaryFile() as err:
            process = await asyncio.create_subprocess_exec(
                *argv,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=out,
                stderr=err,
            )
            await process.wait()
            out.seek(0)
            err.seek(0)
            return _exit_code(process), out.read(), err.read()


def _exit_code(process: asyncio.subprocess.Process) -> int:
    return process.returncode if process.returncode is not None else -1
