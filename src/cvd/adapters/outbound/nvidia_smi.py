"""nvidia-smi query adapter.

Implements DeviceQueryPort by running nvidia-smi as a subprocess. The
executable name and the arguments of each listing mode come from
configuration so that other tools with the same output contract can be
plugged in.

Usage:
    query = NvidiaSmiQuery(QueryToolConfig())
    if query.is_available():
        raw = query.query(QueryMode.ALL_DEVICES)
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
from typing import Optional

from cvd.domain.errors import QueryExecutionError
from cvd.domain.value_objects.device_identifiers import QueryMode
from cvd.infrastructure.config import QueryToolConfig

logger = logging.getLogger(__name__)


class NvidiaSmiQuery:
    """Run nvidia-smi and hand back its raw stdout."""

    def __init__(self, config: QueryToolConfig, search_path: Optional[str] = None) -> None:
        """Initialize the adapter.

        Args:
            config: Executable name, per-mode arguments and timeout.
            search_path: PATH-style lookup string. Defaults to ``$PATH``
                at the time of each lookup.
        """
        self._config = config
        self._search_path = search_path
        self._resolved: Optional[str] = None

    @property
    def tool_name(self) -> str:
        return self._config.executable

    def _arguments(self, mode: QueryMode) -> list[str]:
        if mode is QueryMode.ALL_DEVICES:
            return list(self._config.all_devices_args)
        return list(self._config.compute_apps_args)

    def locate(self) -> Optional[str]:
        """Find the executable on the search path.

        A successful lookup is remembered, so the search path is scanned
        once per adapter. A failed lookup is retried on the next call.

        Returns:
            Absolute path of the executable, or None if it is not found.
        """
        if self._resolved is None:
            search_path = self._search_path
            if search_path is None:
                search_path = os.environ.get("PATH", "")
            self._resolved = shutil.which(self._config.executable, path=search_path)
        return self._resolved

    def is_available(self) -> bool:
        return self.locate() is not None

    def query(self, mode: QueryMode) -> bytes:
        """Run the tool in the given listing mode.

        Raises:
            QueryExecutionError: If the process cannot be started, times out
                or exits with a non-zero status.
        """
        command = [self.locate() or self._config.executable, *self._arguments(mode)]
        logger.debug(f"Running {' '.join(command)}")

        try:
            result = subprocess.run(
                command,
                capture_output=True,
                timeout=self._config.timeout_seconds,
                check=False,
            )
        except subprocess.TimeoutExpired as e:
            raise QueryExecutionError(
                self.tool_name, f"timed out after {self._config.timeout_seconds}s"
            ) from e
        except OSError as e:
            raise QueryExecutionError(self.tool_name, str(e)) from e

        if result.returncode != 0:
            stderr = result.stderr.decode(errors="replace").strip()
            reason = f"exit status {result.returncode}"
            if stderr:
                reason = f"{reason}: {stderr}"
            raise QueryExecutionError(self.tool_name, reason)

        return result.stdout
