"""Route collector reading a JSON route dump.

The dump is a JSON array of route objects, e.g. the output of a framework's
``route:list --json``:

    [
        {"method": "GET|HEAD", "uri": "api/users/{id}", "name": "api.users.show",
         "action": "app.http.users:show", "middleware": ["api", "auth"]}
    ]
"""

import json
from collections.abc import Mapping
from pathlib import Path

from docbot.core.enums import ErrorCode
from docbot.core.errors import ConfigurationError
from docbot.domain.entities import RouteRecord


class JsonRouteCollector:
    """Collect RouteRecords from a JSON file.

    Args:
        path: Route dump file.
    """

    def __init__(self, path: Path) -> None:
        self._path = path

    def collect(self) -> list[RouteRecord]:
        """Read and normalize every route in the dump.

        Raises:
            ConfigurationError: If the file is unreadable, not JSON, or not
                an array of objects.
        """
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise ConfigurationError(
                f'Unable to read route dump "{self._path}": {exc}',
                code=ErrorCode.ROUTE_SOURCE_INVALID,
                details={"path": str(self._path)},
            ) from exc

        if not isinstance(data, list):
            raise ConfigurationError(
                f'Route dump "{self._path}" must contain a JSON array.',
                code=ErrorCode.ROUTE_SOURCE_INVALID,
                details={"path": str(self._path)},
            )

        records: list[RouteRecord] = []
        for index, entry in enumerate(data):
            if not isinstance(entry, Mapping):
                raise ConfigurationError(
                    f'Route dump "{self._path}" entry {index} is not an object.',
                    code=ErrorCode.ROUTE_SOURCE_INVALID,
                    details={"path": str(self._path), "index": str(index)},
                )
            records.append(RouteRecord.from_mapping(entry))

        return records
