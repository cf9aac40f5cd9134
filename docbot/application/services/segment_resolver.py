"""Segment resolver: raw segment configuration → ResolvedSegment map.

Segment definitions come from the project config as untyped mappings. The
resolver applies shared route defaults, validates every field and returns
immutable ResolvedSegments keyed by segment key. Nothing downstream looks at
the raw configuration again.

Resolution rules:
    - An implicit "web" segment without auth is prepended, so explicit
      segments are evaluated first and "web" acts as the catch-all.
    - A definition without a non-empty string "key" is fatal.
    - host_variable / host_value: definition → defaults → built-in default.
    - auth: definition → defaults. Type "none", an unknown type, a missing
      block or a missing token variable all mean "no auth".
    - Later definitions with an existing key replace the earlier one.

Usage:
    resolver = SegmentResolver(
        defaults={"host_value": "https://api.example.com"},
        definitions=[{"key": "api", "prefix": "api/"}],
    )
    segments = resolver.resolve()   # {"web": ..., "api": ...}
"""

from collections.abc import Mapping, Sequence
from typing import Any

from docbot.core.constants import (
    DEFAULT_AUTH_HEADER,
    DEFAULT_HOST_VALUE,
    DEFAULT_HOST_VARIABLE,
    WEB_SEGMENT_KEY,
)
from docbot.core.enums import ErrorCode
from docbot.core.errors import ConfigurationError
from docbot.core.sanitizer import DEFAULT_FILENAME_SANITIZER, FilenameSanitizer
from docbot.core.values import string_list, string_or_fallback, string_or_none, unique
from docbot.domain.enums import AuthType
from docbot.domain.protocols import LoggerProtocol
from docbot.domain.value_objects import ResolvedSegment, SegmentAuth

_WEB_DEFINITION: dict[str, Any] = {
    "key": WEB_SEGMENT_KEY,
    "auth": {"type": AuthType.NONE.value},
}


class SegmentResolver:
    """Resolve segment definitions against shared defaults.

    Args:
        defaults: Shared route defaults (host_variable, host_value, auth).
        definitions: Raw segment definitions in evaluation order.
        sanitizer: Filename policy used to derive safe keys.
        logger: Optional logger for redefinition and auth warnings.
    """

    def __init__(
        self,
        defaults: Mapping[str, Any] | None = None,
        definitions: Sequence[Any] | None = None,
        *,
        sanitizer: FilenameSanitizer = DEFAULT_FILENAME_SANITIZER,
        logger: LoggerProtocol | None = None,
    ) -> None:
        self._defaults = self._sanitize_defaults(defaults or {})
        self._definitions = [d for d in definitions or [] if isinstance(d, Mapping)]
        self._sanitizer = sanitizer
        self._logger = logger

    def resolve(self) -> dict[str, ResolvedSegment]:
        """Resolve every segment, web first.

        Returns:
            Mapping of segment key to ResolvedSegment, in evaluation order.

        Raises:
            ConfigurationError: If a definition has no usable key.
        """
        segments: dict[str, ResolvedSegment] = {}

        for definition in [_WEB_DEFINITION, *self._definitions]:
            segment = self._resolve_definition(definition)

            if segment.key in segments and self._logger is not None:
                self._logger.warning(
                    "Segment redefined; later definition wins",
                    segment=segment.key,
                )

            segments[segment.key] = segment

        return segments

    def _resolve_definition(self, definition: Mapping[str, Any]) -> ResolvedSegment:
        key = definition.get("key")

        if not isinstance(key, str) or not key:
            raise ConfigurationError(
                'Each Docbot route segment must define a non-empty "key".',
                code=ErrorCode.SEGMENT_KEY_MISSING,
                details={"definition": repr(dict(definition))},
            )

        return ResolvedSegment(
            key=key,
            safe_key=self._sanitizer.sanitize(key),
            prefix=string_or_none(definition.get("prefix")),
            domain=string_or_none(definition.get("domain")),
            include_middleware=tuple(
                unique(string_list(definition.get("include_middleware")))
            ),
            exclude_middleware=tuple(
                unique(string_list(definition.get("exclude_middleware")))
            ),
            host_variable=string_or_fallback(
                self._own_or_default(definition, "host_variable"),
                DEFAULT_HOST_VARIABLE,
            ),
            host_value=string_or_fallback(
                self._own_or_default(definition, "host_value"),
                DEFAULT_HOST_VALUE,
            ),
            auth=self._resolve_auth(key, definition),
        )

    def _own_or_default(self, definition: Mapping[str, Any], field: str) -> Any:
        value = definition.get(field)
        return self._defaults.get(field) if value is None else value

    def _resolve_auth(
        self, key: str, definition: Mapping[str, Any]
    ) -> SegmentAuth | None:
        auth = self._own_or_default(definition, "auth")

        if not auth or not isinstance(auth, Mapping):
            return None

        type_name = string_or_fallback(auth.get("type"), AuthType.NONE.value)
        type_name = type_name.strip().lower()

        try:
            auth_type = AuthType(type_name)
        except ValueError:
            if self._logger is not None:
                self._logger.warning(
                    "Unsupported auth type; segment documented without auth",
                    segment=key,
                    type=type_name,
                )
            return None

        if auth_type is AuthType.NONE:
            return None

        token_variable = self._first_string(
            auth.get("token_variable"),
            definition.get("token"),
            self._default_token_variable(),
        )

        # An auth scheme without a token placeholder cannot be rendered.
        if token_variable is None:
            return None

        return SegmentAuth(
            type=auth_type,
            header=string_or_fallback(auth.get("header"), DEFAULT_AUTH_HEADER),
            token_variable=token_variable,
        )

    def _default_token_variable(self) -> Any:
        auth = self._defaults.get("auth")
        return auth.get("token_variable") if isinstance(auth, Mapping) else None

    @staticmethod
    def _first_string(*candidates: Any) -> str | None:
        for candidate in candidates:
            if candidate is not None:
                return string_or_none(candidate)
        return None

    @staticmethod
    def _sanitize_defaults(defaults: Mapping[str, Any]) -> dict[str, Any]:
        cleaned = dict(defaults)
        if "auth" in cleaned and not isinstance(cleaned["auth"], Mapping):
            del cleaned["auth"]
        return cleaned
