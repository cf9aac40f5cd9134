"""Route record: normalized metadata for one registered HTTP route.

Collectors turn a framework's live route table into RouteRecords; the
partitioner and writers only ever read them.

Usage:
    record = RouteRecord.build(
        methods=["GET", "HEAD"],
        uri="/users/{id}/posts/{postId?}",
        name="users.posts.show",
    )
    record.uri              # "users/{id}/posts/{postId?}"
    record.methods          # ("GET",)
    record.path_parameters  # ("id", "postId")
"""

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from docbot.core.constants import IGNORED_HTTP_METHODS
from docbot.core.values import string_list, string_or_none, unique

PATH_PARAMETER_PATTERN = re.compile(r"\{(\w+)\??\}")


def extract_path_parameters(uri: str) -> tuple[str, ...]:
    """Return distinct ``{name}`` / ``{name?}`` placeholders in order."""
    return tuple(unique(PATH_PARAMETER_PATTERN.findall(uri)))


def normalize_methods(methods: Iterable[str]) -> tuple[str, ...]:
    """Upper-case, de-duplicate and drop HEAD/OPTIONS."""
    upper = (method.upper() for method in methods)
    return tuple(m for m in unique(upper) if m not in IGNORED_HTTP_METHODS)


@dataclass(frozen=True, slots=True, kw_only=True)
class RouteRecord:
    """Read-only snapshot of a route.

    Attributes:
        methods: HTTP verbs (HEAD/OPTIONS excluded).
        uri: Path template without leading slash.
        name: Dotted route name (e.g. "users.index").
        action: Endpoint reference used to look up a description.
        middleware: Middleware names attached to the route.
        domain: Host constraint.
        path_parameters: Placeholder names derived from uri.
    """

    methods: tuple[str, ...]
    uri: str
    name: str | None = None
    action: str | None = None
    middleware: tuple[str, ...] = ()
    domain: str | None = None
    path_parameters: tuple[str, ...] = ()

    @classmethod
    def build(
        cls,
        *,
        methods: Iterable[str],
        uri: str,
        name: str | None = None,
        action: str | None = None,
        middleware: Iterable[str] = (),
        domain: str | None = None,
    ) -> "RouteRecord":
        """Build a record, deriving path parameters and normalizing methods.

        Args:
            methods: HTTP verbs as registered.
            uri: Path template (leading slash optional).
            name: Dotted route name.
            action: Endpoint reference.
            middleware: Middleware names.
            domain: Host constraint.

        Returns:
            RouteRecord: Normalized record.
        """
        path = uri.lstrip("/")
        return cls(
            methods=normalize_methods(methods),
            uri=path,
            name=name or None,
            action=action or None,
            middleware=tuple(unique(middleware)),
            domain=domain or None,
            path_parameters=extract_path_parameters(path),
        )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "RouteRecord":
        """Build a record from a loosely-typed route dump entry.

        Accepts either a ``methods`` list or a ``method`` string such as
        "GET|HEAD" (the format of framework route listings).

        Args:
            data: Route entry.

        Returns:
            RouteRecord: Normalized record.
        """
        methods = string_list(data.get("methods"))
        if not methods:
            raw_method = string_or_none(data.get("method")) or ""
            methods = [m for m in raw_method.split("|") if m]

        return cls.build(
            methods=methods,
            uri=string_or_none(data.get("uri"), "") or "",
            name=string_or_none(data.get("name")),
            action=string_or_none(data.get("action")),
            middleware=string_list(data.get("middleware")),
            domain=string_or_none(data.get("domain")),
        )
