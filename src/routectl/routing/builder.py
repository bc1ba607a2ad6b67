"""RouteConfigBuilder: render route patterns as wrangler.toml fragments.

Production routes are top-level ``[[routes]]`` blocks; staging and
development routes are nested under ``[[env.<name>.routes]]``::

    # Staging environment routes
    # Domain: staging-api.example.com
    [[env.staging.routes]]
    pattern = "staging-api.example.com/*"
    zone_id = "0123456789abcdef0123456789abcdef"

Blocks are separated by one blank line and the fragment ends with a
single newline.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping, Sequence
from datetime import UTC, datetime

from routectl import __version__
from routectl.domain.types import ENVIRONMENTS, NESTED_ENVIRONMENTS, BuildOptions
from routectl.routing.toml_check import SyntaxCheck, validate_toml_syntax

BANNER_TITLE = "Cloudflare Workers Routes Configuration"
DEFAULT_WORKERS_DOMAIN = "workers.dev"

# Applied in order: backslash first so later escapes are not doubled.
_ESCAPES: tuple[tuple[str, str], ...] = (
    ("\\", "\\\\"),
    ('"', '\\"'),
    ("\n", "\\n"),
    ("\r", "\\r"),
    ("\t", "\\t"),
)


def escape_toml_string(value: str | None) -> str:
    """Escape *value* for use inside a TOML basic string."""
    if not value:
        return ""
    for raw, escaped in _ESCAPES:
        value = value.replace(raw, escaped)
    return value


# Control characters TOML forbids inside comments (tab is allowed).
_COMMENT_UNSAFE = re.compile(r"[\x00-\x08\x0a-\x1f\x7f]+")


def comment_text(value: str) -> str:
    """Collapse line breaks and other control characters in *value* to spaces."""
    return _COMMENT_UNSAFE.sub(" ", value)


def _utc_now() -> datetime:
    return datetime.now(UTC)


class RouteConfigBuilder:
    """Format route patterns as TOML array-of-tables sections.

    Args:
        clock: Source of the banner timestamp. The timestamp is
            informational only; pin it when output must be reproducible.
        workers_domain: Platform wildcard suffix named in dev comments.
    """

    def __init__(
        self,
        *,
        clock: Callable[[], datetime] = _utc_now,
        workers_domain: str = DEFAULT_WORKERS_DOMAIN,
    ) -> None:
        self._clock = clock
        self._workers_domain = workers_domain

    @staticmethod
    def table_prefix(environment: str) -> str:
        """Dotted table prefix for *environment* (empty for top-level)."""
        if environment in NESTED_ENVIRONMENTS:
            return f"env.{environment}."
        return ""

    def build_routes_section(
        self,
        patterns: Sequence[str],
        environment: str,
        options: BuildOptions | None = None,
    ) -> str:
        """Render *patterns* as one section; empty input renders ``""``."""
        if not patterns:
            return ""

        opts = options or BuildOptions()
        prefix = self.table_prefix(environment)
        blocks = [self.format_route_pattern(p, opts.zone_id, prefix) for p in patterns]

        section = "\n".join(blocks)
        if opts.include_comments:
            comment = self.generate_route_comment(opts.domain or "unknown", environment)
            section = f"{comment}\n{section}"
        return section

    def format_route_pattern(
        self,
        pattern: str,
        zone_id: str | None = None,
        prefix: str = "",
    ) -> str:
        """Render one ``[[routes]]`` block, newline-terminated."""
        lines = [
            f"[[{prefix}routes]]",
            f'pattern = "{escape_toml_string(pattern)}"',
        ]
        if zone_id:
            lines.append(f'zone_id = "{escape_toml_string(zone_id)}"')
        return "\n".join(lines) + "\n"

    def generate_route_comment(self, domain: str, environment: str) -> str:
        """Two-line comment naming the environment and originating domain."""
        env_name = comment_text(environment[:1].upper() + environment[1:])
        return f"# {env_name} environment routes\n# Domain: {comment_text(domain)}"

    def generate_dev_comment(self, worker_name: str) -> str:
        """Comment block for development deployments on the wildcard domain."""
        worker_name = comment_text(worker_name)
        return (
            "# Development environment\n"
            f"# Uses {self._workers_domain} subdomain: "
            f"https://{worker_name}-dev.<account>.{self._workers_domain}\n"
            "# No custom domain routes needed for development\n"
        )

    def build_complete_routes_config(
        self,
        routes_by_environment: Mapping[str, Sequence[str]],
        options: BuildOptions | None = None,
        *,
        domains: Mapping[str, str | None] | None = None,
    ) -> str:
        """Render production, staging and development sections in that order.

        Empty or missing environments are skipped. *domains* supplies the
        per-environment domain named in section comments; without it the
        ``domain`` from *options* is used for every section.
        """
        opts = options or BuildOptions()
        parts: list[str] = []

        if opts.include_comments:
            parts.append(
                f"# {BANNER_TITLE}\n"
                f"# Generated by routectl {__version__}\n"
                f"# Generated: {self._clock().isoformat()}\n"
            )

        for environment in ENVIRONMENTS:
            patterns = routes_by_environment.get(environment) or ()
            if not patterns:
                continue
            section_opts = opts
            if domains and domains.get(environment):
                section_opts = opts.model_copy(update={"domain": domains[environment]})
            parts.append(self.build_routes_section(patterns, environment, section_opts))

        return "\n".join(parts).strip() + "\n"

    def validate_toml_syntax(self, text: str) -> SyntaxCheck:
        """Structural sanity check; see :func:`~routectl.routing.toml_check.validate_toml_syntax`."""
        return validate_toml_syntax(text)
