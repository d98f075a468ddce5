from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


class ConfigError(Exception):
    pass


class UnsupportedConfigFormatError(ConfigError):
    pass


def _text(value: Any) -> str | None:
    """Stripped string, or None when ``value`` is not a non-blank string."""
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


@dataclass
class CheckConfig:
    id: str
    command: str
    env: dict[str, str]
    working_dir: str | None

    FIELDS = frozenset({"command", "env", "working_dir"})

    @classmethod
    def from_mapping(cls, check_id: str, fields: Any) -> CheckConfig:
        """Build a check from its config table, reporting every bad field at once."""
        if not isinstance(fields, Mapping):
            raise ConfigError(
                f"{check_id}: expected a table, got {type(fields).__name__}"
            )

        problems: list[str] = [
            f"unknown field '{name}'" for name in fields if name not in cls.FIELDS
        ]

        command = _text(fields.get("command"))
        if command is None:
            problems.append("'command' must be a non-empty string")

        env: dict[str, str] = {}
        raw_env = fields.get("env", {})
        if not isinstance(raw_env, Mapping):
            problems.append("'env' must be a table of strings")
        else:
            for key, value in raw_env.items():
                name = _text(key)
                if name is None or not isinstance(value, str):
                    problems.append(f"bad env entry {key!r}: {value!r}")
                else:
                    env[name] = value

        working_dir = None
        if "working_dir" in fields:
            working_dir = _text(fields["working_dir"])
            if working_dir is None:
                problems.append("'working_dir' must be a non-empty string")

        if problems:
            raise ConfigError(f"{check_id}: " + "; ".join(problems))

        return cls(check_id, command, env, working_dir)


@dataclass
class GateConfig:
    checks: dict[str, CheckConfig]

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> GateConfig:
        table = raw.get("checks")
        if not isinstance(table, Mapping) or not table:
            raise ConfigError("'checks' must be a non-empty table of checks")

        checks: dict[str, CheckConfig] = {}
        for key, fields in table.items():
            check_id = _text(key)
            if check_id is None:
                raise ConfigError(f"Bad check id: {key!r}")
            if check_id in checks:
                raise ConfigError(f"Check '{check_id}' is declared twice")
            checks[check_id] = CheckConfig.from_mapping(check_id, fields)

        return cls(checks)

    def __iter__(self):
        # Declaration order is run order
        yield from self.checks.values()

    def get_check(self, id: str) -> CheckConfig:
        return self.checks[id]

    def check_ids(self) -> list[str]:
        return list(self.checks)
