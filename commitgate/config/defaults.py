from .types import CheckConfig, GateConfig

CONFIG_FILENAMES = (
    "commitgate.yml",
    "commitgate.yaml",
    "commitgate.toml",
    "commitgate.json",
)

DEFAULT_CHECKS = (
    ("fmt-check", "just fmt-check"),
    ("check", "just check"),
)


def default_gate() -> GateConfig:
    checks = {
        check_id: CheckConfig(check_id, command, {}, None)
        for check_id, command in DEFAULT_CHECKS
    }
    return GateConfig(checks=checks)
