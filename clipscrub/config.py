"""Configuration parsing and defaults for clipscrub."""

from dataclasses import dataclass, field, replace
import json
from pathlib import Path
from typing import Optional

DEFAULT_CONFIG_PATH = Path("config/clipscrub.yaml")


class ConfigError(ValueError):
    """Raised when configuration parsing or validation fails."""

    pass


@dataclass(frozen=True)
class PolicyConfig:
    """Options that change what the scrub removes."""

    keep_format_marks: bool = False
    keep_no_break_space: bool = False


@dataclass(frozen=True)
class NotificationPolicy:
    """Options for the collaborators that consume a scrub result."""

    suppress_audible_cue: bool = False
    suppress_toast: bool = False
    write_audit_log: bool = False
    audit_log_path: Optional[str] = None


@dataclass(frozen=True)
class ClipscrubConfig:
    """Root configuration object for clipscrub."""

    policy: PolicyConfig = field(default_factory=PolicyConfig)
    notifications: NotificationPolicy = field(default_factory=NotificationPolicy)


DEFAULT_CONFIG = ClipscrubConfig()


def load_config(path: Path) -> ClipscrubConfig:
    """Load configuration from a JSON-compatible YAML file path."""

    if not path.exists():
        return DEFAULT_CONFIG

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigError("config must be JSON-compatible YAML") from exc
    if not isinstance(data, dict):
        raise ConfigError("config must be a JSON object")
    return config_from_dict(data)


def config_from_dict(data: dict) -> ClipscrubConfig:
    """Parse configuration from a Python dict."""

    policy = _as_section(data.get("policy"), "policy")
    notifications = _as_section(data.get("notifications"), "notifications")

    audit_log_path = notifications.get("audit_log_path")
    if audit_log_path is not None and not isinstance(audit_log_path, str):
        raise ConfigError("notifications.audit_log_path must be a string")

    return ClipscrubConfig(
        policy=PolicyConfig(
            keep_format_marks=_as_bool(policy, "keep_format_marks", "policy"),
            keep_no_break_space=_as_bool(policy, "keep_no_break_space", "policy"),
        ),
        notifications=NotificationPolicy(
            suppress_audible_cue=_as_bool(notifications, "suppress_audible_cue", "notifications"),
            suppress_toast=_as_bool(notifications, "suppress_toast", "notifications"),
            write_audit_log=_as_bool(notifications, "write_audit_log", "notifications"),
            audit_log_path=audit_log_path,
        ),
    )


def apply_overrides(
    config: ClipscrubConfig,
    keep_format_marks: bool = False,
    keep_no_break_space: bool = False,
    suppress_audible_cue: bool = False,
    suppress_toast: bool = False,
    write_audit_log: bool = False,
    audit_log_path: Optional[str] = None,
) -> ClipscrubConfig:
    """Layer command-line flags over a loaded config.

    Flags can only switch an option on; an unset flag leaves the file value.
    """

    policy = replace(
        config.policy,
        keep_format_marks=config.policy.keep_format_marks or keep_format_marks,
        keep_no_break_space=config.policy.keep_no_break_space or keep_no_break_space,
    )
    notifications = replace(
        config.notifications,
        suppress_audible_cue=config.notifications.suppress_audible_cue or suppress_audible_cue,
        suppress_toast=config.notifications.suppress_toast or suppress_toast,
        write_audit_log=config.notifications.write_audit_log or write_audit_log,
        audit_log_path=audit_log_path or config.notifications.audit_log_path,
    )
    return ClipscrubConfig(policy=policy, notifications=notifications)


def _as_section(value: Optional[object], name: str) -> dict:
    """Ensure a config section is an object, or default to empty."""

    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"{name} must be an object")
    return value


def _as_bool(section: dict, key: str, prefix: str) -> bool:
    """Validate a boolean switch in configuration."""

    value = section.get(key, False)
    if not isinstance(value, bool):
        raise ConfigError(f"{prefix}.{key} must be a boolean")
    return value
