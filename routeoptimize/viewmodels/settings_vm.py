from __future__ import annotations

import os
from dataclasses import asdict, dataclass, replace
from typing import Any, Mapping, Optional

from ..utils.logging import env_requests_debug, is_truthy

_ENV_PREFIX = "ROUTEOPT_"


@dataclass
class ShellSettings:
    """Typed runtime settings for one shell session."""

    login_latency_ms: int = 900
    arrival_revert_ms: int = 2000
    strict_elements: bool = True
    harden_submit: bool = False
    cancel_superseded_timers: bool = False
    debug_logging: bool = False


_INT_KEYS = {"login_latency_ms", "arrival_revert_ms"}
_BOOL_KEYS = {"strict_elements", "harden_submit", "cancel_superseded_timers", "debug_logging"}


class SettingsVM:
    """Keeps shell settings state and validation, no I/O here."""

    def __init__(self, *, config: Optional[ShellSettings] = None) -> None:
        self.config = config or ShellSettings(debug_logging=env_requests_debug())

    # ------------------------------------------------------------------
    # Properties bridging to the typed config
    # ------------------------------------------------------------------
    @property
    def login_latency_ms(self) -> int:
        return self.config.login_latency_ms

    @login_latency_ms.setter
    def login_latency_ms(self, value: int) -> None:
        coerced = self._coerce_int("login_latency_ms", value, allow_negative=False)
        self.config = replace(self.config, login_latency_ms=coerced)

    @property
    def arrival_revert_ms(self) -> int:
        return self.config.arrival_revert_ms

    @arrival_revert_ms.setter
    def arrival_revert_ms(self, value: int) -> None:
        coerced = self._coerce_int("arrival_revert_ms", value, allow_negative=False)
        self.config = replace(self.config, arrival_revert_ms=coerced)

    @property
    def strict_elements(self) -> bool:
        return self.config.strict_elements

    @strict_elements.setter
    def strict_elements(self, value: bool) -> None:
        self.config = replace(self.config, strict_elements=self._coerce_bool(value))

    @property
    def harden_submit(self) -> bool:
        return self.config.harden_submit

    @harden_submit.setter
    def harden_submit(self, value: bool) -> None:
        self.config = replace(self.config, harden_submit=self._coerce_bool(value))

    @property
    def cancel_superseded_timers(self) -> bool:
        return self.config.cancel_superseded_timers

    @cancel_superseded_timers.setter
    def cancel_superseded_timers(self, value: bool) -> None:
        self.config = replace(self.config, cancel_superseded_timers=self._coerce_bool(value))

    @property
    def debug_logging(self) -> bool:
        return self.config.debug_logging

    @debug_logging.setter
    def debug_logging(self, value: bool) -> None:
        self.config = replace(self.config, debug_logging=self._coerce_bool(value))

    # ------------------------------------------------------------------
    def apply_dict(self, payload: Mapping[str, Any]) -> None:
        """Apply a flat mapping of settings (CLI flags, env, tests)."""

        if not isinstance(payload, Mapping):
            raise ValueError("Settings payload must be a mapping of flat keys.")

        unknown = set(payload.keys()) - set(ShellSettings.__annotations__.keys())
        if unknown:
            raise ValueError(f"Unsupported settings keys: {', '.join(sorted(str(key) for key in unknown))}")

        updates = {key: self._coerce_config_value(key, raw) for key, raw in payload.items()}
        if updates:
            self.config = replace(self.config, **updates)

    def to_dict(self) -> dict:
        return asdict(self.config)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SettingsVM":
        """Build settings from ``ROUTEOPT_<FIELD>`` environment variables."""
        env = os.environ if environ is None else environ
        vm = cls(config=ShellSettings(debug_logging=env_requests_debug(env)))
        payload = {}
        for key in ShellSettings.__annotations__.keys():
            raw = env.get(_ENV_PREFIX + key.upper())
            if raw is not None and raw.strip():
                payload[key] = raw
        vm.apply_dict(payload)
        return vm

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _coerce_config_value(self, key: str, raw: Any) -> Any:
        if key in _INT_KEYS:
            return self._coerce_int(key, raw, allow_negative=False)
        if key in _BOOL_KEYS:
            return self._coerce_bool(raw)
        raise ValueError(f"Unhandled config field: {key}")

    @staticmethod
    def _coerce_bool(value: Any) -> bool:
        return is_truthy(value)

    @staticmethod
    def _coerce_int(name: str, value: Any, *, allow_negative: bool = True) -> int:
        if isinstance(value, bool):
            raise ValueError(f"{name} must be an integer.")
        if isinstance(value, (int, float)):
            coerced = int(value)
        elif isinstance(value, str):
            try:
                coerced = int(value.strip())
            except (TypeError, ValueError) as exc:
                raise ValueError(f"{name} must be an integer.") from exc
        else:
            raise ValueError(f"{name} must be an integer.")
        if not allow_negative and coerced < 0:
            raise ValueError(f"{name} must be non-negative.")
        return coerced
