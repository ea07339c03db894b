"""Runtime services: environment lookups and telelog-backed telemetry."""

from .env import ENV_PREFIX, env, env_flag, is_test

__all__ = ["ENV_PREFIX", "env", "env_flag", "is_test", "telemetry"]
