import os

_ENV_MODULES = {
    "prod": "config.production",
    "production": "config.production",
    "test": "config.testing",
    "testing": "config.testing",
    "dev": "config.development",
    "development": "config.development",
}


def get_settings_module(env=None) -> str:
    """Settings module for ``env``; PAYROLL_ENV, then APP_ENV, then development."""
    env = env or os.getenv("PAYROLL_ENV") or os.getenv("APP_ENV") or "development"
    return _ENV_MODULES.get(env.strip().lower(), "config.development")
