"""Settings, configuration sources and logging setup."""
