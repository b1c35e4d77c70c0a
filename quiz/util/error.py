"""Utility layer errors."""

from pydantic import ValidationError


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """Settings could not be loaded from the environment."""

    @classmethod
    def from_validation_error(cls, error: ValidationError) -> "ConfigurationError":
        """Summarize a settings validation failure, one line per bad field."""
        lines = [
            f"{'.'.join(str(p) for p in err['loc']) or 'settings'}: {err['msg']}"
            for err in error.errors()
        ]
        return cls("Invalid configuration:\n  " + "\n  ".join(lines))
