"""WTF - fix typos in your previous shell command."""

__version__ = "0.1.0"

# Core components - lazy imports to keep CLI startup cheap
def __getattr__(name: str):
    """Lazy import of the public API."""
    if name == "find_corrections":
        from wtf_fixer.corrections.engine import find_corrections
        return find_corrections
    elif name == "Correction":
        from wtf_fixer.corrections.engine import Correction
        return Correction
    elif name == "get_last_command":
        from wtf_fixer.history.locator import get_last_command
        return get_last_command
    elif name == "UserConfig":
        from wtf_fixer.config import UserConfig
        return UserConfig
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")


__all__ = [
    "find_corrections",
    "Correction",
    "get_last_command",
    "UserConfig",
]
