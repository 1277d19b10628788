"""Error handling patterns with recovery hints.

Not finding a file is not an error: find_one() returns None and
find_tiered() returns an empty list. Only malformed input raises, as a
TierfindError subclass with a recovery_hint.
"""

from pathlib import Path

from tierfind import ConfigurationError, FoundResult, TierfindError, find_one


# Pattern 1: Fall back to a default when nothing is found
def config_path_or_default(default: Path) -> Path:
    """Return the nearest settings file, or default if there is none."""
    found = find_one(["settings.toml"])
    return found.path if found is not None else default


# Pattern 2: Report malformed keys with the recovery hint
def find_user_supplied(keys: list[str]) -> FoundResult | None:
    """Search for keys that came from user input."""
    try:
        return find_one(keys)
    except ConfigurationError as e:
        print(f"Invalid search: {e}")
        print(f"Hint: {e.recovery_hint}")
        return None


# Pattern 3: Catch all library errors
def safe_find(keys: list[str]) -> FoundResult | None:
    """Search, treating any library error as not found."""
    try:
        return find_one(keys)
    except TierfindError as e:
        print(f"Error: {e}")
        return None


print(config_path_or_default(Path("settings.default.toml")))
find_user_supplied(["", "/etc/absolute.conf"])
