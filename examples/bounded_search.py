"""Limiting the search with stop_dir.

In a monorepo, each package may carry its own .env while the workspace
root holds the shared one. Stopping at the workspace root keeps files from
the user's home directory (or anywhere above the repo) out of the results.
"""

from tierfind import find_project_root, find_tiered


# The workspace root is the nearest directory with .tierfind,
# pyproject.toml or .git
workspace = find_project_root()

env_files = find_tiered([".env.local", ".env"], stop_dir=workspace)

for found in env_files:
    print(f"{found.matched_key}: {found.path}")
