"""Basic tierfind usage.

This example shows how to locate a configuration file that may live in
the current directory or any of its parents, with a local override taking
priority over the shared file wherever each one is found.
"""

from tierfind import find_one, find_tiered


# Tier 0: a personal override. Tier 1: the shared file, in either format.
keys = ["app.local.toml", ["app.toml", "app.ini"]]

# Best match only (None if nothing is found up to the filesystem root)
best = find_one(keys)
if best is None:
    print("No configuration found")
else:
    print(f"Using {best.path} (tier {best.priority_score}, {best.depth} levels up)")

# Every match, e.g. to merge settings from nearest to farthest
for match in find_tiered(keys):
    print(f"{match.priority_score} {match.depth} {match.path}")
