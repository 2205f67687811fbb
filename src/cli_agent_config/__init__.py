"""CLI Agent Config - backward-compatible oh-my-opencode configuration layer."""
