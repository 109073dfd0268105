"""Field Codex domain package: models and entry sources."""
