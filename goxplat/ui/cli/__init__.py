"""CLI sub-command groups, registered by goxplat.main."""
