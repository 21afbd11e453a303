"""Host backends for container tooling."""
