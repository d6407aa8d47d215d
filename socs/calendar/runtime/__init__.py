"""Runtime layer: REST execution and range splitting."""
