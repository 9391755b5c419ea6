"""Runtime services: telemetry, settings, events and background I/O."""
