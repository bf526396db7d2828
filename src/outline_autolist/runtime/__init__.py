"""Runtime services shared by every package (telemetry)."""
