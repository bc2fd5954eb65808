"""Runtime services (telemetry) shared by the engine and its adapters."""
