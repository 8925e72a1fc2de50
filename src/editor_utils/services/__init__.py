"""Service layer: settings and telemetry."""
