"""SoilSense field telemetry backend."""
