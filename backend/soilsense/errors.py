"""Error taxonomy for telemetry queries."""


class SoilSenseError(Exception):
    """Base class for errors raised by SoilSense."""


class InvalidRange(SoilSenseError):
    """A time window or query parameter cannot be resolved."""


class DeviceNotFound(SoilSenseError):
    """The device registry has no device with the requested id."""

    def __init__(self, device_id: str):
        super().__init__(f"Device not found: {device_id}")
        self.device_id = device_id


class StoreUnavailable(SoilSenseError):
    """The reading store could not be reached. Not retried here."""
