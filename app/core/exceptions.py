"""Application exceptions."""


class DataUnavailableError(Exception):
    """The data source (profiles, events or bookings) could not be read."""

    def __init__(self, source: str, message: str = "data source unavailable"):
        self.source = source
        super().__init__(f"{source}: {message}")
