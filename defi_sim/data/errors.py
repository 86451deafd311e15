"""Market-data fetch failures.

Each subclass carries a message suitable for showing to the user as-is.
"""


class MarketDataError(Exception):
    """Live market data could not be loaded."""


class MarketDataTimeout(MarketDataError):
    def __init__(self, timeout: float) -> None:
        super().__init__(
            f"Live data request timed out after {timeout:g} seconds. The API may be slow "
            "or unavailable. Please use Sample Data mode for a faster, more reliable experience."
        )
        self.timeout = timeout


class MarketDataConnectionError(MarketDataError):
    def __init__(self) -> None:
        super().__init__(
            "Unable to connect to live data API. Please check your internet connection "
            "or use Sample Data mode."
        )


class MarketDataHTTPError(MarketDataError):
    def __init__(self, protocol_label: str, status_code: int) -> None:
        super().__init__(
            f"Failed to fetch live data from {protocol_label} API. Server returned status "
            f"{status_code}. Please try Sample Data mode instead."
        )
        self.status_code = status_code


class MarketDataParseError(MarketDataError):
    def __init__(self, detail: str) -> None:
        super().__init__(
            f"Live data could not be parsed: {detail}. "
            "Please switch to Sample Data mode to continue using the simulator."
        )
        self.detail = detail
