"""Protocol identifiers and market-data endpoints."""

# Live endpoints queried by LiveDataProvider
AAVE_API_URL = "https://api.thegraph.com/subgraphs/name/aave/protocol-v3"
COMPOUND_API_URL = "https://api.compound.finance/api/v2/ctoken"

# Seconds to wait for a live response before failing over to sample data
LIVE_FETCH_TIMEOUT = 10.0
