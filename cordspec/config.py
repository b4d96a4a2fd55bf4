"""Configuration constants for CORD chain specifications."""

# Currency units.  Balances are plain integers denominated in the smallest
# unit; one WAY carries ``TOKEN_DECIMALS`` decimal places.
TOKEN_SYMBOL = "WAY"
TOKEN_DECIMALS = 12
WAY = 10**TOKEN_DECIMALS

# Address format version shown by wallets and explorers.
SS58_FORMAT = 29

# Genesis endowments.  ``STASH`` is credited to every authority stash account
# on top of anything else that account receives.
DEV_ENDOWMENT = 50_000 * WAY
STAGING_ENDOWMENT = 1_110_101_200 * WAY
STASH = 100 * WAY

# Note this is the URL for the telemetry server
STAGING_TELEMETRY_URL = "wss://telemetry.dway.io/submit/"
DEFAULT_PROTOCOL_ID = "cord"

# Phrase used when a seed carries only a derivation path, e.g. ``//Alice``.
DEV_PHRASE = "bottom drive obey lake curtain smoke basket hold race lonely fit walk"
