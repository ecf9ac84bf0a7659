"""Constants for connection liveness monitoring."""

from __future__ import annotations

# Staleness (in seconds)
# Twice the server heartbeat interval, so one missed ping is tolerated.
STALE_THRESHOLD = 6.0

# Reconnection backoff
RECONNECTION_BACKOFF_RATE = 0.15
MAX_BACKOFF_EXPONENT = 10

# Wait after a foreground transition before re-checking (in seconds).
# Resume notifications can arrive before the network stack is back.
FOREGROUND_RECHECK_DELAY = 0.2

# Diagnostic messages
LOG_PREFIX = "ConnectionMonitor"

# Configuration file
DEFAULT_CONFIG_SECTION = "connection_monitor"

# Relay envelope
COMMAND_MESSAGE = "message"
DEFAULT_RECEIVED_ACTION = "received"
