# Shared application constants

# Namespaces the (year, user) seed. Changing it changes every fortune ever told.
SALT = "sha-omikuji-2026"

DIGEST_SIZE = 32
DIGEST_BITS = DIGEST_SIZE * 8

# --- Fingerprint ---
ART_WIDTH = 16
ART_COUNTER_MAX = 255

# --- Presentation ---
SHORT_SCORE_COUNT = 5

# --- Environment ---
# These names can be monkeypatched in tests to redirect lookups.
USER_ENV_VAR = "OMIKUJI_USER"
LOG_LEVEL_ENV_VAR = "OMIKUJI_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
