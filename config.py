import os
import sys

# ====================================================================================
# ENVIRONMENT CONFIGURATION: PROD / STAGE / LOCAL isolation via prefixes
# ====================================================================================
# Every setting is read with the environment prefix:
#   - PROD: PROD_REDIS_URL, PROD_SWEEP_INTERVAL_SECONDS
#   - STAGE: STAGE_REDIS_URL, STAGE_SWEEP_INTERVAL_SECONDS
#   - LOCAL: LOCAL_REDIS_URL, LOCAL_SWEEP_INTERVAL_SECONDS
#
# A STAGE process therefore never picks up PROD_REDIS_URL by accident.
# ====================================================================================

APP_ENV = os.getenv("APP_ENV", "local").lower()
if APP_ENV not in ("prod", "stage", "local"):
    print(f"ERROR: Invalid APP_ENV={APP_ENV}. Must be one of: prod, stage, local", file=sys.stderr)
    sys.exit(1)

IS_LOCAL = APP_ENV == "local"
IS_STAGE = APP_ENV == "stage"
IS_PROD = APP_ENV == "prod"


def env(key: str, default: str = "") -> str:
    """
    Read an environment variable with the environment prefix.

    Example:
        env("REDIS_URL") -> value of STAGE_REDIS_URL (if APP_ENV=stage)
    """
    env_key = f"{APP_ENV.upper()}_{key}"
    return os.getenv(env_key, default)


def env_int(key: str, default: int, minimum: int, maximum: int) -> int:
    """Read an integer setting and clamp it to [minimum, maximum]."""
    raw = env(key, default=str(default))
    try:
        value = int(raw)
    except ValueError:
        print(f"WARNING: {APP_ENV.upper()}_{key}={raw!r} is not a number, using {default}", file=sys.stderr)
        value = default
    return max(minimum, min(maximum, value))


# Unprefixed variables are refused so environments cannot be mixed up
_direct_usage_vars = ["REDIS_URL"]
for var in _direct_usage_vars:
    if os.getenv(var):
        print(f"ERROR: Direct usage of {var} is FORBIDDEN!", file=sys.stderr)
        print(f"ERROR: Use {APP_ENV.upper()}_{var} instead (via env('{var}'))", file=sys.stderr)
        sys.exit(1)

print(f"INFO: Config loaded for environment: {APP_ENV.upper()}", flush=True)

# Logging level for the root logger
LOG_LEVEL = env("LOG_LEVEL", default="INFO").upper()

# Member store: Redis when REDIS_URL is set, in-memory otherwise (local dev)
REDIS_URL = env("REDIS_URL", default="")
MEMBER_KEY_PREFIX = env("MEMBER_KEY_PREFIX", default="membership")

if not REDIS_URL:
    if IS_PROD:
        print(f"WARNING: {APP_ENV.upper()}_REDIS_URL is not set - members are kept in memory only", file=sys.stderr)
else:
    print(f"INFO: Using REDIS_URL from {APP_ENV.upper()}_REDIS_URL", flush=True)

# Expiry sweep period: 1 minute to 1 hour, default 5 minutes
SWEEP_INTERVAL_SECONDS = env_int("SWEEP_INTERVAL_SECONDS", default=300, minimum=60, maximum=3600)

# Minimum sleep after a failed sweep iteration to prevent tight retry storms
MINIMUM_SAFE_SLEEP_ON_FAILURE = 10  # seconds
