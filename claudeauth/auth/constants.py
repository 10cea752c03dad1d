"""Claude OAuth constants."""

TOKEN_URL = "https://claude.ai/api/oauth/token"
REQUEST_TIMEOUT_SEC = 30.0

# Refresh this many seconds before the token actually expires.
REFRESH_BUFFER_SEC = 5 * 60

CREDENTIALS_DIRNAME = ".claude"
CREDENTIALS_FILENAME = ".credentials.json"
SCOPES = ("user:inference", "user:profile")

OUTPUT_ACCESS_TOKEN = "new_access_token"
OUTPUT_REFRESH_TOKEN = "new_refresh_token"
OUTPUT_EXPIRES_AT = "new_expires_at"
