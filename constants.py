"""Application constants."""

# Pagination
DEFAULT_PER_PAGE = 100

# Timeouts (in seconds)
REQUEST_TIMEOUT = 30

# The only status treated as a successful Canvas call
HTTP_OK = 200

# Statuses at or above this are flagged as errors on the response envelope
HTTP_ERROR_THRESHOLD = 400

# Parameter sent with course DELETE requests
DELETE_EVENT = "delete"
