# SpaceX REST API root; launches and launchpads hang off it
BASE_URL = "https://api.spacexdata.com/v4"

# Retry policy: attempt N waits RETRY_DELAY_SECONDS * N before attempt N + 1
RETRY_ATTEMPTS = 3
RETRY_DELAY_SECONDS = 1.0

HTTP_TIMEOUT_SECONDS = 10.0

NO_DETAILS_PLACEHOLDER = "No mission details available"
NO_DATE_PLACEHOLDER = "Launch date not yet announced"
