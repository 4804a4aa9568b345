# Full recursive metadata tree for the current host
METADATA_URL = "http://metadata.google.internal/computeMetadata/v1/?recursive=true"

# The metadata server rejects requests without this header
METADATA_FLAVOR_HEADER = "Metadata-Flavor"
METADATA_FLAVOR = "Google"
METADATA_HEADERS = {METADATA_FLAVOR_HEADER: METADATA_FLAVOR}

# Base for fully qualified Compute Engine API resource URLs
# e.g. .../projects/my-proj/zones/us-central1-a/instances/vm-1
COMPUTE_API_BASE = "https://www.googleapis.com/compute/v1"
