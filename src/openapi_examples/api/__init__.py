"""HTTP routes exposed by the service."""
