"""Infrastructure layer: HTTP API, API client, observability."""
