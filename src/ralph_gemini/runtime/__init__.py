"""Asset discovery, mirroring, version tracking and the launcher artifact."""
