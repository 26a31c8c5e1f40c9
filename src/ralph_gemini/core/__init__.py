"""Core workspace model: paths, configuration record, errors and tool probing."""
