"""Move files into a central repository and leave relative symlinks behind."""
