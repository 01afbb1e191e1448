"""Command line shell around the winnowing core."""
