"""slirules CLI."""
