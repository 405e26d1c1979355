"""Services that combine project layout, config and the signing domain."""
