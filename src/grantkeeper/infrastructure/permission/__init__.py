"""Permission evaluation against stored grants."""
