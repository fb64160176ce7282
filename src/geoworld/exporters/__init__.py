"""Text exporters for a World: GeoJSON (RFC 7946) and GPX 1.1."""
