"""HTTP message types: validated headers, body streams, requests and responses."""
