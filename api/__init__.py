"""HTTP API for the contact book."""
