"""HTTP server exposing the charter2pdf engine."""
