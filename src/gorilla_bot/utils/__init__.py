"""Small cross-cutting helpers: logging formatter and reply utilities."""
