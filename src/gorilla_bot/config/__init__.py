"""Settings and the application context container."""
