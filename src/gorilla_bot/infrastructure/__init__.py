"""Infrastructure layer - external systems integration.

This layer contains implementations for:
- Discord (bot, cogs, command definitions, guards)
- Audio (FFmpeg playback of the local clip)
"""
