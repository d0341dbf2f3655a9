"""Centralized message constants for error messages, log templates, and user feedback."""

from __future__ import annotations


class ErrorMessages:
    """Error messages for exceptions and validation failures."""

    # Discord ID Validation Errors
    INVALID_SNOWFLAKE = "Discord snowflake ID must be positive"
    SNOWFLAKE_TOO_LARGE = "Discord snowflake ID exceeds maximum value (2^64)"

    # Settings Validation Errors
    INVALID_LOG_LEVEL = "Invalid log level: {level}. Must be one of {valid_levels}"
    EMPTY_TRIGGER_TEXT = "Trigger text cannot be empty"

    # Registry Errors
    REGISTRY_ALREADY_LOADED = "Command registry is already loaded"

    # Voice Errors
    VOICE_CONNECT_TIMEOUT = "Voice connection to channel {channel_id} was not ready within {timeout}s"
    VOICE_CONNECT_FAILED = "Could not connect to voice channel {channel_id}: {reason}"

    # Audio Errors
    AUDIO_RESOURCE_NOT_FOUND = "Audio resource not found: {path}"
    PLAYBACK_START_TIMEOUT = "Playback of '{title}' did not start within {timeout}s"
    PLAYBACK_START_FAILED = "Could not start playback of '{title}': {reason}"

    # Authentication/Security Errors
    DISCORD_TOKEN_REQUIRED = "DISCORD_TOKEN environment variable is required"
    BOT_NOT_INITIALIZED = "Bot not initialized. Call set_bot() first."
    CONTAINER_NOT_FOUND = "Container not found on bot instance"


class LogTemplates:
    """Log message templates.

    Use these with logger.info(), logger.error(), etc. and pass values as parameters
    so formatting is deferred to the logging framework.
    """

    # Command Registry
    COMMAND_REGISTERED = "Registered command: /%s"
    COMMAND_DEFINITION_INVALID = (
        "[WARNING] The command definition %r is missing a required \"name\" or \"execute\" property."
    )
    COMMAND_DUPLICATE = "Command /%s is already registered, skipping duplicate definition"
    COMMANDS_LOADED_SUMMARY = "Loaded %d command(s), skipped %d"

    # Interaction Dispatch
    COMMAND_NOT_FOUND = "No command matching %s was found."
    COMMAND_EXECUTION_FAILED = "Error while executing command /%s"
    COMMAND_ERROR_REPLY_FAILED = "Failed to send error reply for /%s: %r"
    TREE_COMMAND_ERROR = "Unhandled app command error in /%s: %r"

    # Text Trigger / Voice State Triggers
    TRIGGER_RECEIVED = "Trigger text from %s in guild %s"
    TRIGGER_NOT_IN_VOICE = "Trigger from %s ignored: member not in a voice channel"
    VOICE_JOIN_TRIGGER = "Member %s joined voice channel %s in guild %s"
    VOICE_SESSION_FAILED = "Voice session failed in guild %s: %s"

    # Voice Sessions
    VOICE_CONNECTING = "Connecting to voice channel %s in guild %s"
    VOICE_CONNECTED = "Connected to voice channel %s in guild %s"
    VOICE_CONNECTION_TIMEOUT = "Timeout connecting to channel %s after %ss"
    VOICE_CONNECTION_FAILED = "Failed to connect to channel %s: %r"
    VOICE_DESTROYED = "Destroyed voice connection in guild %s"
    VOICE_DESTROY_FAILED = "Failed to destroy voice connection in guild %s: %r"
    VOICE_SESSION_REPLACED = "Replacing active voice session in guild %s"
    VOICE_DISCONNECT_SCHEDULED = "Scheduled disconnect from guild %s in %ss"
    VOICE_AUTO_DISCONNECT = "Auto-disconnect timer fired for guild %s"
    VOICE_SESSIONS_CLOSED = "Closed %d voice session(s)"

    # Audio Player
    AUDIO_WARMUP_COMPLETE = "Pre-buffered audio resource %s (%d bytes)"
    AUDIO_WARMUP_FAILED = "Audio warm-up failed: %s"
    PLAYBACK_REQUESTED = "Requested playback of '%s' in guild %s"
    PLAYBACK_STARTED = "Started playing '%s' in guild %s"
    PLAYBACK_START_TIMEOUT = "Playback of '%s' did not start in guild %s within %ss"
    PLAYBACK_FINISHED = "Finished playing '%s' in guild %s"
    PLAYBACK_STOPPED = "Stopped playback in guild %s"
    AUDIO_PLAYER_ERROR = "Error: %s with resource %s"
    AUDIO_SOURCE_CLEANUP_ERROR = "Error cleaning up audio source: %r"

    # Event Bus
    EVENT_HANDLER_FAILED = "Error in handler for %s: %s"

    # Bot Lifecycle
    BOT_STARTING = "Starting bot in %s environment"
    BOT_STARTING_RUN = "Connecting to Discord gateway"
    BOT_STOPPED = "Bot stopped"
    BOT_KEYBOARD_INTERRUPT = "Received keyboard interrupt, shutting down"
    BOT_FATAL_ERROR = "Fatal error: %s"
    BOT_SETUP = "Running setup hook"
    BOT_SETUP_COMPLETE = "Setup hook complete"
    BOT_COG_LOADED = "Loaded cog: %s"
    BOT_COG_LOAD_FAILED = "Failed to load cog %s: %s"
    BOT_COGS_LOADED_SUMMARY = "Cogs loaded: %d succeeded, %d failed"
    BOT_SYNCED_GUILD = "Synced %d command(s) to guild %s"
    BOT_SYNC_GUILD_FAILED = "Failed to sync commands to guild %s: %s"
    BOT_SYNCED_GLOBAL = "Synced %d global command(s)"
    BOT_SYNC_GLOBAL_FAILED = "Failed to sync global commands: %s"
    BOT_SYNC_ON_STARTUP_FAILED = "Command sync on startup failed: %s"
    BOT_READY = "Logged in as %s!"
    BOT_CONNECTED_GUILDS = "Connected to %d guild(s)"
    BOT_SHUTTING_DOWN = "Shutting down bot"
    BOT_VOICE_CLOSE_ERROR = "Error closing voice sessions: %s"
    BOT_SHUTDOWN_TIMEOUT = "Graceful shutdown exceeded %ss, forcing exit"
    BOT_SHUTDOWN_COMPLETE = "Shutdown complete"

    # Cogs
    COG_LOADED_COMMANDS = "Command cog loaded with %d slash command(s)"
    COG_UNLOADED_COMMANDS = "Command cog unloaded, slash commands removed"


class DiscordUIMessages:
    """User-facing strings sent to Discord."""

    GORILLA_REPLY = ":gorilla: :gorilla: :gorilla:"
    ROAR_ACK = ":gorilla: On my way to {channel}!"

    STATE_NEED_TO_BE_IN_VOICE = "Join a voice channel then try again!"
    STATE_SERVER_ONLY = "This command can only be used in a server."

    ERROR_COMMAND_FAILED = "There was an error while executing this command!"
