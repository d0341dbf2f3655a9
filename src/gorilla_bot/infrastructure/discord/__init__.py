"""Discord client, cogs and command definitions."""
