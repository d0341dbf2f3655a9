"""
Domain Layer

Framework-free pieces of the bot:
- shared/: exceptions, domain events and message constants
"""
