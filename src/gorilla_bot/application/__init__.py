"""
Application Layer

Orchestration that sits between Discord events and the domain:
- commands/: slash command descriptors and the command registry
- services/: voice session orchestration
"""
