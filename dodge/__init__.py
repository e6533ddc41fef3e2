"""Dodge the Virus - avoid a growing swarm of bouncing viruses."""

__version__ = "0.1.0"
