"""Records, role checks, routing and message texts for a Telegram channel join-request bot."""

__version__ = "0.1.0"