"""Core building blocks: config, protocols, context access."""
