"""Core building blocks shared by every layer (config, errors, results)."""
