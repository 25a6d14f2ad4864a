"""Domain layer — the CNPJ identifier engine and its value types.

This layer depends only on the standard library.
It must never import from services, commands, output, or config.
"""
