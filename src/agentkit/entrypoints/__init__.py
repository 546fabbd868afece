"""Entrypoints (inbound adapters) for agentkit.

Expose the application to the outside world through the CLI. Parse and validate
inputs, call into the domain layer, and present results.
"""
