"""agentkit command-line interface."""
