"""agentkit

Command-line support utilities for scaffolding agents: a sanitizer that turns
free-form agent names into repository-safe identifiers, and semantic console
messages where color carries meaning.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
