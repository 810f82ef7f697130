"""CSC core: errors, configuration, expression tree and expression language."""
