"""Decision checks, one module per step. Registration order is precedence order."""
