"""reqgate — command requirement validation for IaC pull request workflows."""

__version__ = "0.1.0"
