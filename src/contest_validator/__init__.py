"""contest-validator core package.

Cross-file referential-integrity checks for the contest dataset (handles,
teams, organizations, contests and findings), callable from the CLI or from
other tooling through ``core.validate_dataset``.
"""

__all__ = [
    "core",
]
