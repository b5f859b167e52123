"""d20sheet - ability, saving throw and class progression engine for d20 characters."""

__version__ = "0.1.0"
