"""Business Ideas API: ideas, validations, business plans and implementation tracking."""

__version__ = "1.0.0"
