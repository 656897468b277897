"""LiftLog: strength-training session tracking and analytics service."""

__version__ = "0.1.0"
