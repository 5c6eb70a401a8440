#!/usr/bin/env python3
"""
Convenience entry point for running datepicker directly.

Usage: python -m datepicker [command] [options]
"""

from .cli.app import app

if __name__ == "__main__":
    app()
