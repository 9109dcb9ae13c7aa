# -*- coding: utf-8 -*-
"""
Development Environment Quicklaunch.

Starts an IDE with a list of solutions, a database management studio,
a text editor and any additional tools with one click.

Version: 1.0.0
"""

from .constants import APP_NAME, APP_VERSION, APP_AUTHOR

__version__ = APP_VERSION
__author__ = APP_AUTHOR

__all__ = [
    'APP_NAME',
    'APP_VERSION',
    'APP_AUTHOR',
]
