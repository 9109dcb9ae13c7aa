#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Allow running as a module: python -m devenv_quicklaunch
"""

import sys
from .main import main

if __name__ == "__main__":
    sys.exit(main())
