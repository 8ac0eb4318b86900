"""
Pytest configuration file for proper Unicode/UTF-8 handling.

Vietnamese test data is printed with -s; force UTF-8 on consoles that
default to a legacy code page.
"""

import os
import sys

os.environ['PYTHONIOENCODING'] = 'utf-8'

if sys.platform == 'win32' and hasattr(sys.stdout, 'reconfigure'):
    sys.stdout.reconfigure(encoding='utf-8', errors='replace')
    sys.stderr.reconfigure(encoding='utf-8', errors='replace')
