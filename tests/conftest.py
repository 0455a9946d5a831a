"""
Pytest configuration for CB tests.
"""
import sys
import os

# `import cb...` needs src/ on sys.path when the package is not installed
_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
_SRC_DIR = os.path.join(_ROOT, 'src')

if _SRC_DIR not in sys.path:
	sys.path.insert(0, _SRC_DIR)
