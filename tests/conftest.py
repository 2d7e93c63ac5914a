# tests/conftest.py
import os
import sys

# repo root on sys.path so tests can import 'lotto_assist' without installing
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if project_root not in sys.path:
    sys.path.insert(0, project_root)
