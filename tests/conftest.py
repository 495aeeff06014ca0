"""Shared test setup: makes the hand-written fakes importable from any test directory."""

import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "fakes"))
