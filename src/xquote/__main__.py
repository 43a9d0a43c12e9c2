# src/xquote/__main__.py
"""Module entry point: python -m xquote"""
import sys

from xquote.app import main

sys.exit(main())
