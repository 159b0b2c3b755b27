"""
Run with: python -m calcconverter
"""
import sys

from calcconverter.main import main

if __name__ == "__main__":
    sys.exit(main())
