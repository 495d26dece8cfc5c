#!/usr/bin/env python3
"""
Main entry point for the domain resolution tool.
This script serves as a wrapper around the digtrace package's main function.
"""

from digtrace.main import main

if __name__ == "__main__":
    main()
