#!/usr/bin/env python3
"""
FizzBuzz example, timed with performance.now().

Prints the labels for 1..100, then the end timestamp and the execution time in ms.

Usage:
    python examples/fizzbuzz.py
"""

from __future__ import annotations

import logging

from perfclock.demos.fizzbuzz import main

if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING)
    raise SystemExit(main())
