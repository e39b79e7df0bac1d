#!/usr/bin/env python3
"""
FizzBuzz benchmark: labels for 1..100, no timing of its own.

Usage:
    python bench/fizzbuzz.py
    hyperfine "python bench/fizzbuzz.py"
"""

from __future__ import annotations

import logging

from perfclock.demos.fizzbuzz import bench_main

if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING)
    raise SystemExit(bench_main())
