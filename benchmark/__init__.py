"""
Benchmark Module

Benchmark harness and reporting for the packing strategies.

This module provides:
- YAML-based configuration loading
- Repeated-trial harness with wall-clock timing
- Typeset result/time tables and Markdown reports
- Artifact storage and bar chart plots
- CLI for running benchmarks
"""

__version__ = "0.1.0"
