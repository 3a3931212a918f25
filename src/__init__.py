"""
Content Benchmark Engine

Core of the content-generation pipeline:
1. Averages five competitor pages into precise statistical benchmarks
2. Derives exact optimization targets for the content generator
3. Runs bulk generation jobs with bounded concurrency, retry and progress tracking
"""

__version__ = "0.1.0"
