"""
Benchmark suite for jtree parsing performance.

Compares jtree against established JSON readers:
- Python standard library json
- orjson (Rust-backed)
- ujson (C-backed)

Measures parsing speed and peak memory across document shapes. jtree builds
an immutable value tree in pure Python, so the point is tracking its own
trend across changes rather than matching the native readers.
"""
