"""Hardware module: GPIO power/reset control for NanoKVM style boards.

Detects the board variant once at startup and exposes power state and
button presses over the variant's sysfs GPIO lines.
"""
