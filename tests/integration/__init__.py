"""Integration tests.

Purpose
- Exercise the loader against real files and the shell factory against real
  child processes.

Guidelines
- Use `tmp_path` for files; never touch paths outside it.
- Keep commands POSIX-portable and fast.
"""
