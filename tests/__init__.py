"""ratiolint test suite.

Folder taxonomy
- unit/       : Isolated, fast checks of a single module/class/function.
- e2e/        : The ``ratiolint`` command driven through Click's CliRunner.
- fixtures/   : Shared pytest fixtures (no tests here).

General guidance
- Keep unit fast and deterministic (no real I/O).
- e2e asserts user-observable results: stdout, stderr, exit status and files.
"""
